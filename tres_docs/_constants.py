"""Common literal values used across tres_docs.

These constants keep the custom-element rule and default file locations
centralized so the loader, renderer, CLI, and tests import the same values
without drifting. Intended for internal use within the tres_docs package.

Examples
--------
>>> from tres_docs import _constants
>>> _constants.FOREIGN_TAG_PREFIX
'Tres'
>>> sorted(_constants.EXEMPT_TAGS)
['TresCanvas']
"""

from pathlib import Path

FOREIGN_TAG_PREFIX = "Tres"
EXEMPT_TAGS = frozenset({"TresCanvas"})

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_MANIFEST = Path("package.json")
DEFAULT_HOST_OUTPUT = Path("docs/.vitepress/config.mts")
