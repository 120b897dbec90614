"""Load and validate the TresJS documentation site configuration.

This subpackage parses the project's ``site.yaml`` file and produces immutable
dataclasses (:class:`SiteConfig`, :class:`ThemeConfig`, :class:`NavLink`,
:class:`NavGroup`, etc.) that the host config renderer and CLI consume. The
primary entry point is :func:`load_site_config`, which rejects malformed
entries eagerly with a :class:`SiteConfigError` naming the offending location.

Examples
--------
>>> from pathlib import Path
>>> from tres_docs.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.is_foreign_tag("TresMesh")  # doctest: +SKIP
True
"""

from .loader import load_site_config
from .models import (
    AliasRule,
    BundlerConfig,
    CompilerConfig,
    HeadTag,
    NavGroup,
    NavItem,
    NavLink,
    ResolveConfig,
    SearchConfig,
    SiteConfig,
    SiteConfigError,
    SocialLink,
    ThemeConfig,
)

__all__ = [
    "AliasRule",
    "BundlerConfig",
    "CompilerConfig",
    "HeadTag",
    "NavGroup",
    "NavItem",
    "NavLink",
    "ResolveConfig",
    "SearchConfig",
    "SiteConfig",
    "SiteConfigError",
    "SocialLink",
    "ThemeConfig",
    "load_site_config",
]
