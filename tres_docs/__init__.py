"""Configuration for the TresJS documentation site.

This package validates ``config/site.yaml`` and renders it into the VitePress
host config consumed by ``vitepress dev`` and ``vitepress build``. It exposes
the CLI entry points used by ``uv run tres-docs``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``is_foreign_tag``: The TresJS custom-element predicate.

Examples
--------
>>> from tres_docs import is_foreign_tag
>>> is_foreign_tag("TresPerspectiveCamera")
True
>>> from tres_docs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .classifier import is_foreign_tag
from .cli import app, main

__all__ = ["app", "is_foreign_tag", "main"]
