"""Check bundler dedupe targets against the project's dependency manifest.

The bundler silently ignores ``dedupe`` entries naming packages that are not in
the dependency graph. :func:`find_unreachable_dedupe` surfaces those entries so
``tres-docs check`` can warn about them, or fail under ``--strict``.

A package counts as reachable when it is declared in any dependency table of
``package.json`` or when it is the specifier of a configured alias.

Examples
--------
>>> from tres_docs.config import ResolveConfig
>>> rules = ResolveConfig(dedupe=frozenset({"three", "@tresjs/cientos"}))
>>> find_unreachable_dedupe(rules, {"three"})
['@tresjs/cientos']
"""

from __future__ import annotations

import json
import typing as typ

from .config.models import SiteConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config.models import ResolveConfig

DEPENDENCY_TABLES = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


class DedupeResolutionError(SiteConfigError):
    """Raised when dedupe targets cannot be found in the dependency graph."""

    def __init__(self, packages: cabc.Sequence[str]) -> None:
        self.packages = list(packages)
        names = ", ".join(self.packages)
        super().__init__(f"Dedupe targets not found in the dependency graph: {names}")


def load_manifest_packages(path: Path) -> set[str]:
    """Return every package name declared in a ``package.json`` manifest.

    Raises
    ------
    FileNotFoundError
        If the manifest does not exist.
    TypeError
        If the manifest or one of its dependency tables is not a JSON object.
    """
    if not path.exists():
        msg = f"Manifest file '{path}' not found."
        raise FileNotFoundError(msg)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = "Top-level package manifest must be a JSON object."
        raise TypeError(msg)
    packages: set[str] = set()
    for table in DEPENDENCY_TABLES:
        entries = data.get(table) or {}
        if not isinstance(entries, dict):
            msg = f"'{table}' in {path} must be a JSON object."
            raise TypeError(msg)
        packages.update(entries)
    name = data.get("name")
    if isinstance(name, str) and name:
        packages.add(name)
    return packages


def find_unreachable_dedupe(
    resolve: ResolveConfig, packages: cabc.Collection[str]
) -> list[str]:
    """Return dedupe entries that are neither declared nor aliased, sorted."""
    aliased = {rule.specifier for rule in resolve.aliases}
    return sorted(
        name for name in resolve.dedupe if name not in packages and name not in aliased
    )


def ensure_dedupe_reachable(
    resolve: ResolveConfig, packages: cabc.Collection[str]
) -> None:
    """Raise :class:`DedupeResolutionError` when any dedupe entry is unreachable."""
    missing = find_unreachable_dedupe(resolve, packages)
    if missing:
        raise DedupeResolutionError(missing)


__all__ = [
    "DEPENDENCY_TABLES",
    "DedupeResolutionError",
    "ensure_dedupe_reachable",
    "find_unreachable_dedupe",
    "load_manifest_packages",
]
