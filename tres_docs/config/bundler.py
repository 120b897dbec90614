"""Bundler and template compiler configuration builders."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from tres_docs.classifier import ElementClassifier

from .helpers import _require_mapping, _require_str, _string_list
from .models import (
    AliasRule,
    BundlerConfig,
    CompilerConfig,
    ResolveConfig,
    SiteConfigError,
)


def _build_bundler_config(
    payload: typ.Mapping[str, typ.Any], *, base_dir: Path
) -> BundlerConfig:
    """Build bundler settings, resolving alias paths against ``base_dir``."""
    optimize = _require_mapping(
        payload.get("optimize_deps"), location="bundler.optimize_deps"
    )
    hmr_overlay = payload.get("hmr_overlay", True)
    if not isinstance(hmr_overlay, bool):
        msg = "'bundler.hmr_overlay' must be a boolean."
        raise SiteConfigError(msg)
    return BundlerConfig(
        optimize_include=tuple(
            _string_list(optimize.get("include"), location="bundler.optimize_deps.include")
        ),
        optimize_exclude=tuple(
            _string_list(optimize.get("exclude"), location="bundler.optimize_deps.exclude")
        ),
        hmr_overlay=hmr_overlay,
        resolve=_build_resolve_config(payload.get("resolve"), base_dir=base_dir),
    )


def _build_resolve_config(payload: object | None, *, base_dir: Path) -> ResolveConfig:
    """Build alias rules and the dedupe set."""
    data = _require_mapping(payload, location="bundler.resolve")
    aliases = _build_alias_rules(data.get("alias"), base_dir=base_dir)
    dedupe = _string_list(data.get("dedupe"), location="bundler.resolve.dedupe")
    return ResolveConfig(aliases=aliases, dedupe=frozenset(dedupe))


def _build_alias_rules(
    entries: object | None, *, base_dir: Path
) -> tuple[AliasRule, ...]:
    """Build alias rules; each entry names exactly one of ``path`` or ``package``."""
    match entries:
        case None:
            return ()
        case list() as items:
            iterable = items
        case _:
            msg = "'bundler.resolve.alias' must be a list."
            raise SiteConfigError(msg)
    rules: list[AliasRule] = []
    seen: set[str] = set()
    for index, entry in enumerate(iterable):
        location = f"bundler.resolve.alias[{index}]"
        match entry:
            case {"specifier": specifier, "path": path, "package": _}:
                msg = f"'{location}' must define either 'path' or 'package', not both."
                raise SiteConfigError(msg)
            case {"specifier": specifier, "path": path}:
                raw_path = _require_str(path, location=f"{location}.path")
                target = str((base_dir / raw_path).resolve())
                is_path = True
            case {"specifier": specifier, "package": package}:
                target = _require_str(package, location=f"{location}.package")
                is_path = False
            case _:
                msg = f"'{location}' requires 'specifier' and a 'path' or 'package'."
                raise SiteConfigError(msg)
        name = _require_str(specifier, location=f"{location}.specifier")
        if name in seen:
            msg = f"Duplicate alias specifier '{name}' at '{location}'."
            raise SiteConfigError(msg)
        seen.add(name)
        rules.append(AliasRule(specifier=name, target=target, is_path=is_path))
    return tuple(rules)


def _build_compiler_config(payload: object | None) -> CompilerConfig:
    """Build the custom-element rule from ``compiler.custom_elements``."""
    data = _require_mapping(payload, location="compiler")
    rule = _require_mapping(
        data.get("custom_elements"), location="compiler.custom_elements"
    )
    if not rule:
        return CompilerConfig()
    defaults = ElementClassifier()
    prefix = (
        _require_str(rule["prefix"], location="compiler.custom_elements.prefix")
        if "prefix" in rule
        else defaults.prefix
    )
    exempt = (
        frozenset(_string_list(rule["exempt"], location="compiler.custom_elements.exempt"))
        if "exempt" in rule
        else defaults.exempt
    )
    return CompilerConfig(classifier=ElementClassifier(prefix=prefix, exempt=exempt))


__all__ = [
    "_build_alias_rules",
    "_build_bundler_config",
    "_build_compiler_config",
    "_build_resolve_config",
]
