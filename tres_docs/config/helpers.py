"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ

from .models import SiteConfigError


def _require_str(value: object | None, *, location: str) -> str:
    """Return a non-empty string or raise naming the config ``location``."""
    match value:
        case str() as text if text.strip():
            return text.strip()
        case None | "":
            msg = f"'{location}' is required."
        case str():
            msg = f"'{location}' must not be blank."
        case _:
            msg = f"'{location}' must be a string, got {type(value).__name__}."
    raise SiteConfigError(msg)


def _require_mapping(
    value: object | None, *, location: str, default_empty: bool = True
) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty when allowed."""
    match value:
        case dict() as data:
            return data
        case None if default_empty:
            return {}
        case _:
            msg = f"'{location}' must be a mapping."
            raise SiteConfigError(msg)


def _string_list(value: object | None, *, location: str) -> list[str]:
    """Normalize a YAML list of strings, preserving declared order."""
    match value:
        case None:
            return []
        case str() as text:
            return [_require_str(text, location=location)]
        case list() as entries:
            return [
                _require_str(entry, location=f"{location}[{index}]")
                for index, entry in enumerate(entries)
            ]
        case _:
            msg = f"'{location}' must be a list of strings."
            raise SiteConfigError(msg)


def _string_mapping(value: object | None, *, location: str) -> dict[str, str]:
    """Coerce a flat mapping of scalars into ``str`` keys and values."""
    payload = _require_mapping(value, location=location)
    result: dict[str, str] = {}
    for key, raw in payload.items():
        match raw:
            case bool():
                result[str(key)] = "true" if raw else "false"
            case str() | int() | float():
                result[str(key)] = str(raw)
            case _:
                msg = f"'{location}.{key}' must be a scalar value."
                raise SiteConfigError(msg)
    return result


__all__ = [
    "_require_mapping",
    "_require_str",
    "_string_list",
    "_string_mapping",
]
