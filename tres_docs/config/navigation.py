"""Navigation bar and sidebar configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import _require_str
from .models import NavGroup, NavItem, NavLink, SiteConfigError


def _build_nav_items(entries: object | None, *, location: str) -> tuple[NavItem, ...]:
    """Build an ordered tuple of navigation items from a YAML list.

    Parameters
    ----------
    entries : object or None
        Raw YAML value; must be a list of mappings. ``None`` yields an empty
        tuple so a site may omit its nav bar or sidebar entirely.
    location : str
        Dotted path of ``entries`` inside the config, used in error messages.

    Returns
    -------
    tuple[NavItem, ...]
        Items in declared order.

    Raises
    ------
    SiteConfigError
        If ``entries`` is not a list or any entry is malformed.
    """
    match entries:
        case None:
            return ()
        case list() as items:
            return tuple(
                _build_nav_item(entry, location=f"{location}[{index}]")
                for index, entry in enumerate(items)
            )
        case _:
            msg = f"'{location}' must be a list of navigation entries."
            raise SiteConfigError(msg)


def _build_nav_item(entry: object, *, location: str) -> NavItem:
    """Build a single link or group, recursing into nested ``items``."""
    match entry:
        case {"link": _, "items": _}:
            msg = f"'{location}' must define either 'link' or 'items', not both."
            raise SiteConfigError(msg)
        case {"link": link, **rest}:
            label = _require_str(rest.get("text"), location=f"{location}.text")
            href = _require_str(link, location=f"{location}.link")
            return NavLink(text=label, link=href)
        case {"items": children, **rest}:
            label = _require_str(rest.get("text"), location=f"{location}.text")
            items = _build_nav_items(children, location=f"{location}.items")
            if not items:
                msg = f"'{location}.items' must contain at least one entry."
                raise SiteConfigError(msg)
            return NavGroup(text=label, items=items)
        case dict():
            _require_str(entry.get("text"), location=f"{location}.text")
            msg = f"'{location}' needs a 'link' or a non-empty 'items' list."
            raise SiteConfigError(msg)
        case _:
            msg = f"'{location}' must be a mapping."
            raise SiteConfigError(msg)


def _nav_item_payload(item: NavItem) -> dict[str, typ.Any]:
    """Serialize ``item`` into the mapping shape the host consumes."""
    match item:
        case NavLink(text=text, link=link):
            return {"text": text, "link": link}
        case NavGroup(text=text, items=items):
            return {"text": text, "items": [_nav_item_payload(child) for child in items]}
    msg = f"Unsupported navigation item: {item!r}"
    raise TypeError(msg)


__all__ = ["_build_nav_item", "_build_nav_items", "_nav_item_payload"]
