"""Traversal and serialization helpers for navigation trees.

Nav bar and sidebar entries are immutable :class:`~tres_docs.config.NavLink`
and :class:`~tres_docs.config.NavGroup` values. The helpers here walk them in
declared order and convert them to and from the plain mapping shape the
VitePress theme consumes.

Examples
--------
>>> from tres_docs.config import NavGroup, NavLink
>>> tree = (NavGroup("Guide", (NavLink("Intro", "/guide/"),)),)
>>> [(depth, item.text) for depth, item in walk_nav(tree)]
[(0, 'Guide'), (1, 'Intro')]
>>> nav_to_payload(tree)
[{'text': 'Guide', 'items': [{'text': 'Intro', 'link': '/guide/'}]}]
"""

from __future__ import annotations

import typing as typ
from urllib.parse import urlsplit

from .config.models import NavGroup, NavItem, NavLink
from .config.navigation import _build_nav_items, _nav_item_payload

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config.models import SiteConfig


def walk_nav(
    items: cabc.Iterable[NavItem], *, depth: int = 0
) -> cabc.Iterator[tuple[int, NavItem]]:
    """Yield ``(depth, item)`` pairs depth-first in declared order."""
    for item in items:
        yield depth, item
        if isinstance(item, NavGroup):
            yield from walk_nav(item.items, depth=depth + 1)


def iter_links(items: cabc.Iterable[NavItem]) -> cabc.Iterator[NavLink]:
    """Yield every leaf link in traversal order."""
    for _depth, item in walk_nav(items):
        if isinstance(item, NavLink):
            yield item


def is_external_link(link: str) -> bool:
    """Return True when ``link`` carries a URL scheme.

    >>> is_external_link("https://cientos.tresjs.org/")
    True
    >>> is_external_link("/guide/getting-started")
    False
    """
    return bool(urlsplit(link).scheme)


def nav_to_payload(items: cabc.Iterable[NavItem]) -> list[dict[str, typ.Any]]:
    """Serialize navigation items into plain ``text``/``link``/``items`` dicts."""
    return [_nav_item_payload(item) for item in items]


def nav_from_payload(
    payload: object, *, location: str = "nav"
) -> tuple[NavItem, ...]:
    """Rebuild navigation items from their serialized form.

    Raises
    ------
    SiteConfigError
        If any entry is malformed; ``location`` prefixes the error path.
    """
    return _build_nav_items(payload, location=location)


def navigation_payload(site: SiteConfig) -> dict[str, list[dict[str, typ.Any]]]:
    """Return the ``{"nav": ..., "sidebar": ...}`` shape the host renders."""
    return {
        "nav": nav_to_payload(site.theme.nav),
        "sidebar": nav_to_payload(site.theme.sidebar),
    }


def format_nav_tree(items: cabc.Iterable[NavItem]) -> list[str]:
    """Render a tree as indented text lines, marking external links."""
    lines: list[str] = []
    for depth, item in walk_nav(items):
        indent = "  " * depth
        match item:
            case NavLink(text=text, link=link):
                marker = " (external)" if is_external_link(link) else ""
                lines.append(f"{indent}- {text} -> {link}{marker}")
            case NavGroup(text=text):
                lines.append(f"{indent}- {text}")
    return lines


__all__ = [
    "format_nav_tree",
    "is_external_link",
    "iter_links",
    "nav_from_payload",
    "nav_to_payload",
    "navigation_payload",
    "walk_nav",
]
