"""Theme, head, search, and social link configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import _require_mapping, _require_str, _string_mapping
from .models import HeadTag, SearchConfig, SiteConfigError, SocialLink, ThemeConfig
from .navigation import _build_nav_items

SEARCH_PROVIDERS = frozenset({"local", "algolia"})
ALGOLIA_REQUIRED_OPTIONS = ("app_id", "api_key", "index_name")


def _build_theme_config(payload: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build the theme block, including both navigation trees."""
    return ThemeConfig(
        nav=_build_nav_items(payload.get("nav"), location="theme.nav"),
        sidebar=_build_nav_items(payload.get("sidebar"), location="theme.sidebar"),
        logo=(
            _require_str(payload["logo"], location="theme.logo")
            if "logo" in payload
            else None
        ),
        search=_build_search_config(payload.get("search")),
        social_links=_build_social_links(payload.get("social_links")),
    )


def _build_search_config(payload: object | None) -> SearchConfig:
    """Build the search provider selection, defaulting to local search."""
    data = _require_mapping(payload, location="theme.search")
    provider = (
        _require_str(data["provider"], location="theme.search.provider")
        if "provider" in data
        else "local"
    )
    if provider not in SEARCH_PROVIDERS:
        known = ", ".join(sorted(SEARCH_PROVIDERS))
        msg = f"Unknown search provider '{provider}'. Known providers: {known}"
        raise SiteConfigError(msg)
    options = _string_mapping(data.get("options"), location="theme.search.options")
    if provider == "algolia":
        missing = [key for key in ALGOLIA_REQUIRED_OPTIONS if not options.get(key)]
        if missing:
            msg = f"Algolia search is missing options: {', '.join(missing)}."
            raise SiteConfigError(msg)
    return SearchConfig(provider=provider, options=tuple(options.items()))


def _build_social_links(entries: object | None) -> tuple[SocialLink, ...]:
    """Build social icon links in declared order."""
    links: list[SocialLink] = []
    match entries:
        case None:
            return ()
        case list() as items:
            iterable = items
        case _:
            msg = "'theme.social_links' must be a list."
            raise SiteConfigError(msg)
    for index, entry in enumerate(iterable):
        location = f"theme.social_links[{index}]"
        match entry:
            case {"icon": icon, "link": link, **_rest}:
                pass
            case _:
                msg = f"'{location}' requires 'icon' and 'link'."
                raise SiteConfigError(msg)
        links.append(
            SocialLink(
                icon=_require_str(icon, location=f"{location}.icon"),
                link=_require_str(link, location=f"{location}.link"),
            )
        )
    return tuple(links)


def _build_head_tags(entries: object | None) -> tuple[HeadTag, ...]:
    """Build ``<head>`` elements, keeping their declared order."""
    tags: list[HeadTag] = []
    match entries:
        case None:
            return ()
        case list() as items:
            iterable = items
        case _:
            msg = "'site.head' must be a list."
            raise SiteConfigError(msg)
    for index, entry in enumerate(iterable):
        location = f"site.head[{index}]"
        match entry:
            case {"tag": tag, **rest}:
                pass
            case _:
                msg = f"'{location}' must be a mapping with a 'tag'."
                raise SiteConfigError(msg)
        tags.append(
            HeadTag(
                tag=_require_str(tag, location=f"{location}.tag"),
                attrs=tuple(
                    _string_mapping(
                        rest.get("attrs"), location=f"{location}.attrs"
                    ).items()
                ),
            )
        )
    return tuple(tags)


__all__ = [
    "ALGOLIA_REQUIRED_OPTIONS",
    "SEARCH_PROVIDERS",
    "_build_head_tags",
    "_build_search_config",
    "_build_social_links",
    "_build_theme_config",
]
