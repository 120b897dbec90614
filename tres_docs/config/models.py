"""Typed dataclasses describing the TresJS docs site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from tres_docs._constants import DEFAULT_HOST_OUTPUT
from tres_docs.classifier import ElementClassifier


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class NavLink:
    """A navigation entry pointing at an in-site path or an external URL."""

    text: str
    link: str

    def __post_init__(self) -> None:
        if not self.text:
            msg = "Navigation entries require a non-empty 'text'."
            raise SiteConfigError(msg)
        if not self.link:
            msg = f"Navigation link '{self.text}' requires a non-empty 'link'."
            raise SiteConfigError(msg)


@dc.dataclass(frozen=True, slots=True)
class NavGroup:
    """A labelled group of navigation entries, possibly nested further."""

    text: str
    items: tuple[NavItem, ...]

    def __post_init__(self) -> None:
        if not self.text:
            msg = "Navigation entries require a non-empty 'text'."
            raise SiteConfigError(msg)
        items = tuple(self.items)
        if not items:
            msg = f"Navigation group '{self.text}' requires at least one item."
            raise SiteConfigError(msg)
        for item in items:
            if not isinstance(item, NavLink | NavGroup):
                msg = (
                    f"Navigation group '{self.text}' contains a non-navigation "
                    f"item: {item!r}"
                )
                raise SiteConfigError(msg)
        object.__setattr__(self, "items", items)


NavItem: typ.TypeAlias = NavLink | NavGroup


@dc.dataclass(frozen=True, slots=True)
class HeadTag:
    """A single element injected into every page ``<head>``."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SocialLink:
    """Icon link shown in the navigation bar."""

    icon: str
    link: str


@dc.dataclass(frozen=True, slots=True)
class SearchConfig:
    """Search provider selection handed to the host."""

    provider: str = "local"
    options: tuple[tuple[str, str], ...] = ()


@dc.dataclass(frozen=True, slots=True)
class ThemeConfig:
    """Theme-level settings: logo, search, navigation, and social links."""

    nav: tuple[NavItem, ...]
    sidebar: tuple[NavItem, ...]
    logo: str | None = None
    search: SearchConfig = dc.field(default_factory=SearchConfig)
    social_links: tuple[SocialLink, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class AliasRule:
    """Rewrite an import specifier to a filesystem path or a package name.

    Attributes
    ----------
    specifier : str
        Import specifier as written in source files (``@tresjs/core``).
    target : str
        Package name, or the absolute filesystem path when ``is_path`` is set.
    is_path : bool
        Whether ``target`` names a file resolved from the config directory.
    """

    specifier: str
    target: str
    is_path: bool = False


@dc.dataclass(frozen=True, slots=True)
class ResolveConfig:
    """Bundler dependency resolution rules."""

    aliases: tuple[AliasRule, ...] = ()
    dedupe: frozenset[str] = frozenset()


@dc.dataclass(frozen=True, slots=True)
class BundlerConfig:
    """Settings forwarded to the bundler untouched."""

    optimize_include: tuple[str, ...] = ()
    optimize_exclude: tuple[str, ...] = ()
    hmr_overlay: bool = True
    resolve: ResolveConfig = dc.field(default_factory=ResolveConfig)


@dc.dataclass(frozen=True, slots=True)
class CompilerConfig:
    """Template compiler options covering custom-element detection."""

    classifier: ElementClassifier = dc.field(default_factory=ElementClassifier)


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """The fully validated documentation site configuration."""

    title: str
    description: str
    theme: ThemeConfig
    head: tuple[HeadTag, ...] = ()
    bundler: BundlerConfig = dc.field(default_factory=BundlerConfig)
    compiler: CompilerConfig = dc.field(default_factory=CompilerConfig)
    output: Path = DEFAULT_HOST_OUTPUT

    def is_foreign_tag(self, tag: str) -> bool:
        """Classify ``tag`` with the configured custom-element rule."""
        return self.compiler.classifier.is_foreign_tag(tag)


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
]
