"""Render the validated site configuration into the VitePress config module.

This module turns a :class:`~tres_docs.config.SiteConfig` into the
``docs/.vitepress/config.mts`` file VitePress loads at build time. The host
receives exactly the data the loader validated: metadata and head tags, the
theme block with the nav and sidebar trees, bundler resolution rules, and the
``isCustomElement`` predicate emitted from the configured classifier.

Typical usage mirrors the ``tres-docs render`` command:

>>> from pathlib import Path
>>> from tres_docs.config import load_site_config
>>> builder = HostConfigBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('docs/.vitepress/config.mts')

Alias rules that point at files are emitted as ``resolve(__dirname, ...)``
calls relative to the output directory, so the generated module stays portable
across checkouts.
"""

from __future__ import annotations

import json
import os
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .navigation import nav_to_payload

if typ.TYPE_CHECKING:
    from .config import AliasRule, SiteConfig

TEMPLATE_NAME = "vitepress_config.mts.jinja"


def _to_js(value: object, indent: int = 0) -> str:
    """Dump ``value`` as a JS literal, re-indenting continuation lines."""
    text = json.dumps(value, indent=2, ensure_ascii=False)
    return text.replace("\n", "\n" + " " * indent)


class HostConfigBuilder:
    """Render the VitePress host configuration from a site config."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        output: Path | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Validated configuration loaded from ``config/site.yaml``.
        output : Path, optional
            Override for the generated module path; defaults to
            ``site.output``.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``tres_docs/templates``.
        """
        self.site = site
        self.output = output or site.output
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["js"] = _to_js
        self.template = self.env.get_template(TEMPLATE_NAME)

    def context(self) -> dict[str, typ.Any]:
        """Build the template context; values are plain JSON-compatible data."""
        site = self.site
        theme = site.theme
        theme_config: dict[str, typ.Any] = {}
        if theme.logo:
            theme_config["logo"] = theme.logo
        search: dict[str, typ.Any] = {"provider": theme.search.provider}
        if theme.search.options:
            search["options"] = _algolia_options(theme.search.options)
        theme_config["search"] = search
        theme_config["sidebar"] = nav_to_payload(theme.sidebar)
        theme_config["nav"] = nav_to_payload(theme.nav)
        theme_config["socialLinks"] = [
            {"icon": social.icon, "link": social.link} for social in theme.social_links
        ]
        bundler = site.bundler
        return {
            "title": site.title,
            "description": site.description,
            "head": [[tag.tag, dict(tag.attrs)] for tag in site.head],
            "theme_config": theme_config,
            "optimize_deps": {
                "exclude": list(bundler.optimize_exclude),
                "include": list(bundler.optimize_include),
            },
            "hmr_overlay": bundler.hmr_overlay,
            "aliases": [self._alias_entry(rule) for rule in bundler.resolve.aliases],
            "dedupe": sorted(bundler.resolve.dedupe),
            "is_custom_element": site.compiler.classifier.to_js_expression(),
        }

    def render(self) -> str:
        """Render the module source text."""
        text = self.template.render(**self.context())
        if not text.endswith("\n"):
            text += "\n"
        return text

    def run(self) -> Path:
        """Render and write the host config module, returning its path."""
        output_path = self.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path

    def _alias_entry(self, rule: AliasRule) -> dict[str, typ.Any]:
        if not rule.is_path:
            return {"specifier": rule.specifier, "target": rule.target, "is_path": False}
        relative = os.path.relpath(rule.target, self.output.resolve().parent)
        return {
            "specifier": rule.specifier,
            "target": Path(relative).as_posix(),
            "is_path": True,
        }


def _algolia_options(options: typ.Iterable[tuple[str, str]]) -> dict[str, str]:
    """Translate snake_case option keys into the camelCase the host expects."""
    result: dict[str, str] = {}
    for key, value in options:
        head, *rest = key.split("_")
        result[head + "".join(part.title() for part in rest)] = value
    return result


__all__ = ["HostConfigBuilder"]
