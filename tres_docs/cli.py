"""Cyclopts CLI entrypoint for the TresJS documentation site configuration.

The ``tres-docs`` console script defined here validates ``config/site.yaml``,
renders it into the VitePress host config module, and offers small inspection
helpers: classifying template tags with the custom-element rule, printing the
nav and sidebar trees, and checking bundler dedupe targets against
``package.json``. Typical usage runs ``tres-docs render`` before
``vitepress build`` and ``tres-docs check --strict`` in CI.

Examples
--------
Render the host config for the default configuration:

>>> from tres_docs.cli import main
>>> main()  # doctest: +SKIP

Classify a few tags:

>>> from tres_docs.cli import app
>>> app(["classify", "TresCanvas", "TresMesh"])  # doctest: +SKIP
TresCanvas: component
TresMesh: foreign
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG, DEFAULT_MANIFEST
from .classifier import DEFAULT_CLASSIFIER
from .config import load_site_config
from .dependencies import (
    ensure_dedupe_reachable,
    find_unreachable_dedupe,
    load_manifest_packages,
)
from .host_config import HostConfigBuilder
from .navigation import format_nav_tree, navigation_payload, walk_nav

app = App(name="tres-docs", config=cyclopts.config.Env("TRES_DOCS_", command=False))


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


@app.command(help="Render the VitePress config module from the site config.")
def render(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="TRES_DOCS_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the generated module path", env_var="TRES_DOCS_OUTPUT"),
    ] = None,
) -> None:
    """Validate the site config and write the host config module.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    output : Path or None, optional
        Where to write the module; defaults to the ``output`` key of the
        configuration (``docs/.vitepress/config.mts``).

    Raises
    ------
    SiteConfigError
        If the configuration is malformed.
    """
    site = load_site_config(config)
    written = HostConfigBuilder(site, output=output).run()
    print(f"wrote {_format_path(written)}")


@app.command(help="Classify template tags as foreign elements or components.")
def classify(
    *tags: str,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Read the rule from this site config", env_var="TRES_DOCS_CONFIG"),
    ] = None,
    as_json: typ.Annotated[
        bool, Parameter(name="--json", help="Emit a JSON list")
    ] = False,
) -> None:
    """Print whether each tag bypasses component resolution.

    Without ``config`` the built-in TresJS rule is used: tags starting with
    ``Tres`` are foreign, except ``TresCanvas``.
    """
    classifier = (
        DEFAULT_CLASSIFIER
        if config is None
        else load_site_config(config).compiler.classifier
    )
    results = classifier.classify_tags(tags)
    if as_json:
        payload = [
            {"tag": tag, "foreign": foreign}
            for tag, foreign in zip(tags, results, strict=True)
        ]
        print(json.dumps(payload))
        return
    for tag, foreign in zip(tags, results, strict=True):
        print(f"{tag}: {'foreign' if foreign else 'component'}")


@app.command(help="Print the navigation bar and sidebar trees.")
def nav(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="TRES_DOCS_CONFIG")
    ] = DEFAULT_CONFIG,
    as_json: typ.Annotated[
        bool, Parameter(name="--json", help="Emit the host JSON payload")
    ] = False,
) -> None:
    """Print the nav and sidebar in declared order."""
    site = load_site_config(config)
    if as_json:
        print(json.dumps(navigation_payload(site), ensure_ascii=False))
        return
    for heading, items in (("nav", site.theme.nav), ("sidebar", site.theme.sidebar)):
        print(f"{heading}:")
        for line in format_nav_tree(items):
            print(f"  {line}")


@app.command(help="Validate the site config and bundler dedupe targets.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="TRES_DOCS_CONFIG")
    ] = DEFAULT_CONFIG,
    manifest: typ.Annotated[
        Path,
        Parameter(help="Path to package.json", env_var="TRES_DOCS_MANIFEST"),
    ] = DEFAULT_MANIFEST,
    strict: typ.Annotated[
        bool, Parameter(help="Fail when dedupe targets are unreachable")
    ] = False,
) -> None:
    """Validate the configuration and report unreachable dedupe targets.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    manifest : Path, optional
        ``package.json`` whose dependency tables define reachable packages.
    strict : bool, optional
        Raise instead of warning when a dedupe target is unreachable.

    Raises
    ------
    SiteConfigError
        If the configuration is malformed.
    DedupeResolutionError
        If ``strict`` is set and a dedupe target is unreachable.
    """
    site = load_site_config(config)
    packages = load_manifest_packages(manifest)
    resolve = site.bundler.resolve
    if strict:
        ensure_dedupe_reachable(resolve, packages)
    for name in find_unreachable_dedupe(resolve, packages):
        print(f"warning: dedupe target '{name}' is not in {_format_path(manifest)}")
    entries = sum(1 for _ in walk_nav(site.theme.nav)) + sum(
        1 for _ in walk_nav(site.theme.sidebar)
    )
    print(f"ok: {_format_path(config)} ({entries} navigation entries)")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``tres-docs`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
