"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from tres_docs._constants import DEFAULT_HOST_OUTPUT

from .bundler import _build_bundler_config, _build_compiler_config
from .helpers import _require_mapping, _require_str
from .models import SiteConfig
from .theme import _build_head_tags, _build_theme_config


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Alias ``path`` entries are resolved relative to
        the directory holding this file.

    Returns
    -------
    SiteConfig
        Immutable site configuration: metadata, head tags, theme with the nav
        and sidebar trees, bundler rules, and the custom-element classifier.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or malformed, such as a
        navigation entry with neither a ``link`` nor child ``items``.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tres_docs.config import load_site_config
    >>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> [item.text for item in site.theme.nav]  # doctest: +SKIP
    ['Guide', 'API', 'Resources']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.resolve().parent

    site = _require_mapping(raw.get("site"), location="site", default_empty=False)
    theme = _require_mapping(raw.get("theme"), location="theme")
    bundler = _require_mapping(raw.get("bundler"), location="bundler")

    return SiteConfig(
        title=_require_str(site.get("title"), location="site.title"),
        description=_require_str(site.get("description"), location="site.description"),
        head=_build_head_tags(site.get("head")),
        theme=_build_theme_config(theme),
        bundler=_build_bundler_config(bundler, base_dir=base_dir),
        compiler=_build_compiler_config(raw.get("compiler")),
        output=Path(raw.get("output") or DEFAULT_HOST_OUTPUT),
    )


__all__ = ["load_site_config"]
