"""Tests for loading ``site.yaml`` into typed configuration.

The first group loads the checked-in ``config/site.yaml`` and asserts the
TresJS site structure survives intact. The remaining tests write small YAML
documents into ``tmp_path`` to exercise validation failures.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from tres_docs.config import (
    NavGroup,
    NavLink,
    SiteConfigError,
    load_site_config,
)
from tres_docs.navigation import walk_nav

REPO_ROOT = Path(__file__).resolve().parents[1]
SITE_CONFIG = REPO_ROOT / "config" / "site.yaml"

MINIMAL_SITE = """
site:
  title: Demo
  description: Demo docs
"""


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(dedent(body).strip() + "\n", encoding="utf-8")
    return path


@pytest.fixture(scope="module")
def tres_site() -> typ.Any:
    """Load the bundled TresJS configuration once per module."""
    return load_site_config(SITE_CONFIG)


def test_bundled_metadata(tres_site: typ.Any) -> None:
    """Title, description, and head tags are read verbatim."""
    assert tres_site.title == "TresJS"
    assert tres_site.description == "Declarative ThreeJS using Vue Components"
    assert [tag.tag for tag in tres_site.head][:2] == ["link", "meta"]
    theme_color = tres_site.head[1]
    assert dict(theme_color.attrs) == {"name": "theme-color", "content": "#82DBC5"}, (
        f"unexpected theme-color tag {theme_color.attrs!r}"
    )
    script = tres_site.head[-1]
    assert script.tag == "script"
    attrs = dict(script.attrs)
    assert attrs["defer"] == "true"
    assert attrs["data-domain"] == "tresjs.org"


def test_bundled_sidebar_groups(tres_site: typ.Any) -> None:
    """The sidebar keeps its five groups in declared order."""
    sidebar = tres_site.theme.sidebar
    assert [group.text for group in sidebar] == [
        "Guide",
        "API",
        "Examples",
        "Advanced",
        "Ecosystem",
    ]
    assert all(isinstance(group, NavGroup) for group in sidebar)
    guide = sidebar[0]
    assert guide.items[0] == NavLink("Introduction", "/guide/")
    assert len(guide.items) == 6, f"expected six guide pages, got {len(guide.items)}"
    assert sidebar[1].items[1].text == "Instances, arguments and props"


def test_bundled_nav_has_nested_ecosystem(tres_site: typ.Any) -> None:
    """The Resources entry nests an Ecosystem group one level deeper."""
    nav = tres_site.theme.nav
    assert [item.text for item in nav] == ["Guide", "API", "Resources"]
    resources = nav[2]
    assert isinstance(resources, NavGroup)
    ecosystem = resources.items[-1]
    assert isinstance(ecosystem, NavGroup)
    assert ecosystem.items == (NavLink("Cientos 💛", "https://cientos.tresjs.org/"),)
    assert [depth for depth, _ in walk_nav(nav)] == [0, 0, 0, 1, 1, 1, 1, 2]


def test_bundled_theme_extras(tres_site: typ.Any) -> None:
    """Logo, search, and social links are carried through."""
    theme = tres_site.theme
    assert theme.logo == "/logo.svg"
    assert theme.search.provider == "local"
    assert [social.icon for social in theme.social_links] == [
        "github",
        "twitter",
        "discord",
    ]


def test_bundled_bundler_rules(tres_site: typ.Any) -> None:
    """Alias paths resolve against the config directory; dedupe is a set."""
    bundler = tres_site.bundler
    assert bundler.optimize_include == ("three",)
    assert bundler.optimize_exclude == ("vitepress",)
    assert bundler.hmr_overlay is False
    (alias,) = bundler.resolve.aliases
    assert alias.specifier == "@tresjs/core"
    assert alias.is_path
    assert Path(alias.target) == REPO_ROOT / "dist" / "tres.js"
    assert bundler.resolve.dedupe == frozenset({"@tresjs/cientos", "three"})


def test_bundled_classifier(tres_site: typ.Any) -> None:
    """The configured rule matches the TresJS defaults."""
    assert tres_site.is_foreign_tag("TresMesh")
    assert not tres_site.is_foreign_tag("TresCanvas")
    assert tres_site.output == Path("docs/.vitepress/config.mts")


def test_minimal_config_uses_defaults(tmp_path: Path) -> None:
    """Only site metadata is required; everything else has defaults."""
    site = load_site_config(_write_config(tmp_path, MINIMAL_SITE))
    assert site.theme.nav == ()
    assert site.theme.sidebar == ()
    assert site.theme.search.provider == "local"
    assert site.bundler.hmr_overlay is True
    assert site.bundler.resolve.dedupe == frozenset()
    assert site.is_foreign_tag("TresMesh")


def test_missing_file(tmp_path: Path) -> None:
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(TypeError, match="mapping"):
        load_site_config(_write_config(tmp_path, "- a\n- b\n"))


def test_site_block_is_required(tmp_path: Path) -> None:
    """Without a ``site`` block there is no title to render."""
    with pytest.raises(SiteConfigError, match="'site' must be a mapping"):
        load_site_config(_write_config(tmp_path, "theme: {}\n"))


def test_title_is_required(tmp_path: Path) -> None:
    """A blank title is reported by location."""
    body = """
    site:
      title: "  "
      description: Demo
    """
    with pytest.raises(SiteConfigError, match=r"'site\.title' must not be blank"):
        load_site_config(_write_config(tmp_path, body))


def test_nav_entry_without_link_or_items(tmp_path: Path) -> None:
    """A bare label in the nav bar is a configuration error."""
    body = MINIMAL_SITE + """
theme:
  nav:
    - text: Guide
      link: /guide/
    - text: Nowhere
"""
    with pytest.raises(SiteConfigError, match=r"theme\.nav\[1\]"):
        load_site_config(_write_config(tmp_path, body))


def test_nav_entry_with_empty_items(tmp_path: Path) -> None:
    """A group must contain at least one entry."""
    body = MINIMAL_SITE + """
theme:
  sidebar:
    - text: Guide
      items: []
"""
    with pytest.raises(SiteConfigError, match="at least one entry"):
        load_site_config(_write_config(tmp_path, body))


def test_nav_entry_missing_text(tmp_path: Path) -> None:
    """Every entry needs a label."""
    body = MINIMAL_SITE + """
theme:
  nav:
    - link: /guide/
"""
    with pytest.raises(SiteConfigError, match=r"'theme\.nav\[0\]\.text' is required"):
        load_site_config(_write_config(tmp_path, body))


def test_nav_entry_with_link_and_items(tmp_path: Path) -> None:
    """An entry cannot be both a link and a group."""
    body = MINIMAL_SITE + """
theme:
  nav:
    - text: Guide
      link: /guide/
      items:
        - {text: Intro, link: /guide/}
"""
    with pytest.raises(SiteConfigError, match="not both"):
        load_site_config(_write_config(tmp_path, body))


def test_unknown_search_provider(tmp_path: Path) -> None:
    """Only providers the host ships are accepted."""
    body = MINIMAL_SITE + """
theme:
  search:
    provider: elastic
"""
    with pytest.raises(SiteConfigError, match="Unknown search provider 'elastic'"):
        load_site_config(_write_config(tmp_path, body))


def test_algolia_requires_credentials(tmp_path: Path) -> None:
    """Algolia search needs its application and index identifiers."""
    body = MINIMAL_SITE + """
theme:
  search:
    provider: algolia
    options:
      app_id: APP
"""
    with pytest.raises(SiteConfigError, match="api_key, index_name"):
        load_site_config(_write_config(tmp_path, body))


def test_alias_package_and_duplicates(tmp_path: Path) -> None:
    """Package aliases keep their name; duplicate specifiers are refused."""
    body = MINIMAL_SITE + """
bundler:
  resolve:
    alias:
      - {specifier: vue, package: vue/dist/vue.esm-bundler.js}
"""
    site = load_site_config(_write_config(tmp_path, body))
    (alias,) = site.bundler.resolve.aliases
    assert alias.target == "vue/dist/vue.esm-bundler.js"
    assert not alias.is_path

    duplicate = body + "      - {specifier: vue, package: vue}\n"
    with pytest.raises(SiteConfigError, match="Duplicate alias specifier 'vue'"):
        load_site_config(_write_config(tmp_path, duplicate))


def test_alias_requires_single_target(tmp_path: Path) -> None:
    """An alias names either a path or a package."""
    body = MINIMAL_SITE + """
bundler:
  resolve:
    alias:
      - {specifier: vue, package: vue, path: ./vue.js}
"""
    with pytest.raises(SiteConfigError, match="not both"):
        load_site_config(_write_config(tmp_path, body))


def test_hmr_overlay_must_be_boolean(tmp_path: Path) -> None:
    """Bundler flags are type-checked."""
    body = MINIMAL_SITE + """
bundler:
  hmr_overlay: sometimes
"""
    with pytest.raises(SiteConfigError, match="boolean"):
        load_site_config(_write_config(tmp_path, body))


def test_custom_element_exemptions(tmp_path: Path) -> None:
    """Extra exempt tags configure the classifier without code changes."""
    body = MINIMAL_SITE + """
compiler:
  custom_elements:
    exempt: [TresCanvas, TresLeches]
"""
    site = load_site_config(_write_config(tmp_path, body))
    assert not site.is_foreign_tag("TresLeches")
    assert site.compiler.classifier.prefix == "Tres"


@pytest.mark.parametrize(
    ("prefix_yaml", "message"),
    [
        ("''", r"'compiler\.custom_elements\.prefix' is required"),
        ("[a]", r"'compiler\.custom_elements\.prefix' must be a string, got list"),
        ("42", r"'compiler\.custom_elements\.prefix' must be a string, got int"),
    ],
)
def test_custom_element_prefix_is_validated(
    tmp_path: Path, prefix_yaml: str, message: str
) -> None:
    """An explicit prefix must be a non-empty string; nothing is coerced."""
    body = MINIMAL_SITE + f"""
compiler:
  custom_elements:
    prefix: {prefix_yaml}
"""
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write_config(tmp_path, body))


def test_custom_element_prefix_override(tmp_path: Path) -> None:
    """A valid prefix replaces the TresJS default."""
    body = MINIMAL_SITE + """
compiler:
  custom_elements:
    prefix: Cientos
    exempt: []
"""
    site = load_site_config(_write_config(tmp_path, body))
    assert site.is_foreign_tag("CientosOrbitControls")
    assert not site.is_foreign_tag("TresMesh")


@pytest.mark.parametrize(
    ("key_yaml", "message"),
    [
        ("logo: [a.svg]", r"'theme\.logo' must be a string, got list"),
        ("logo: ''", r"'theme\.logo' is required"),
        ("search: {provider: 3}", r"'theme\.search\.provider' must be a string"),
    ],
)
def test_theme_strings_are_not_coerced(
    tmp_path: Path, key_yaml: str, message: str
) -> None:
    """Theme scalars reject non-string YAML instead of stringifying it."""
    body = MINIMAL_SITE + f"""
theme:
  {key_yaml}
"""
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write_config(tmp_path, body))


def test_loaded_config_is_hashable_and_frozen(tres_site: typ.Any) -> None:
    """Every nested structure is immutable, so the whole config hashes."""
    assert isinstance(hash(tres_site), int)
    assert isinstance(tres_site.head[0].attrs, tuple)
    assert isinstance(tres_site.theme.search.options, tuple)
