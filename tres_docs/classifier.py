"""Custom-element classification for the Vue template compiler.

The TresJS library registers exactly one real Vue component (``TresCanvas``);
every other ``Tres*`` tag is resolved by the custom renderer at runtime and
must be passed through by the template compiler untouched. This module encodes
that rule as a prefix match with an explicit exemption set.

Examples
--------
>>> from tres_docs.classifier import is_foreign_tag
>>> is_foreign_tag("TresMesh")
True
>>> is_foreign_tag("TresCanvas")
False
>>> is_foreign_tag("tresmesh")
False
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ

from ._constants import EXEMPT_TAGS, FOREIGN_TAG_PREFIX

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class ElementClassifier:
    """Decide whether a template tag is a foreign (custom) element.

    Attributes
    ----------
    prefix : str
        Case-sensitive tag prefix shared by the library's elements.
    exempt : frozenset[str]
        Exact tag names that carry the prefix but are real components.
    """

    prefix: str = FOREIGN_TAG_PREFIX
    exempt: frozenset[str] = EXEMPT_TAGS

    def __post_init__(self) -> None:
        if not self.prefix:
            msg = "Custom element prefix must be a non-empty string."
            raise ValueError(msg)
        object.__setattr__(self, "exempt", frozenset(self.exempt))

    def __call__(self, tag: str) -> bool:
        return self.is_foreign_tag(tag)

    def is_foreign_tag(self, tag: str) -> bool:
        """Return True when ``tag`` should bypass component resolution."""
        return tag.startswith(self.prefix) and tag not in self.exempt

    def classify_tags(self, tags: cabc.Iterable[str]) -> list[bool]:
        """Classify each tag in order."""
        return [self.is_foreign_tag(tag) for tag in tags]

    def to_js_expression(self) -> str:
        """Render the predicate as the arrow function VitePress expects.

        Exempt names are emitted in sorted order so the output is stable.

        >>> ElementClassifier().to_js_expression()
        '(tag) => tag.startsWith("Tres") && tag !== "TresCanvas"'
        """
        clauses = [f"tag.startsWith({json.dumps(self.prefix)})"]
        clauses.extend(f"tag !== {json.dumps(name)}" for name in sorted(self.exempt))
        return "(tag) => " + " && ".join(clauses)


DEFAULT_CLASSIFIER = ElementClassifier()


def is_foreign_tag(tag: str) -> bool:
    """Classify ``tag`` with the default TresJS rule."""
    return DEFAULT_CLASSIFIER.is_foreign_tag(tag)


__all__ = ["DEFAULT_CLASSIFIER", "ElementClassifier", "is_foreign_tag"]
