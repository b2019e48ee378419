"""Tag Pairs - Domain Layer.

Every HIE AST node is annotated with a pair of labels: the constructor name
and the type (category) it belongs to, e.g. ``("HsApp", "HsExpr")``.

Patterns keep tag pairs in a ``frozenset`` so one pattern can accept several
spellings of the same syntax in a single membership test.
"""

from collections.abc import Iterable
from typing import NamedTuple

from hiepat.errors import PatternConstructionError


class TagPair(NamedTuple):
    """(constructor, category) annotation of an AST node."""

    constructor: str
    category: str

    def __str__(self) -> str:
        return f"{self.constructor}/{self.category}"


TagSet = frozenset[TagPair]


def _to_tag_pair(pair: object) -> TagPair:
    if isinstance(pair, TagPair):
        return pair
    if not (isinstance(pair, tuple) and len(pair) == 2 and all(isinstance(part, str) for part in pair)):
        raise PatternConstructionError(
            "Tag must be a (constructor, category) pair of strings",
            tag=pair,
        )
    return TagPair(*pair)


def tag_set(*pairs: tuple[str, str]) -> TagSet:
    """Build a tag set from ``TagPair``s or plain 2-tuples.

    Examples:
        >>> tag_set(("HsApp", "HsExpr"))
        frozenset({TagPair(constructor='HsApp', category='HsExpr')})
    """
    return frozenset(_to_tag_pair(pair) for pair in pairs)


def to_tag_set(tags: Iterable[tuple[str, str]]) -> TagSet:
    """Normalize any iterable of pairs into a ``TagSet``."""
    if isinstance(tags, TagPair):
        raise PatternConstructionError(
            "Expected a collection of tag pairs, got a single TagPair",
            tag=tags,
            hint="wrap it with tag_set(...)",
        )
    return tag_set(*tags)
