"""Shared types - Domain Layer.

HieNode Protocol, tag pairs and resolved-name identity.
"""

from hiepat.types.name_meta import NameMeta, base_name, text_name
from hiepat.types.node import HieNode, MockNode, TypeMatcher
from hiepat.types.tags import TagPair, TagSet, tag_set, to_tag_set

__all__ = [
    # Node
    "HieNode",
    "MockNode",
    "TypeMatcher",
    # Tags
    "TagPair",
    "TagSet",
    "tag_set",
    "to_tag_set",
    # Names
    "NameMeta",
    "base_name",
    "text_name",
]
