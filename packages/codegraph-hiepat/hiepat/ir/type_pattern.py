"""Type patterns.

Type patterns belong to an external type matcher; hiepat stores them inside
``Named`` and hands them back unchanged. The only type pattern defined here
is the universal wildcard used when a rule does not care about types.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

PatternType: TypeAlias = Hashable


@dataclass(frozen=True)
class PatternTypeAnything:
    """Matches every type, including an unknown one."""

    kind: Literal["type_anything"] = "type_anything"


ANY_TYPE = PatternTypeAnything()


def default_type_matcher(type_pattern: PatternType, node_type: Any) -> bool:
    """Type matcher used when the driver does not inject one.

    ``ANY_TYPE`` accepts everything; any other pattern matches only an equal,
    known type.
    """
    if isinstance(type_pattern, PatternTypeAnything):
        return True
    return node_type is not None and type_pattern == node_type
