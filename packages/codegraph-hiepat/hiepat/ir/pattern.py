"""Pattern IR - query patterns over HIE AST nodes.

Pattern variants:
- Constant: literal constant in code
- Named: specific resolved name with a type pattern
- VarName: variable reference by occurrence name
- Node: node with one of the given tags, any children
- NodeExact: node with one of the given tags and exactly these children
- Anything: wildcard
- Or / And / Neg: boolean combinators over the same node

The IR mirrors HIE AST closely, so it is low-level; ``hiepat.edsl`` provides
builders for common syntax. Patterns are immutable and compare structurally,
which lets builders share sub-patterns freely.

Combinators:
    >>> p = Node(tag_set(("HsVar", "HsExpr"))) | wildcard
    >>> q = ~p & Anything()
"""

import logging
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Literal

from hiepat.errors import EmptyPatternError, PatternConstructionError
from hiepat.ir.literal import LITERAL_PATTERN_TYPES, LiteralPattern
from hiepat.ir.type_pattern import ANY_TYPE, PatternType
from hiepat.types.tags import TagSet, to_tag_set

logger = logging.getLogger(__name__)


class PatternBool:
    """Boolean operators shared by all pattern variants.

    ``a | b`` is ``Or``, ``a & b`` is ``And``, ``~a`` is ``Neg``.
    """

    __slots__ = ()

    def __or__(self, other: object) -> "Or":
        if not isinstance(other, PATTERN_TYPES):
            return NotImplemented
        return Or(self, other)  # type: ignore[arg-type]

    def __and__(self, other: object) -> "And":
        if not isinstance(other, PATTERN_TYPES):
            return NotImplemented
        return And(self, other)  # type: ignore[arg-type]

    def __invert__(self) -> "Neg":
        return Neg(self)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Constant(PatternBool):
    """Literal constant: ``0``, ``"foo"``, ..."""

    literal: LiteralPattern
    kind: Literal["constant"] = "constant"

    def __post_init__(self) -> None:
        if not isinstance(self.literal, LITERAL_PATTERN_TYPES):
            raise PatternConstructionError(
                "Constant expects a literal pattern",
                literal=self.literal,
            )


@dataclass(frozen=True)
class Named(PatternBool):
    """Name of a specific function, variable or data type."""

    name: Hashable
    type_pattern: PatternType = ANY_TYPE
    kind: Literal["named"] = "named"


@dataclass(frozen=True)
class VarName(PatternBool):
    """Variable reference by occurrence name."""

    name: str
    kind: Literal["var_name"] = "var_name"


@dataclass(frozen=True)
class Node(PatternBool):
    """AST node whose tag is in ``tags``; children are not inspected."""

    tags: TagSet
    kind: Literal["node"] = "node"

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", to_tag_set(self.tags))


@dataclass(frozen=True)
class NodeExact(PatternBool):
    """AST node whose tag is in ``tags`` and whose children match exactly.

    Arity is strict: a node with more or fewer children never matches.
    """

    tags: TagSet
    children: "tuple[PatternAst, ...]"
    kind: Literal["node_exact"] = "node_exact"

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", to_tag_set(self.tags))
        children = tuple(self.children)
        for index, child in enumerate(children):
            if not isinstance(child, PATTERN_TYPES):
                raise PatternConstructionError(
                    "NodeExact children must be patterns",
                    index=index,
                    child=child,
                )
        object.__setattr__(self, "children", children)


@dataclass(frozen=True)
class Anything(PatternBool):
    """Wildcard, matches every node."""

    kind: Literal["anything"] = "anything"


def _check_operand(combinator: str, operand: object, role: str) -> None:
    if not isinstance(operand, PATTERN_TYPES):
        raise PatternConstructionError(
            f"{combinator} operands must be patterns",
            operand=role,
            value=operand,
        )


class BinaryChain(PatternBool):
    """Equality, hashing and repr for ``Or``/``And`` without recursing on ``right``.

    Name lists produce right-nested chains thousands of links long; these
    methods walk the right spine in a loop. Nesting on ``left`` still recurses.
    """

    __slots__ = ()

    left: "PatternAst"
    right: "PatternAst"
    kind: str

    def __post_init__(self) -> None:
        name = type(self).__name__
        _check_operand(name, self.left, "left")
        _check_operand(name, self.right, "right")

    def _spine(self) -> "tuple[list[PatternAst], PatternAst]":
        cls = type(self)
        lefts = []
        pattern: PatternAst = self  # type: ignore[assignment]
        while type(pattern) is cls:
            lefts.append(pattern.left)  # type: ignore[union-attr]
            pattern = pattern.right  # type: ignore[union-attr]
        return lefts, pattern

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        cls = type(self)
        a: object = self
        b: object = other
        while type(a) is cls and type(b) is cls:
            if a is b:
                return True
            if a.left != b.left:  # type: ignore[attr-defined]
                return False
            a, b = a.right, b.right  # type: ignore[attr-defined]
        return a == b

    def __hash__(self) -> int:
        lefts, tail = self._spine()
        return hash((self.kind, tuple(hash(left) for left in lefts), hash(tail)))

    def __repr__(self) -> str:
        lefts, tail = self._spine()
        name = type(self).__name__
        head = "".join(f"{name}(left={left!r}, right=" for left in lefts)
        return head + repr(tail) + f", kind={self.kind!r})" * len(lefts)


@dataclass(frozen=True, eq=False, repr=False)
class Or(BinaryChain):
    """Either pattern matches."""

    left: "PatternAst"
    right: "PatternAst"
    kind: Literal["or"] = "or"


@dataclass(frozen=True, eq=False, repr=False)
class And(BinaryChain):
    """Both patterns match."""

    left: "PatternAst"
    right: "PatternAst"
    kind: Literal["and"] = "and"


@dataclass(frozen=True)
class Neg(PatternBool):
    """Everything except ``pattern``."""

    pattern: "PatternAst"
    kind: Literal["neg"] = "neg"

    def __post_init__(self) -> None:
        _check_operand("Neg", self.pattern, "pattern")


PatternAst = Constant | Named | VarName | Node | NodeExact | Anything | Or | And | Neg

PATTERN_TYPES = (Constant, Named, VarName, Node, NodeExact, Anything, Or, And, Neg)

wildcard = Anything()


def negate(pattern: PatternAst) -> Neg:
    """Pattern matching everything ``pattern`` does not."""
    return Neg(pattern)


def is_pattern(value: object) -> bool:
    return isinstance(value, PATTERN_TYPES)


# ============================================================================
# Name lists
# ============================================================================


def names_to_pattern_ast(pairs: Iterable[tuple[Hashable, PatternType]]) -> PatternAst:
    """Pattern matching any of the given (name, type pattern) pairs.

    One pair gives a plain ``Named``; more give a right-associated ``Or``
    chain in input order.

    Raises:
        EmptyPatternError: If ``pairs`` is empty
    """
    items = list(pairs)
    if not items:
        raise EmptyPatternError("Name pattern requires at least one name")

    name, type_pattern = items[-1]
    pattern: PatternAst = Named(name, type_pattern)
    for name, type_pattern in reversed(items[:-1]):
        pattern = Or(Named(name, type_pattern), pattern)

    logger.debug("Built name pattern over %d names", len(items))
    return pattern


def any_names_to_pattern_ast(names: Iterable[Hashable]) -> PatternAst:
    """Like ``names_to_pattern_ast`` but accepts names of any type."""
    return names_to_pattern_ast((name, ANY_TYPE) for name in names)
