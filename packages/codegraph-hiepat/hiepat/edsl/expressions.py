"""Expression patterns.

Function and operator application, ranges, ``case`` forms and tuples.
"""

from functools import lru_cache

from hiepat.edsl.tags import ARITH_SEQ, EXPLICIT_TUPLE, HS_APP, HS_CASE, HS_LAM_CASE, HS_TUPLE_TY, OP_APP
from hiepat.ir.pattern import Node, NodeExact, PatternAst
from hiepat.types.tags import tag_set


def app(f: PatternAst, x: PatternAst) -> PatternAst:
    """``app(f, x)`` is a pattern for function application ``f x``."""
    return NodeExact(tag_set(HS_APP), (f, x))


def op_app(x: PatternAst, op: PatternAst, y: PatternAst) -> PatternAst:
    """``op_app(x, op, y)`` is a pattern for operator application ``x `op` y``."""
    return NodeExact(tag_set(OP_APP), (x, op, y))


def range_(lower: PatternAst, upper: PatternAst) -> PatternAst:
    """``range_(a, b)`` is a pattern for ``[a .. b]``.

    Only the two-bound form; ``[a ..]`` and ``[a, b .. c]`` are not covered.
    """
    return NodeExact(tag_set(ARITH_SEQ), (lower, upper))


@lru_cache(maxsize=None)
def lambda_case() -> PatternAst:
    """``\\case`` expression, branches not considered."""
    return Node(tag_set(HS_LAM_CASE))


@lru_cache(maxsize=None)
def case_() -> PatternAst:
    """``case EXP of`` expression, branches not considered."""
    return Node(tag_set(HS_CASE))


@lru_cache(maxsize=None)
def tuple_() -> PatternAst:
    """Tuples in type signatures, ``(Int, Int)``, and literals, ``(True, 0)``."""
    return Node(tag_set(HS_TUPLE_TY)) | Node(tag_set(EXPLICIT_TUPLE))
