"""Pattern-matching patterns.

Branches of ``case``/function clauses, guards and right-hand sides.

``pattern_match_`` depends on the HIE schema: since GHC 8.10 a branch on
``_`` has an explicit ``WildPat`` child before its right-hand side.
"""

from functools import lru_cache

from hiepat.config import SchemaConfig, get_schema_config
from hiepat.edsl.tags import BODY_STMT, GRHS, LIT_PAT, MATCH, N_PAT, WILD_PAT
from hiepat.ir.pattern import Node, NodeExact, PatternAst
from hiepat.types.tags import tag_set


@lru_cache(maxsize=None)
def pattern_match_branch() -> PatternAst:
    """One pattern-matching branch."""
    return Node(tag_set(MATCH))


@lru_cache(maxsize=None)
def wild_pat() -> PatternAst:
    """``_`` in pattern matching (GHC >= 8.10 only)."""
    return Node(tag_set(WILD_PAT))


@lru_cache(maxsize=None)
def literal_pat() -> PatternAst:
    """Literal in pattern matching (GHC >= 8.10 only)."""
    return Node(tag_set(N_PAT)) | Node(tag_set(LIT_PAT))


def pattern_match_arrow(x: PatternAst) -> PatternAst:
    """Right side of a branch, e.g. ``-> "foo"``."""
    return NodeExact(tag_set(GRHS), (x,))


def pattern_match_(value: PatternAst, schema: SchemaConfig | None = None) -> PatternAst:
    """One pattern-matching branch on ``_`` returning ``value``.

    Args:
        value: Pattern for the branch result
        schema: Target schema; the configured one when omitted
    """
    if schema is None:
        schema = get_schema_config()

    if schema.has_wildcard_match_child:
        children = (wild_pat(), pattern_match_arrow(value))
    else:
        children = (pattern_match_arrow(value),)
    return NodeExact(tag_set(MATCH), children)


@lru_cache(maxsize=None)
def guard_branch() -> PatternAst:
    """Single guard branch: ``| x < y = ...``."""
    return Node(tag_set(BODY_STMT))


@lru_cache(maxsize=None)
def rhs() -> PatternAst:
    """Right-hand side, usually after an equality sign: ``foo = baz``."""
    return Node(tag_set(GRHS))
