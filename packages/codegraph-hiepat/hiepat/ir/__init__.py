"""IR Types - pattern values.

Components:
    - pattern: PatternAst variants, combinators, name-list patterns
    - literal: literal comparison modes used by Constant
    - type_pattern: opaque type patterns and the universal ANY_TYPE
"""

from hiepat.ir.literal import (
    AnyLiteral,
    ContainStr,
    ExactNum,
    ExactStr,
    LiteralPattern,
    PrefixStr,
)
from hiepat.ir.pattern import (
    And,
    Anything,
    Constant,
    Named,
    Neg,
    Node,
    NodeExact,
    Or,
    PatternAst,
    PatternBool,
    VarName,
    any_names_to_pattern_ast,
    is_pattern,
    names_to_pattern_ast,
    negate,
    wildcard,
)
from hiepat.ir.type_pattern import ANY_TYPE, PatternType, PatternTypeAnything, default_type_matcher

__all__ = [
    # Patterns
    "PatternAst",
    "PatternBool",
    "Constant",
    "Named",
    "VarName",
    "Node",
    "NodeExact",
    "Anything",
    "Or",
    "And",
    "Neg",
    "wildcard",
    "negate",
    "is_pattern",
    "names_to_pattern_ast",
    "any_names_to_pattern_ast",
    # Literals
    "LiteralPattern",
    "ExactNum",
    "ExactStr",
    "PrefixStr",
    "ContainStr",
    "AnyLiteral",
    # Types
    "PatternType",
    "PatternTypeAnything",
    "ANY_TYPE",
    "default_type_matcher",
]
