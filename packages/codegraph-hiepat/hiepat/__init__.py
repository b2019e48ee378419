"""hiepat - HIE AST Pattern Language.

Declarative patterns over GHC ``.hie`` AST nodes for static analysis rules.

Quick Start:
    >>> from hiepat import MockNode, app, evaluate, wildcard, Constant, ExactNum
    >>>
    >>> # Build a pattern: any function applied to the literal 5
    >>> pattern = app(wildcard, Constant(ExactNum(5)))
    >>>
    >>> # Evaluate it at one node (a search driver does this for every node)
    >>> node = MockNode(
    ...     ("HsApp", "HsExpr"),
    ...     children=[MockNode(("HsVar", "HsExpr")), MockNode(("HsLit", "HsExpr"), literal=5)],
    ... )
    >>> evaluate(pattern, node)
    True

For front-end integration:
    Implement the ``HieNode`` protocol over your AST nodes and, if rules use
    typed names, pass a ``type_matcher`` to ``PatternEvaluator``.
"""

__version__ = "0.1.0"  # Keep in sync with pyproject.toml

# =============================================================================
# Configuration, Error Handling & Logging
# =============================================================================
from hiepat.config import HiepatSettings, SchemaConfig, get_schema_config, get_settings

# =============================================================================
# Builders (eDSL)
# =============================================================================
from hiepat.edsl import (
    LITERAL_ANNS,
    any_names_to_pattern_ast,
    app,
    case_,
    constructor,
    data_decl,
    fixity,
    fun,
    guard_branch,
    lambda_case,
    lazy_field,
    lazy_record_field,
    literal_pat,
    names_to_pattern_ast,
    op_app,
    pattern_match_,
    pattern_match_arrow,
    pattern_match_branch,
    range_,
    rhs,
    tuple_,
    type_,
    type_sig,
    wild_pat,
)
from hiepat.errors import (
    ConfigurationError,
    EmptyPatternError,
    HiepatError,
    PatternConstructionError,
    PatternEvaluationError,
)

# =============================================================================
# Pattern IR
# =============================================================================
from hiepat.ir import (
    ANY_TYPE,
    And,
    AnyLiteral,
    Anything,
    Constant,
    ContainStr,
    ExactNum,
    ExactStr,
    Named,
    Neg,
    Node,
    NodeExact,
    Or,
    PatternAst,
    PatternType,
    PrefixStr,
    VarName,
    default_type_matcher,
    negate,
    wildcard,
)
from hiepat.logging import configure_logging, get_logger, setup_logger

# =============================================================================
# Runtime
# =============================================================================
from hiepat.runtime import PatternEvaluator, evaluate

# =============================================================================
# Node Protocol & Domain Types
# =============================================================================
from hiepat.types import HieNode, MockNode, NameMeta, TagPair, TypeMatcher, tag_set

__all__ = [
    # Version
    "__version__",
    # Pattern IR
    "PatternAst",
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
    "ExactNum",
    "ExactStr",
    "PrefixStr",
    "ContainStr",
    "AnyLiteral",
    "PatternType",
    "ANY_TYPE",
    # Builders
    "names_to_pattern_ast",
    "any_names_to_pattern_ast",
    "app",
    "op_app",
    "range_",
    "lambda_case",
    "case_",
    "tuple_",
    "pattern_match_branch",
    "pattern_match_",
    "pattern_match_arrow",
    "wild_pat",
    "literal_pat",
    "guard_branch",
    "rhs",
    "fixity",
    "type_sig",
    "fun",
    "data_decl",
    "constructor",
    "type_",
    "lazy_field",
    "lazy_record_field",
    "LITERAL_ANNS",
    # Runtime
    "PatternEvaluator",
    "evaluate",
    "default_type_matcher",
    # Node protocol
    "HieNode",
    "MockNode",
    "TypeMatcher",
    "TagPair",
    "tag_set",
    "NameMeta",
    # Errors
    "HiepatError",
    "PatternConstructionError",
    "EmptyPatternError",
    "PatternEvaluationError",
    "ConfigurationError",
    # Config & logging
    "HiepatSettings",
    "SchemaConfig",
    "get_settings",
    "get_schema_config",
    "setup_logger",
    "configure_logging",
    "get_logger",
]
