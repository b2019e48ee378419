"""Pattern eDSL - builders for common Haskell syntax.

Each builder closes over a fixed tag vocabulary (``hiepat.edsl.tags``) and
returns a plain pattern value. Zero-argument builders return one shared
value, so composite patterns reuse their parts instead of copying them.

Example:
    >>> from hiepat.edsl import app, any_names_to_pattern_ast
    >>> from hiepat.ir import wildcard
    >>> from hiepat.types import base_name
    >>> head_call = app(any_names_to_pattern_ast([base_name("head", "GHC.List")]), wildcard)
"""

from hiepat.edsl.declarations import (
    constructor,
    data_decl,
    fixity,
    fun,
    lazy_field,
    lazy_record_field,
    type_,
    type_sig,
)
from hiepat.edsl.expressions import app, case_, lambda_case, op_app, range_, tuple_
from hiepat.edsl.matching import (
    guard_branch,
    literal_pat,
    pattern_match_,
    pattern_match_arrow,
    pattern_match_branch,
    rhs,
    wild_pat,
)
from hiepat.edsl.tags import LITERAL_ANNS
from hiepat.ir.pattern import any_names_to_pattern_ast, names_to_pattern_ast

__all__ = [
    # Helpers
    "names_to_pattern_ast",
    "any_names_to_pattern_ast",
    # Expressions
    "app",
    "op_app",
    "range_",
    "lambda_case",
    "case_",
    "tuple_",
    # Pattern matching
    "pattern_match_branch",
    "pattern_match_",
    "pattern_match_arrow",
    "wild_pat",
    "literal_pat",
    "guard_branch",
    "rhs",
    # Declarations
    "fixity",
    "type_sig",
    "fun",
    "data_decl",
    "constructor",
    "type_",
    "lazy_field",
    "lazy_record_field",
    # Low-level
    "LITERAL_ANNS",
]
