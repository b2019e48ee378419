"""Declaration and type patterns.

Top-level declarations (fixity, signatures, bindings, data types) and the
shapes of plain types used in constructor fields.
"""

from functools import lru_cache

from hiepat.edsl.tags import (
    ABS_BINDS,
    CON_DECL_FIELD,
    CON_DECL_H98,
    DATA_DECL,
    FIXITY_SIG,
    FUN_BIND,
    HS_APP_TY,
    HS_FUN_TY,
    HS_LIST_TY,
    HS_PAR_TY,
    HS_TUPLE_TY,
    HS_TY_VAR,
    MATCH,
    TYPE_SIG,
)
from hiepat.ir.pattern import Node, NodeExact, PatternAst
from hiepat.types.tags import tag_set


@lru_cache(maxsize=None)
def fixity() -> PatternAst:
    """Top-level fixity declaration: ``infixr 7 ***, +++``."""
    return Node(tag_set(FIXITY_SIG))


@lru_cache(maxsize=None)
def type_sig() -> PatternAst:
    """Function type signature: ``foo :: Some -> Type``."""
    return Node(tag_set(TYPE_SIG))


@lru_cache(maxsize=None)
def fun() -> PatternAst:
    """Function definition: ``foo x y = ...``."""
    return Node(tag_set(ABS_BINDS, FUN_BIND, MATCH))


@lru_cache(maxsize=None)
def data_decl() -> PatternAst:
    """``data`` or ``newtype`` declaration."""
    return Node(tag_set(DATA_DECL))


@lru_cache(maxsize=None)
def constructor() -> PatternAst:
    """Constructor of a plain data type or newtype.

    Children of a matching node are the constructor fields.
    """
    return Node(tag_set(CON_DECL_H98))


@lru_cache(maxsize=None)
def type_() -> PatternAst:
    """Any occurrence of a plain type.

    Covers:
        * Simple type: ``Int``, ``Bool``, ``a``
        * Higher-kinded type: ``Maybe Int``, ``Either String a``
        * Type in parenthesis: ``(Int)``
        * Tuples: ``(Int, Bool)``
        * List type: ``[Int]``
        * Function type: ``Int -> Bool``
    """
    return Node(tag_set(HS_TY_VAR)) | (
        Node(tag_set(HS_APP_TY))
        | (
            Node(tag_set(HS_PAR_TY))
            | (Node(tag_set(HS_TUPLE_TY)) | (Node(tag_set(HS_LIST_TY)) | Node(tag_set(HS_FUN_TY))))
        )
    )


@lru_cache(maxsize=None)
def lazy_record_field() -> PatternAst:
    """Record field without a bang: ``someField :: Int``."""
    return NodeExact(
        tag_set(CON_DECL_FIELD),
        (Node(tag_set(ABS_BINDS, FUN_BIND)), type_()),
    )


@lru_cache(maxsize=None)
def lazy_field() -> PatternAst:
    """Lazy data type field, either a record field or a plain type."""
    return lazy_record_field() | type_()
