"""
Tests for the pattern builders.

Validates:
1. Shapes produced by each builder
2. Sharing of zero-argument builder results
3. Schema-dependent pattern_match_
4. Matching builders against small hand-built ASTs
"""

import pytest

from hiepat.config import SchemaConfig
from hiepat.edsl import (
    LITERAL_ANNS,
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
from hiepat.ir import (
    AnyLiteral,
    Constant,
    ExactNum,
    Named,
    Node,
    NodeExact,
    Or,
    VarName,
    any_names_to_pattern_ast,
    wildcard,
)
from hiepat.runtime import evaluate
from hiepat.types import MockNode, TagPair, base_name, tag_set, text_name

GHC_8_8 = SchemaConfig((8, 8))
GHC_9_2 = SchemaConfig((9, 2))


def _or_leaves(pattern):
    leaves = []
    while isinstance(pattern, Or):
        leaves.append(pattern.left)
        pattern = pattern.right
    leaves.append(pattern)
    return leaves


class TestExpressionBuilders:
    """Test expression builders."""

    def test_app_shape(self):
        """Test app builds a two-child HsApp pattern."""
        f, x = VarName("f"), VarName("x")
        assert app(f, x) == NodeExact(tag_set(("HsApp", "HsExpr")), [f, x])

    def test_op_app_shape(self):
        """Test op_app keeps operand order."""
        x, op, y = VarName("x"), VarName("+"), VarName("y")
        pattern = op_app(x, op, y)

        assert pattern.tags == tag_set(("OpApp", "HsExpr"))
        assert pattern.children == (x, op, y)

    def test_range_shape(self):
        """Test range_ covers the two-bound form."""
        pattern = range_(Constant(ExactNum(1)), Constant(ExactNum(10)))

        assert pattern.tags == tag_set(("ArithSeq", "HsExpr"))
        assert len(pattern.children) == 2

    def test_case_forms(self):
        """Test case builders ignore branches."""
        assert case_() == Node(tag_set(("HsCase", "HsExpr")))
        assert lambda_case() == Node(tag_set(("HsLamCase", "HsExpr")))

    def test_tuple_covers_types_and_literals(self):
        """Test tuple_ matches both tuple types and tuple expressions."""
        pattern = tuple_()
        assert evaluate(pattern, MockNode(("HsTupleTy", "HsType")))
        assert evaluate(pattern, MockNode(("ExplicitTuple", "HsExpr")))
        assert not evaluate(pattern, MockNode(("HsListTy", "HsType")))

    def test_head_call(self):
        """Test a rule for calls of ``head`` on anything."""
        head = base_name("head", "GHC.List")
        pattern = app(Named(head), wildcard)

        call = MockNode(
            ("HsApp", "HsExpr"),
            children=[MockNode(("HsVar", "HsExpr"), identifier=head), MockNode(("HsVar", "HsExpr"))],
        )
        other = MockNode(
            ("HsApp", "HsExpr"),
            children=[MockNode(("HsVar", "HsExpr"), identifier=base_name("tail", "GHC.List")), MockNode(("HsVar", "HsExpr"))],
        )

        assert evaluate(pattern, call)
        assert not evaluate(pattern, other)

    def test_text_pack_of_literal(self):
        """Test a rule for ``pack`` from either text module applied to a string literal."""
        pack = text_name("Data.Text", "pack")
        lazy_pack = text_name("Data.Text.Lazy", "pack")
        pattern = app(any_names_to_pattern_ast([pack, lazy_pack]), Constant(AnyLiteral()))

        def call(name):
            return MockNode(
                ("HsApp", "HsExpr"),
                children=[MockNode(("HsVar", "HsExpr"), identifier=name), MockNode(("HsLit", "HsExpr"), literal="hi")],
            )

        assert pack.package == "text"
        assert evaluate(pattern, call(pack))
        assert evaluate(pattern, call(lazy_pack))
        assert not evaluate(pattern, call(base_name("pack", "Data.Text")))

    def test_literal_annotation(self):
        """Test the overloaded-literal annotation constant."""
        assert LITERAL_ANNS == TagPair("HsOverLit", "HsExpr")


class TestMatchingBuilders:
    """Test pattern-matching builders."""

    def test_simple_nodes(self):
        """Test single-tag builders."""
        assert pattern_match_branch() == Node(tag_set(("Match", "Match")))
        assert wild_pat() == Node(tag_set(("WildPat", "Pat")))
        assert guard_branch() == Node(tag_set(("BodyStmt", "StmtLR")))
        assert rhs() == Node(tag_set(("GRHS", "GRHS")))

    def test_literal_pat(self):
        """Test literal_pat accepts both literal pattern forms."""
        assert evaluate(literal_pat(), MockNode(("NPat", "Pat")))
        assert evaluate(literal_pat(), MockNode(("LitPat", "Pat")))
        assert not evaluate(literal_pat(), MockNode(("WildPat", "Pat")))

    def test_pattern_match_arrow(self):
        """Test the arrow wraps a single child."""
        value = Constant(AnyLiteral())
        assert pattern_match_arrow(value) == NodeExact(tag_set(("GRHS", "GRHS")), [value])

    def test_pattern_match_new_schema(self):
        """Test GHC >= 8.10 branches start with a WildPat child."""
        value = Constant(ExactNum(0))
        pattern = pattern_match_(value, GHC_9_2)

        assert pattern.tags == tag_set(("Match", "Match"))
        assert pattern.children == (wild_pat(), pattern_match_arrow(value))

    def test_pattern_match_old_schema(self):
        """Test GHC 8.8 branches have only the right-hand side."""
        value = Constant(ExactNum(0))
        pattern = pattern_match_(value, GHC_8_8)

        assert pattern.children == (pattern_match_arrow(value),)

    def test_pattern_match_boundary(self):
        """Test 8.10 is the first schema with the WildPat child."""
        value = Constant(ExactNum(0))
        assert len(pattern_match_(value, SchemaConfig((8, 10))).children) == 2

    def test_pattern_match_default_schema(self):
        """Test builders default to the configured schema."""
        assert len(pattern_match_(wildcard).children) == 2

    def test_pattern_match_schema_from_env(self, monkeypatch):
        """Test the environment selects the schema."""
        monkeypatch.setenv("HIEPAT_GHC_VERSION", "8.8")
        assert len(pattern_match_(wildcard).children) == 1

    def test_pattern_match_evaluates(self):
        """Test ``_ -> 0`` against both schema shapes."""
        zero = MockNode(("HsOverLit", "HsExpr"), literal=0)
        arrow = MockNode(("GRHS", "GRHS"), children=[zero])
        new_branch = MockNode(("Match", "Match"), children=[MockNode(("WildPat", "Pat")), arrow])
        old_branch = MockNode(("Match", "Match"), children=[arrow])
        value = Constant(ExactNum(0))

        assert evaluate(pattern_match_(value, GHC_9_2), new_branch)
        assert not evaluate(pattern_match_(value, GHC_9_2), old_branch)
        assert evaluate(pattern_match_(value, GHC_8_8), old_branch)
        assert not evaluate(pattern_match_(value, GHC_8_8), new_branch)


class TestDeclarationBuilders:
    """Test declaration and type builders."""

    def test_simple_declarations(self):
        """Test single-tag declaration builders."""
        assert fixity() == Node(tag_set(("FixitySig", "FixitySig")))
        assert type_sig() == Node(tag_set(("TypeSig", "Sig")))
        assert data_decl() == Node(tag_set(("DataDecl", "TyClDecl")))
        assert constructor() == Node(tag_set(("ConDeclH98", "ConDecl")))

    @pytest.mark.parametrize(
        "tag",
        [("AbsBinds", "HsBindLR"), ("FunBind", "HsBindLR"), ("Match", "Match")],
    )
    def test_fun_accepts_binding_tags(self, tag):
        """Test fun matches any of its binding annotations."""
        assert evaluate(fun(), MockNode(tag))

    def test_type_alternatives(self):
        """Test type_ lists the six plain type forms in order."""
        leaves = _or_leaves(type_())

        assert [next(iter(leaf.tags)).constructor for leaf in leaves] == [
            "HsTyVar",
            "HsAppTy",
            "HsParTy",
            "HsTupleTy",
            "HsListTy",
            "HsFunTy",
        ]
        assert not evaluate(type_(), MockNode(("HsBangTy", "HsType")))

    def test_lazy_record_field(self):
        """Test a record field without a bang."""
        field = MockNode(
            ("ConDeclField", "ConDeclField"),
            children=[MockNode(("FunBind", "HsBindLR")), MockNode(("HsTyVar", "HsType"))],
        )
        strict = MockNode(
            ("ConDeclField", "ConDeclField"),
            children=[MockNode(("FunBind", "HsBindLR")), MockNode(("HsBangTy", "HsType"))],
        )

        assert evaluate(lazy_record_field(), field)
        assert not evaluate(lazy_record_field(), strict)

    def test_lazy_field(self):
        """Test lazy_field matches record fields and plain types."""
        assert evaluate(lazy_field(), MockNode(("HsListTy", "HsType")))
        assert not evaluate(lazy_field(), MockNode(("HsBangTy", "HsType")))


class TestSharing:
    """Test that composite patterns reference shared parts."""

    @pytest.mark.parametrize(
        "builder",
        [
            lambda_case,
            case_,
            tuple_,
            pattern_match_branch,
            wild_pat,
            literal_pat,
            guard_branch,
            rhs,
            fixity,
            type_sig,
            fun,
            data_decl,
            constructor,
            type_,
            lazy_record_field,
            lazy_field,
        ],
    )
    def test_zero_argument_builders_return_same_value(self, builder):
        """Test repeated calls return the identical pattern."""
        assert builder() is builder()

    def test_lazy_record_field_shares_type(self):
        """Test the field type child is the type_ pattern itself."""
        assert lazy_record_field().children[1] is type_()

    def test_lazy_field_shares_parts(self):
        """Test lazy_field reuses lazy_record_field and type_."""
        assert lazy_field().left is lazy_record_field()
        assert lazy_field().right is type_()

    def test_pattern_match_shares_wild_pat(self):
        """Test schema-dependent branches reuse wild_pat."""
        assert pattern_match_(wildcard, GHC_9_2).children[0] is wild_pat()
