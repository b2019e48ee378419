"""HIE AST tag vocabulary.

(constructor, category) annotations of the GHC syntax nodes the builders
recognize.
"""

from hiepat.types.tags import TagPair

# Expressions
HS_APP = TagPair("HsApp", "HsExpr")
OP_APP = TagPair("OpApp", "HsExpr")
ARITH_SEQ = TagPair("ArithSeq", "HsExpr")
HS_LAM_CASE = TagPair("HsLamCase", "HsExpr")
HS_CASE = TagPair("HsCase", "HsExpr")
EXPLICIT_TUPLE = TagPair("ExplicitTuple", "HsExpr")

# Annotation of constants: 0, "foo", etc.
LITERAL_ANNS = TagPair("HsOverLit", "HsExpr")

# Pattern matching
MATCH = TagPair("Match", "Match")
GRHS = TagPair("GRHS", "GRHS")
WILD_PAT = TagPair("WildPat", "Pat")
N_PAT = TagPair("NPat", "Pat")
LIT_PAT = TagPair("LitPat", "Pat")
BODY_STMT = TagPair("BodyStmt", "StmtLR")

# Declarations and bindings
FIXITY_SIG = TagPair("FixitySig", "FixitySig")
TYPE_SIG = TagPair("TypeSig", "Sig")
ABS_BINDS = TagPair("AbsBinds", "HsBindLR")
FUN_BIND = TagPair("FunBind", "HsBindLR")
DATA_DECL = TagPair("DataDecl", "TyClDecl")
CON_DECL_H98 = TagPair("ConDeclH98", "ConDecl")
CON_DECL_FIELD = TagPair("ConDeclField", "ConDeclField")

# Types
HS_TY_VAR = TagPair("HsTyVar", "HsType")
HS_APP_TY = TagPair("HsAppTy", "HsType")
HS_PAR_TY = TagPair("HsParTy", "HsType")
HS_TUPLE_TY = TagPair("HsTupleTy", "HsType")
HS_LIST_TY = TagPair("HsListTy", "HsType")
HS_FUN_TY = TagPair("HsFunTy", "HsType")
