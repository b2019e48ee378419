"""Pattern Evaluator.

Evaluates a pattern against a single HIE AST node.

The search driver walks the tree and calls the evaluator at every candidate
node; the evaluator itself never looks at siblings or ancestors. Recursion
follows the pattern, not the tree, so the cost of one call is bounded by the
pattern size.

Evaluation is total: tag, arity, literal, identifier and type mismatches all
produce ``False``. Only a non-pattern argument raises.
"""

from hiepat.errors import PatternEvaluationError
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
    VarName,
)
from hiepat.ir.type_pattern import default_type_matcher
from hiepat.runtime.literal import literal_matches
from hiepat.types.node import HieNode, TypeMatcher


class PatternEvaluator:
    """Pattern evaluation engine.

    Holds the type matcher used for ``Named`` patterns and nothing else, so a
    single evaluator can be shared between threads.

    Usage:
        >>> evaluator = PatternEvaluator(type_matcher=my_type_matcher)
        >>> evaluator.evaluate(app(wildcard, wildcard), node)
        True
    """

    __slots__ = ("_type_matcher",)

    def __init__(self, type_matcher: TypeMatcher = default_type_matcher) -> None:
        """Initialize evaluator.

        Args:
            type_matcher: ``(type_pattern, node_type) -> bool`` used by
                ``Named`` patterns
        """
        self._type_matcher = type_matcher

    @property
    def type_matcher(self) -> TypeMatcher:
        return self._type_matcher

    def __call__(self, pattern: PatternAst, node: HieNode) -> bool:
        return self.evaluate(pattern, node)

    def evaluate(self, pattern: PatternAst, node: HieNode) -> bool:
        """Check whether ``node`` matches ``pattern``.

        Args:
            pattern: Pattern to evaluate
            node: Node to check

        Returns:
            True if the node matches

        Raises:
            PatternEvaluationError: If ``pattern`` is not a pattern value
        """
        # Walk right-nested Or/And chains in a loop; name lists build long ones.
        while True:
            if isinstance(pattern, Or):
                if self.evaluate(pattern.left, node):
                    return True
                pattern = pattern.right
            elif isinstance(pattern, And):
                if not self.evaluate(pattern.left, node):
                    return False
                pattern = pattern.right
            else:
                break

        if isinstance(pattern, Anything):
            return True

        elif isinstance(pattern, Node):
            return node.tag in pattern.tags

        elif isinstance(pattern, NodeExact):
            return self._evaluate_node_exact(pattern, node)

        elif isinstance(pattern, Neg):
            return not self.evaluate(pattern.pattern, node)

        elif isinstance(pattern, Constant):
            return literal_matches(pattern.literal, node.literal)

        elif isinstance(pattern, Named):
            return self._evaluate_named(pattern, node)

        elif isinstance(pattern, VarName):
            return node.variable_name is not None and node.variable_name == pattern.name

        else:
            raise PatternEvaluationError(
                f"Unknown pattern type: {type(pattern).__name__}",
                pattern=pattern,
            )

    def _evaluate_node_exact(self, pattern: NodeExact, node: HieNode) -> bool:
        if node.tag not in pattern.tags:
            return False

        children = node.children
        if len(children) != len(pattern.children):
            return False

        return all(self.evaluate(child_pattern, child) for child_pattern, child in zip(pattern.children, children))

    def _evaluate_named(self, pattern: Named, node: HieNode) -> bool:
        identifier = node.identifier
        if identifier is None or identifier != pattern.name:
            return False
        return bool(self._type_matcher(pattern.type_pattern, node.node_type))


_DEFAULT_EVALUATOR = PatternEvaluator()


def evaluate(
    pattern: PatternAst,
    node: HieNode,
    type_matcher: TypeMatcher | None = None,
) -> bool:
    """Evaluate ``pattern`` against ``node``.

    Args:
        pattern: Pattern to evaluate
        node: Node to check
        type_matcher: Optional external type matcher (defaults to
            ``default_type_matcher``)

    Returns:
        True if the node matches
    """
    if type_matcher is None:
        return _DEFAULT_EVALUATOR.evaluate(pattern, node)
    return PatternEvaluator(type_matcher).evaluate(pattern, node)
