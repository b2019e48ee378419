"""Pattern Runtime - Matching Engine.

Components:
    - evaluator: PatternEvaluator, evaluate()
    - literal: literal comparison modes
"""

from hiepat.runtime.evaluator import PatternEvaluator, evaluate
from hiepat.runtime.literal import literal_matches

__all__ = [
    "PatternEvaluator",
    "evaluate",
    "literal_matches",
]
