"""
Standardized Error Handling for hiepat

Provides hierarchical exception classes with error codes and context.

Pattern evaluation itself never fails: tag, arity, literal and identifier
mismatches are ordinary ``False`` results. Errors are reserved for
construction-time misuse and configuration problems.
"""

from typing import Any


class HiepatError(Exception):
    """Base exception for all hiepat errors.

    Includes error code for programmatic handling and context for debugging.

    Example:
        raise HiepatError(
            code="PATTERN_CONSTRUCTION_ERROR",
            message="Children must be patterns",
            child=child,
        )
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def __repr__(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r}, {ctx_str})"


# ==============================================================================
# Construction Errors
# ==============================================================================


class PatternConstructionError(HiepatError):
    """Pattern value built from invalid parts."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="PATTERN_CONSTRUCTION_ERROR", message=message, **context)


class EmptyPatternError(PatternConstructionError):
    """Name-list pattern requested over zero names."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message, **context)
        self.code = "EMPTY_PATTERN_ERROR"


# ==============================================================================
# Evaluation Errors
# ==============================================================================


class PatternEvaluationError(HiepatError):
    """Evaluator handed something that is not a pattern."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="PATTERN_EVALUATION_ERROR", message=message, **context)


# ==============================================================================
# Configuration Errors
# ==============================================================================


class ConfigurationError(HiepatError):
    """Error in configuration."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(code="CONFIGURATION_ERROR", message=message, **context)


# ==============================================================================
# Exports
# ==============================================================================

__all__ = [
    # Base
    "HiepatError",
    # Construction
    "PatternConstructionError",
    "EmptyPatternError",
    # Evaluation
    "PatternEvaluationError",
    # Configuration
    "ConfigurationError",
]
