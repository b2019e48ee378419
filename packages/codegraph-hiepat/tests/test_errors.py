"""
Tests for error hierarchy.
"""

import pytest

from hiepat.errors import (
    ConfigurationError,
    EmptyPatternError,
    HiepatError,
    PatternConstructionError,
    PatternEvaluationError,
)


@pytest.mark.parametrize(
    "error_cls,code",
    [
        (PatternConstructionError, "PATTERN_CONSTRUCTION_ERROR"),
        (EmptyPatternError, "EMPTY_PATTERN_ERROR"),
        (PatternEvaluationError, "PATTERN_EVALUATION_ERROR"),
        (ConfigurationError, "CONFIGURATION_ERROR"),
    ],
)
def test_error_codes(error_cls, code):
    """Test each error carries its code and renders it."""
    error = error_cls("something went wrong", detail=1)

    assert isinstance(error, HiepatError)
    assert error.code == code
    assert error.message == "something went wrong"
    assert error.context == {"detail": 1}
    assert str(error) == f"[{code}] something went wrong"


def test_repr_includes_context():
    error = HiepatError("X", "msg", child="c")
    assert repr(error) == "HiepatError(code='X', message='msg', child='c')"


def test_catch_by_base():
    """Test callers can catch all construction errors at once."""
    with pytest.raises(PatternConstructionError):
        raise EmptyPatternError("no names")
