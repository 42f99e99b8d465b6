"""Tests for strict tween input validation."""
from __future__ import annotations

import pytest

from tick_tween import (
    TweenConfig,
    TweenConfigError,
    TweenError,
    UnknownEasingError,
    validate_tween,
)


def test_valid_input_passes():
    """Test matching numeric input validates cleanly."""
    validate_tween({"x": 0, "y": 1.5}, {"x": 10, "y": -2}, TweenConfig())


def test_empty_input_passes():
    """Test empty origin and target are valid."""
    validate_tween({}, {}, TweenConfig(duration=100))


def test_unknown_easing():
    """Test an unknown easing raises UnknownEasingError with its name."""
    with pytest.raises(UnknownEasingError) as exc_info:
        validate_tween({"x": 0}, {"x": 1}, TweenConfig(easing="easeInQuad"))
    assert exc_info.value.name == "easeInQuad"


def test_missing_key_in_origin():
    """Test a target key absent from origin is rejected."""
    with pytest.raises(TweenConfigError, match="keys differ"):
        validate_tween({"x": 0}, {"x": 1, "y": 2}, TweenConfig())


def test_extra_key_in_origin():
    """Test an origin key absent from target is rejected."""
    with pytest.raises(TweenConfigError, match="keys differ"):
        validate_tween({"x": 0, "z": 3}, {"x": 1}, TweenConfig())


def test_non_numeric_target():
    """Test a non-numeric target value is rejected."""
    with pytest.raises(TweenConfigError, match="target"):
        validate_tween({"x": 0}, {"x": "10px"}, TweenConfig())


def test_non_numeric_origin():
    """Test a non-numeric origin value is rejected."""
    with pytest.raises(TweenConfigError, match="origin"):
        validate_tween({"x": None}, {"x": 1}, TweenConfig())


def test_bool_is_not_numeric():
    """Test booleans do not count as numbers."""
    with pytest.raises(TweenConfigError):
        validate_tween({"x": True}, {"x": 1}, TweenConfig())


def test_non_numeric_duration():
    """Test a non-numeric duration is rejected."""
    with pytest.raises(TweenConfigError, match="duration"):
        validate_tween({}, {}, TweenConfig(duration="fast"))  # type: ignore[arg-type]


def test_non_numeric_delay():
    """Test a non-numeric delay is rejected."""
    with pytest.raises(TweenConfigError, match="delay"):
        validate_tween({}, {}, TweenConfig(delay=None))  # type: ignore[arg-type]


def test_errors_share_base_class():
    """Test both errors derive from TweenError and a builtin."""
    assert issubclass(TweenConfigError, TweenError)
    assert issubclass(TweenConfigError, ValueError)
    assert issubclass(UnknownEasingError, TweenError)
    assert issubclass(UnknownEasingError, KeyError)
