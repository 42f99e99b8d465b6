"""Opt-in input checks for tweens. Never called on the per-frame path."""
from __future__ import annotations

from numbers import Real
from typing import Any, Mapping

from tick_tween.config import TweenConfig
from tick_tween.easing import EASINGS
from tick_tween.types import TweenConfigError, UnknownEasingError


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_tween(
    origin: Mapping[str, Any], target: Mapping[str, Any], config: TweenConfig
) -> None:
    """Raise if the tween input would fail or misbehave on its first tick."""
    if config.easing not in EASINGS:
        raise UnknownEasingError(config.easing)

    for name in ("duration", "delay"):
        value = getattr(config, name)
        if not _is_number(value):
            raise TweenConfigError(f"{name} must be a number, got {value!r}")

    missing = set(target) - set(origin)
    extra = set(origin) - set(target)
    if missing or extra:
        raise TweenConfigError(
            f"origin and target keys differ: missing from origin {sorted(missing)}, "
            f"missing from target {sorted(extra)}"
        )

    for key, value in target.items():
        if not _is_number(value):
            raise TweenConfigError(f"target[{key!r}] is not numeric: {value!r}")
        if not _is_number(origin[key]):
            raise TweenConfigError(f"origin[{key!r}] is not numeric: {origin[key]!r}")
