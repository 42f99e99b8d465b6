"""tick-tween - Eased value interpolation and tween sequencing driven by frame ticks."""
from __future__ import annotations

from tick_tween.clock import Clock, ManualClock, MonotonicClock
from tick_tween.config import TweenConfig
from tick_tween.easing import EASINGS, get_easing
from tick_tween.frames import FrameLoop
from tick_tween.registry import TweenRegistry
from tick_tween.sequencer import Sequencer, Step
from tick_tween.tween import Tween
from tick_tween.types import (
    TweenConfigError,
    TweenError,
    TweenId,
    TweenState,
    UnknownEasingError,
)
from tick_tween.validation import validate_tween

__all__ = [
    "Tween",
    "TweenRegistry",
    "Sequencer",
    "Step",
    "FrameLoop",
    "TweenConfig",
    "TweenState",
    "TweenId",
    "EASINGS",
    "get_easing",
    "validate_tween",
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "TweenError",
    "TweenConfigError",
    "UnknownEasingError",
]
