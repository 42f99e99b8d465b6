"""Tween configuration dataclass and library defaults."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

DEFAULT_DURATION = 200
DEFAULT_EASING = "linear"
DEFAULT_DELAY = 0

# Fractional digits kept when writing interpolated values.
PRECISION = 16

DEFAULT_FPS = 60


@dataclass(frozen=True)
class TweenConfig:
    """Immutable timing configuration for a single tween.

    Attributes:
        duration: Active interpolation time in milliseconds.
        easing: Name of the curve in EASINGS.
        delay: Milliseconds between start() and the first interpolated tick.
    """

    duration: float = DEFAULT_DURATION
    easing: str = DEFAULT_EASING
    delay: float = DEFAULT_DELAY

    def merged(self, **options: Any) -> TweenConfig:
        """Return a copy with the given options laid over this config."""
        if not options:
            return self
        return replace(self, **options)

    def effective(self) -> TweenConfig:
        """Clamp negative duration and delay to zero."""
        if self.duration >= 0 and self.delay >= 0:
            return self
        return replace(
            self, duration=max(self.duration, 0), delay=max(self.delay, 0)
        )
