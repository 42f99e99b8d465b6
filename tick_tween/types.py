"""Shared type aliases, states and errors for tick-tween."""
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, MutableMapping

TweenId = int

Values = MutableMapping[str, Any]

StartHandler = Callable[[], None]
UpdateHandler = Callable[[Values], None]
CompleteHandler = Callable[[], None]
FrameCallback = Callable[[], None]


class TweenState(Enum):
    CREATED = "created"
    PLAYING = "playing"
    COMPLETE = "complete"
    REMOVED = "removed"


class TweenError(Exception):
    """Base class for errors raised by tick-tween."""


class UnknownEasingError(TweenError, KeyError):
    """Raised when an easing name is not in EASINGS."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown easing {name!r}")


class TweenConfigError(TweenError, ValueError):
    """Raised by strict validation for malformed tween input."""
