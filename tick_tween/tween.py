"""Tween - timed interpolation of named numeric values."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from tick_tween.config import PRECISION, TweenConfig
from tick_tween.easing import EASINGS
from tick_tween.types import (
    CompleteHandler,
    StartHandler,
    TweenId,
    TweenState,
    UpdateHandler,
    Values,
)
from tick_tween.validation import validate_tween

if TYPE_CHECKING:
    from tick_tween.registry import TweenRegistry

logger = logging.getLogger(__name__)


class Tween:
    """Interpolates every key of ``target`` from its value in ``origin``.

    ``origin`` doubles as the output buffer: it is snapshotted once at
    construction and then overwritten in place on every playing tick.
    The tween registers itself with ``registry`` on construction and is
    advanced by ``registry.tick()`` once started.

    Args:
        registry: Session the tween lives in. Supplies ids and the clock.
        origin: Mutable mapping of start values, written to on every tick.
        target: Mapping of the same keys to end values.
        config: Base configuration, a ``TweenConfig`` or a mapping of its
            fields. Defaults to ``TweenConfig()``.
        strict: Validate keys, values and easing name before registering.
        **options: ``duration``, ``easing`` or ``delay`` overriding config.
    """

    def __init__(
        self,
        registry: TweenRegistry,
        origin: Values,
        target: Mapping[str, Any],
        config: TweenConfig | Mapping[str, Any] | None = None,
        *,
        strict: bool = False,
        **options: Any,
    ) -> None:
        if config is None:
            config = TweenConfig()
        elif not isinstance(config, TweenConfig):
            config = TweenConfig(**config)
        setting = config.merged(**options)
        if strict:
            validate_tween(origin, target, setting)

        self._registry = registry
        self._current = origin
        self._origin: dict[str, Any] = dict(origin)
        self._target: dict[str, Any] = dict(target)
        self._setting = setting.effective()

        self._state = TweenState.CREATED
        self._start_time = 0.0
        self._start_fired = False

        self._on_start: StartHandler | None = None
        self._on_update: UpdateHandler | None = None
        self._on_complete: CompleteHandler | None = None

        self._id: TweenId = -1
        registry.register(self)

    def __repr__(self) -> str:
        return (
            f"Tween(id={self._id}, state={self._state.value}, "
            f"target={self._target!r})"
        )

    # --- Properties ---

    @property
    def id(self) -> TweenId:
        return self._id

    @property
    def setting(self) -> TweenConfig:
        return self._setting

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def is_playing(self) -> bool:
        return self._state is TweenState.PLAYING

    @property
    def is_finished(self) -> bool:
        """True once the tween completed or was removed."""
        return self._state is TweenState.COMPLETE or self._state is TweenState.REMOVED

    @property
    def origin(self) -> Mapping[str, Any]:
        return MappingProxyType(self._origin)

    @property
    def target(self) -> Mapping[str, Any]:
        return MappingProxyType(self._target)

    @property
    def current(self) -> Values:
        return self._current

    @property
    def registry(self) -> TweenRegistry:
        return self._registry

    # --- Control ---

    def start(self) -> Tween:
        self._start_time = self._registry.now()
        self._state = TweenState.PLAYING
        logger.debug("tween %s started at %.3f", self._id, self._start_time)
        return self

    def stop(self) -> Tween:
        return self.remove()

    def remove(self) -> Tween:
        """Drop handlers and leave the registry, whatever the current state."""
        self._state = TweenState.REMOVED
        self._detach()
        return self

    # --- Handlers ---

    def on_start(self, handler: StartHandler) -> Tween:
        self._on_start = handler
        return self

    def on_update(self, handler: UpdateHandler) -> Tween:
        self._on_update = handler
        return self

    def on_complete(self, handler: CompleteHandler) -> Tween:
        self._on_complete = handler
        return self

    # --- Internal (called by registry) ---

    def _update(self, now: float) -> None:
        if self._state is not TweenState.PLAYING:
            return

        setting = self._setting
        elapsed = now - self._start_time
        if elapsed < setting.delay:
            return

        duration = setting.duration
        # Clamped, so a late frame lands exactly on duration.
        progress = min(elapsed - setting.delay, duration)

        if not self._start_fired:
            self._start_fired = True
            if self._on_start is not None:
                self._on_start()
                if self._state is not TweenState.PLAYING:
                    return

        ease = EASINGS[setting.easing]
        current = self._current
        if progress < duration:
            origin = self._origin
            for key, end in self._target.items():
                start = origin[key]
                current[key] = round(
                    ease(progress, start, end - start, duration), PRECISION
                )
        else:
            # Final frame writes the targets as given, free of float drift.
            for key, end in self._target.items():
                current[key] = end

        if self._on_update is not None:
            self._on_update(current)
            if self._state is not TweenState.PLAYING:
                return

        if progress == duration:
            self._complete()

    def _complete(self) -> None:
        handler = self._on_complete
        self._state = TweenState.COMPLETE
        try:
            if handler is not None:
                handler()
        finally:
            self._detach()
        logger.debug("tween %s complete", self._id)

    def _detach(self) -> None:
        self._on_start = None
        self._on_update = None
        self._on_complete = None
        self._registry.unregister(self._id)
