"""TweenRegistry - the session of live tweens, advanced once per frame."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_tween.clock import Clock, MonotonicClock
from tick_tween.types import TweenId

if TYPE_CHECKING:
    from tick_tween.tween import Tween

logger = logging.getLogger(__name__)


class TweenRegistry:
    """Collection of registered tweens and the clock they sample.

    Every Tween and Sequencer is handed a registry explicitly; clearing
    one registry only affects the tweens created against it.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock if clock is not None else MonotonicClock()
        self._tweens: dict[TweenId, Tween] = {}
        self._next_id: TweenId = 0

    @property
    def clock(self) -> Clock:
        return self._clock

    def now(self) -> float:
        return self._clock.now()

    def __len__(self) -> int:
        return len(self._tweens)

    def __contains__(self, tween_id: object) -> bool:
        return tween_id in self._tweens

    def get(self, tween_id: TweenId) -> Tween | None:
        return self._tweens.get(tween_id)

    def register(self, tween: Tween) -> TweenId:
        """Insert ``tween`` under a fresh id and return it."""
        tween_id = self._next_id
        self._next_id += 1
        tween._id = tween_id
        self._tweens[tween_id] = tween
        logger.debug("registered tween %s", tween_id)
        return tween_id

    def unregister(self, tween_id: TweenId) -> None:
        if self._tweens.pop(tween_id, None) is not None:
            logger.debug("unregistered tween %s", tween_id)

    def tick(self) -> bool:
        """Update every registered tween. False if there was nothing to update."""
        if not self._tweens:
            return False
        now = self._clock.now()
        tweens = self._tweens
        for tween_id, tween in list(tweens.items()):
            # Skip entries removed earlier in this same tick.
            if tween_id in tweens:
                tween._update(now)
        return True

    def clear(self) -> None:
        """Forget every tween. Their state is left as it was.

        A dropped tween that was playing still reports ``is_playing``
        although nothing ticks it any more.
        """
        logger.debug("clearing %d tween(s)", len(self._tweens))
        self._tweens.clear()
