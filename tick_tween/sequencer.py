"""Sequencer - runs groups of tweens one after another."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Iterable

from tick_tween.frames import FrameLoop
from tick_tween.tween import Tween

logger = logging.getLogger(__name__)

StepCallback = Callable[[], None]


@dataclass(eq=False)
class Step:
    """Tweens started together, plus the callback fired once all finish."""

    tweens: list[Tween] = field(default_factory=list)
    callback: StepCallback | None = None

    def is_finished(self) -> bool:
        return all(tween.is_finished for tween in self.tweens)


class Sequencer:
    """Ordered queue of steps advanced by a per-frame poll.

    Step N+1 is started only after every tween of step N has completed
    (or been removed). The poll is scheduled through the frame loop's
    ``request_frame`` and only while steps remain.
    """

    def __init__(self, loop: FrameLoop) -> None:
        self._loop = loop
        self._steps: deque[Step] = deque()
        self._active: Step | None = None
        self._running = False
        self._poll_handle: int | None = None
        self._on_complete: StepCallback | None = None

    @property
    def loop(self) -> FrameLoop:
        return self._loop

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def steps_remaining(self) -> int:
        return len(self._steps)

    @property
    def active_step(self) -> Step | None:
        return self._active

    # --- Building ---

    def add_step(
        self, tweens: Tween | Iterable[Tween], callback: StepCallback | None = None
    ) -> Sequencer:
        if isinstance(tweens, Tween):
            tweens = [tweens]
        self._steps.append(Step(tweens=list(tweens), callback=callback))
        return self

    def add_delay(
        self, duration: float, callback: StepCallback | None = None
    ) -> Sequencer:
        """Append a step that only waits ``duration`` ms, then calls ``callback``."""
        wait = Tween(self._loop.registry, {}, {}, duration=duration)
        if callback is not None:
            wait.on_complete(callback)
        return self.add_step(wait)

    def on_complete(self, callback: StepCallback) -> Sequencer:
        self._on_complete = callback
        return self

    # --- Control ---

    def run(self) -> Sequencer:
        if self._steps:
            front = self._steps[0]
            if front is not self._active:
                self._active = front
                for tween in front.tweens:
                    tween.start()
                logger.debug(
                    "step activated (%d tween(s), %d step(s) queued)",
                    len(front.tweens),
                    len(self._steps),
                )
            if not self._running:
                self._running = True
                self._schedule()
        else:
            self._cancel()
            self._active = None
            self._running = False
            logger.debug("sequence complete")
            if self._on_complete is not None:
                self._on_complete()
        return self

    def reset(self) -> Sequencer:
        """Drop every queued step and clear the whole registry.

        The registry is shared by every tween of the session, so tweens
        created outside this sequencer are removed too.

        Dropped tweens are not stopped: one that was playing keeps
        reporting ``is_playing`` but is never ticked again.
        """
        self._steps.clear()
        self._cancel()
        self._active = None
        self._running = False
        self._loop.registry.clear()
        logger.debug("sequencer reset")
        return self

    # --- Internal ---

    def _schedule(self) -> None:
        self._poll_handle = self._loop.request_frame(self._poll)

    def _cancel(self) -> None:
        if self._poll_handle is not None:
            self._loop.cancel_frame(self._poll_handle)
            self._poll_handle = None

    def _poll(self) -> None:
        self._poll_handle = None
        active = self._active
        if active is not None and active.is_finished():
            if self._steps and self._steps[0] is active:
                self._steps.popleft()
            self._active = None
            logger.debug("step finished, %d step(s) left", len(self._steps))
            if active.callback is not None:
                active.callback()
            # A callback may have reset the sequencer.
            if not self._running:
                return
            self.run()
        if self._steps and self._running and self._poll_handle is None:
            self._schedule()
