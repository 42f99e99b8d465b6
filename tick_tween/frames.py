"""FrameLoop - frame callbacks, registry ticking and real-time pacing."""
from __future__ import annotations

import logging
import time

from tick_tween.config import DEFAULT_FPS
from tick_tween.registry import TweenRegistry
from tick_tween.types import FrameCallback

logger = logging.getLogger(__name__)


class FrameLoop:
    """Drives a TweenRegistry one frame at a time.

    Callbacks passed to ``request_frame`` run once, at the start of the
    next ``step()``, before the registry is ticked. A callback that
    requests another frame is deferred to the following step.
    """

    def __init__(
        self, registry: TweenRegistry | None = None, fps: int = DEFAULT_FPS
    ) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._registry = registry if registry is not None else TweenRegistry()
        self._fps = fps
        self._dt = 1.0 / fps
        self._frame_number = 0
        self._next_handle = 0
        self._pending: dict[int, FrameCallback] = {}
        self._stop_requested = False

    @property
    def registry(self) -> TweenRegistry:
        return self._registry

    @property
    def fps(self) -> int:
        return self._fps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def stop(self) -> None:
        self._stop_requested = True

    def is_idle(self) -> bool:
        return not self._pending and len(self._registry) == 0

    def step(self) -> bool:
        self._frame_number += 1
        pending = self._pending
        for handle in list(pending):
            callback = pending.pop(handle, None)
            if callback is not None:
                callback()
        return self._registry.tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self.step()
            if self._stop_requested:
                break

    def run_until_idle(self, max_frames: int | None = None) -> int:
        """Step until nothing is registered or pending. Returns frames stepped.

        A tween that was created but never started stays registered, so
        without ``max_frames`` this only returns once such tweens are
        started, stopped or cleared.
        """
        self._stop_requested = False
        frames = 0
        while not self.is_idle() and not self._stop_requested:
            if max_frames is not None and frames >= max_frames:
                break
            self.step()
            frames += 1
        return frames

    def run_forever(self, until_idle: bool = False) -> None:
        """Run paced frames until ``stop()`` is called.

        With ``until_idle`` the loop also exits once ``is_idle()`` holds,
        which never happens while an unstarted tween is registered.
        """
        self._stop_requested = False
        logger.debug("frame loop running at %d fps", self._fps)
        dt = self._dt
        while not self._stop_requested:
            if until_idle and self.is_idle():
                break
            start = time.monotonic()
            self.step()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
        logger.debug("frame loop stopped at frame %d", self._frame_number)
