"""Tests for FrameLoop stepping, frame callbacks and pacing."""
from __future__ import annotations

import pytest

from tick_tween import FrameLoop, ManualClock, MonotonicClock, Tween, TweenRegistry


def make_loop(fps: int = 60) -> tuple[FrameLoop, ManualClock]:
    clock = ManualClock()
    return FrameLoop(TweenRegistry(clock), fps=fps), clock


# --- Initialization ---

def test_defaults():
    """Test a bare loop runs at 60 fps on a monotonic clock."""
    loop = FrameLoop()
    assert loop.fps == 60
    assert loop.frame_number == 0
    assert isinstance(loop.registry.clock, MonotonicClock)


def test_dt_from_fps():
    """Test dt is the reciprocal of fps."""
    loop, _ = make_loop(fps=50)
    assert loop.dt == pytest.approx(0.02)


def test_fps_must_be_positive():
    """Test zero or negative fps raises ValueError."""
    with pytest.raises(ValueError):
        FrameLoop(fps=0)
    with pytest.raises(ValueError):
        FrameLoop(fps=-10)


# --- Stepping ---

def test_step_advances_frame_number():
    """Test each step() increments frame_number."""
    loop, _ = make_loop()
    loop.step()
    loop.step()
    assert loop.frame_number == 2


def test_step_returns_registry_tick_result():
    """Test step() reports whether the registry had tweens."""
    loop, _ = make_loop()
    assert loop.step() is False
    Tween(loop.registry, {}, {})
    assert loop.step() is True


def test_step_ticks_registry():
    """Test step() advances playing tweens."""
    loop, clock = make_loop()
    values = {"x": 0.0}
    Tween(loop.registry, values, {"x": 100.0}, duration=100).start()
    clock.advance(50)
    loop.step()
    assert values["x"] == 50.0


def test_run_n_frames():
    """Test run(n) steps exactly n frames."""
    loop, _ = make_loop()
    loop.run(5)
    assert loop.frame_number == 5


def test_stop_inside_run():
    """Test stop() from a frame callback ends run() early."""
    loop, _ = make_loop()

    def stop_soon():
        if loop.frame_number == 3:
            loop.stop()
        else:
            loop.request_frame(stop_soon)

    loop.request_frame(stop_soon)
    loop.run(10)
    assert loop.frame_number == 3


# --- Frame callbacks ---

def test_request_frame_runs_on_next_step():
    """Test a requested callback runs once, on the next step."""
    loop, _ = make_loop()
    calls = []
    loop.request_frame(lambda: calls.append(loop.frame_number))
    assert calls == []
    loop.step()
    loop.step()
    assert calls == [1]


def test_callbacks_run_in_request_order():
    """Test callbacks in one frame run in the order requested."""
    loop, _ = make_loop()
    order = []
    loop.request_frame(lambda: order.append("first"))
    loop.request_frame(lambda: order.append("second"))
    loop.request_frame(lambda: order.append("third"))
    loop.step()
    assert order == ["first", "second", "third"]


def test_request_during_frame_defers_to_next():
    """Test a callback requested during a frame waits for the next one."""
    loop, _ = make_loop()
    frames = []

    def again():
        frames.append(loop.frame_number)
        if len(frames) < 3:
            loop.request_frame(again)

    loop.request_frame(again)
    loop.run(5)
    assert frames == [1, 2, 3]


def test_cancel_frame():
    """Test a cancelled callback never runs."""
    loop, _ = make_loop()
    calls = []
    handle = loop.request_frame(lambda: calls.append(True))
    loop.cancel_frame(handle)
    loop.step()
    assert calls == []
    assert loop.pending == 0


def test_cancel_unknown_handle_is_noop():
    """Test cancelling an unknown handle does nothing."""
    loop, _ = make_loop()
    loop.cancel_frame(999)


def test_cancel_from_earlier_callback_in_same_frame():
    """Test a callback can cancel a later one in the same frame."""
    loop, _ = make_loop()
    calls = []
    handles = []
    loop.request_frame(lambda: loop.cancel_frame(handles[0]))
    handles.append(loop.request_frame(lambda: calls.append(True)))
    loop.step()
    assert calls == []


def test_callbacks_run_before_registry_tick():
    """Test frame callbacks run before tweens are updated."""
    loop, clock = make_loop()
    order = []
    Tween(loop.registry, {}, {}, duration=100).on_update(
        lambda v: order.append("tween")
    ).start()
    loop.request_frame(lambda: order.append("callback"))
    clock.advance(10)
    loop.step()
    assert order == ["callback", "tween"]


# --- Idle handling ---

def test_is_idle():
    """Test idle means no pending callbacks and no registered tweens."""
    loop, _ = make_loop()
    assert loop.is_idle()
    handle = loop.request_frame(lambda: None)
    assert not loop.is_idle()
    loop.cancel_frame(handle)
    Tween(loop.registry, {}, {})
    assert not loop.is_idle()


def test_run_until_idle():
    """Test run_until_idle() returns once the last tween completes."""
    loop, clock = make_loop()
    values = {"x": 0.0}
    Tween(loop.registry, values, {"x": 1.0}, duration=0).start()
    frames = loop.run_until_idle()
    assert frames == 1
    assert values["x"] == 1.0


def test_run_until_idle_respects_max_frames():
    """Test max_frames bounds the run when a tween never leaves."""
    loop, _ = make_loop()
    Tween(loop.registry, {}, {})  # never started, never leaves
    assert loop.run_until_idle(max_frames=4) == 4
    assert loop.frame_number == 4


def test_unstarted_tween_blocks_idle_until_started():
    """Test an unstarted tween keeps the loop busy until it is started."""
    loop, _ = make_loop()
    tween = Tween(loop.registry, {}, {}, duration=0)
    assert loop.run_until_idle(max_frames=3) == 3
    tween.start()
    assert loop.run_until_idle() == 1
    assert loop.is_idle()


def test_run_forever_until_idle():
    """Test run_forever(until_idle=True) exits after the last tween."""
    registry = TweenRegistry()
    loop = FrameLoop(registry, fps=1000)
    completed = []
    Tween(registry, {}, {}, duration=5).on_complete(
        lambda: completed.append(True)
    ).start()
    loop.run_forever(until_idle=True)
    assert completed == [True]
    assert len(registry) == 0


def test_run_forever_stops_on_request():
    """Test stop() ends run_forever()."""
    loop = FrameLoop(fps=1000)

    def stopper():
        if loop.frame_number >= 3:
            loop.stop()
        else:
            loop.request_frame(stopper)

    loop.request_frame(stopper)
    loop.run_forever()
    assert loop.frame_number == 3
