"""Sequencing -- chain groups of tweens and wait between them.

Demonstrates:
- Sharing one TweenRegistry between tweens through a FrameLoop
- Running two tweens concurrently as a single step
- Inserting a pause with add_delay
- Per-step and whole-sequence completion callbacks
- Driving frames by hand with a ManualClock

Run: python examples/sequence.py
"""

import logging

from tick_tween import FrameLoop, ManualClock, Sequencer, Tween, TweenRegistry

FRAME_MS = 50


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="    %(name)s: %(message)s")
    print("=== Sequence ===\n")

    clock = ManualClock()
    loop = FrameLoop(TweenRegistry(clock), fps=20)

    box = {"x": 0.0, "y": 0.0}
    fade = {"alpha": 1.0}
    ball = {"y": 0.0}

    slide = Tween(loop.registry, box, {"x": 200.0, "y": 50.0}, duration=300,
                  easing="ease_out_cubic")
    dim = Tween(loop.registry, fade, {"alpha": 0.2}, duration=200,
                easing="ease_in_out_sine")
    drop = Tween(loop.registry, ball, {"y": 180.0}, duration=400,
                 easing="ease_out_bounce")

    done = []
    seq = (
        Sequencer(loop)
        .add_step([slide, dim], lambda: print("  -- slide and fade finished"))
        .add_delay(150, lambda: print("  -- pause over"))
        .add_step(drop, lambda: print("  -- drop finished"))
        .on_complete(lambda: done.append(True))
    )
    seq.run()

    while not done:
        clock.advance(FRAME_MS)
        loop.step()
        print(
            f"  frame {loop.frame_number:2d}  t={clock.now():5.0f}ms  "
            f"x={box['x']:7.2f}  y={box['y']:7.2f}  "
            f"alpha={fade['alpha']:.2f}  ball={ball['y']:6.2f}"
        )

    print(f"\nDone after {loop.frame_number} frames.")


if __name__ == "__main__":
    main()
