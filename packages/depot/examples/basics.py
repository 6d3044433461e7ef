"""Hello World -- the simplest possible depot engine program.

Demonstrates:
- Creating an engine over a plain state value with a fixed tick rate
- Defining a system as a plain function
- Reading tick_number, dt, and elapsed from TickContext
- Stopping early with ctx.request_stop()

Run: python -m examples.basics
"""

from dataclasses import dataclass

from depot import Engine
from depot.types import TickContext


@dataclass
class Counter:
    ticks_seen: int = 0


# A system is just a function that takes (state, ctx).
def hello_system(state: Counter, ctx: TickContext) -> None:
    state.ticks_seen += 1
    print(
        f"  tick {ctx.tick_number}  |  dt={ctx.dt:.3f}s  |  elapsed={ctx.elapsed:.3f}s"
    )


def stop_after_one_second(state: Counter, ctx: TickContext) -> None:
    if ctx.elapsed >= 1.0:
        print("  one simulated second passed -- requesting stop")
        ctx.request_stop()


def main() -> None:
    print("=== Hello World ===\n")

    # Create an engine running at 5 ticks per second.
    engine = Engine(Counter(), tps=5)
    engine.add_system(hello_system)
    engine.add_system(stop_after_one_second)

    # Ask for 20 ticks; the stop request ends it at tick 5.
    engine.run(20)

    print(f"\nDone. Clock stopped at tick {engine.clock.tick_number}, "
          f"state saw {engine.state.ticks_seen} ticks.")


if __name__ == "__main__":
    main()
