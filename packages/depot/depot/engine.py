"""Engine - core loop, pacing, and lifecycle hooks."""

import contextlib
import logging
import time
from typing import Any, Callable, ContextManager, Generic

from depot.clock import Clock
from depot.types import S, System, TickContext

logger = logging.getLogger(__name__)


class Engine(Generic[S]):
    """Runs systems over a single state value at a fixed rate.

    Every tick runs the registered systems in order. ``lock`` (any context
    manager) is held for the whole tick so callers on other threads can
    serialize their own mutations against it.
    """

    def __init__(
        self,
        state: S,
        tps: int = 60,
        lock: ContextManager[Any] | None = None,
    ) -> None:
        self._state = state
        self._clock = Clock(tps)
        self._lock = lock if lock is not None else contextlib.nullcontext()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[S, TickContext], None]] = []
        self._stop_hooks: list[Callable[[S, TickContext], None]] = []
        self._stop_requested: bool = False

    @property
    def state(self) -> S:
        return self._state

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def now(self) -> float:
        return self._clock.elapsed

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[S, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[S, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def stop(self) -> None:
        """Ask a running loop to stop after the current tick. Safe from other threads."""
        self._stop_requested = True

    def _tick(self) -> None:
        with self._lock:
            self._clock.advance()
            ctx = self._clock.context(self._request_stop)
            for system in self._systems:
                system(self._state, ctx)
                if self._stop_requested:
                    break

    def _run_hooks(self, hooks: list[Callable[[S, TickContext], None]]) -> None:
        ctx = self._clock.context(self._request_stop)
        for hook in hooks:
            hook(self._state, ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        logger.info("Engine running at %d tps", self._clock.tps)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.info("Engine stopped at tick %d", self._clock.tick_number)
        self._run_hooks(self._stop_hooks)
