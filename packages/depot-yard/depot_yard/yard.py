"""Yard - the thread-safe facade front-ends drive."""
from __future__ import annotations

import copy
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterable

from depot import Engine, Failure, Result
from depot_craft import CraftingJob, Recipe, make_crafting_system
from depot_field import Direction, ItemDrop, compact_drops, parse_directions
from depot_items import transfer
from depot_notice import Notice, make_notice_system

from depot_yard.messages import describe_failure, fields_for
from depot_yard.state import GameState, Player, Warehouse
from depot_yard.systems import (
    make_movement_system,
    make_pickup_system,
    on_craft_blocked,
    on_craft_complete,
    pickup_nearby,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Deep-copied view of a yard at one instant, for drawing."""

    tick: int
    now: float
    player: Player
    warehouses: list[Warehouse]
    drops: list[ItemDrop]
    crafting_queue: list[CraftingJob]


class Yard:
    """Owns a GameState and the engine that ticks it.

    Every public call and every tick runs under one re-entrant lock, so a UI
    thread may call in while :meth:`run_forever` ticks on another thread.
    Calls that change state publish their notices and flush them before
    returning.
    """

    def __init__(self, state: GameState) -> None:
        self._state = state
        self._lock = threading.RLock()
        self._engine: Engine[GameState] = Engine(state, tps=state.config.tps, lock=self._lock)
        self._engine.add_system(make_movement_system())
        self._engine.add_system(make_pickup_system())
        self._engine.add_system(
            make_crafting_system(
                state.crafting, on_complete=on_craft_complete, on_blocked=on_craft_blocked
            )
        )
        self._engine.add_system(make_notice_system(state.notices))

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def engine(self) -> Engine[GameState]:
        return self._engine

    @property
    def now(self) -> float:
        return self._engine.now

    # -- reads -------------------------------------------------------------

    def get_snapshot(self) -> Snapshot:
        with self._lock:
            state = self._state
            return Snapshot(
                tick=self._engine.clock.tick_number,
                now=self._engine.now,
                player=copy.deepcopy(state.player),
                warehouses=copy.deepcopy(list(state.warehouses.values())),
                drops=copy.deepcopy(state.drops),
                crafting_queue=copy.deepcopy(state.crafting.jobs()),
            )

    def recipes(self) -> list[Recipe]:
        return self._state.recipes.recipes()

    def warehouse_in_reach(self, reach: float | None = None) -> Warehouse | None:
        """Closest warehouse whose footprint lies within *reach* of the player's edge."""
        with self._lock:
            state = self._state
            reach = state.config.interact_reach if reach is None else reach
            best: Warehouse | None = None
            best_gap = 0.0
            for warehouse in state.warehouses.values():
                gap = warehouse.footprint.gap_to(state.player.position) - state.config.half_size
                if gap > reach:
                    continue
                if best is None or gap < best_gap:
                    best, best_gap = warehouse, gap
            return best

    # -- notices -------------------------------------------------------------

    def subscribe(self, handler: Callable[[Notice], None]) -> None:
        with self._lock:
            self._state.notices.subscribe(handler)

    def unsubscribe(self, handler: Callable[[Notice], None]) -> None:
        with self._lock:
            self._state.notices.unsubscribe(handler)

    # -- commands --------------------------------------------------------------

    def apply_movement_intent(self, directions: Iterable[Direction | str]) -> None:
        """Replace the held directions. The movement system reads them every tick."""
        held = parse_directions(directions)
        with self._lock:
            self._state.held = held

    def attempt_pickup(self) -> list[Result]:
        with self._lock:
            results = pickup_nearby(self._state)
            self._state.notices.flush()
            return results

    def transfer_item(
        self, source_id: str, dest_id: str, item_id: str, quantity: int
    ) -> Result:
        with self._lock:
            state = self._state
            source = state.container(source_id)
            destination = state.container(dest_id)
            if source is None or destination is None:
                missing = source_id if source is None else dest_id
                result = Result.fail(
                    Failure.UNKNOWN_CONTAINER, container_id=missing, item_id=item_id
                )
            else:
                result = transfer(source, destination, item_id, quantity)

            if result.ok:
                name = state.catalog.display_name(item_id)
                state.notices.success(f"Moved {quantity} {name}", **result.context)
            else:
                logger.info("Transfer %s -> %s rejected: %s", source_id, dest_id, result.failure.value)
                self._report(result)
            state.notices.flush()
            return result

    def start_crafting(self, recipe_id: str) -> Result:
        with self._lock:
            state = self._state
            result = state.crafting.start(recipe_id, self._engine.now)
            if result.ok:
                recipe = state.recipes.get(recipe_id)
                state.notices.info(f"Started crafting: {recipe.name}", **result.context)
            else:
                logger.info("Crafting %s rejected: %s", recipe_id, result.failure.value)
                self._report(result)
            state.notices.flush()
            return result

    def compact_drops(self) -> int:
        """Forget collected drops. Returns how many were removed."""
        with self._lock:
            return compact_drops(self._state.drops)

    # -- loop --------------------------------------------------------------

    def step(self) -> None:
        self._engine.step()

    def run(self, n: int) -> None:
        self._engine.run(n)

    def run_forever(self) -> None:
        self._engine.run_forever()

    def stop(self) -> None:
        self._engine.stop()

    # -- internals ---------------------------------------------------------

    def _report(self, result: Result) -> None:
        state = self._state
        names = state.container_names()
        message = describe_failure(result, state.catalog, state.recipes, names)
        context = dict(fields_for(result.context, state.catalog, state.recipes, names))
        state.notices.error(message, failure=result.failure.value, **context)
