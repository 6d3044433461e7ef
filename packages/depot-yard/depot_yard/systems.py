"""Yard systems: movement, pickup, and crafting notices."""
from __future__ import annotations

from typing import Callable

from depot import Result, TickContext
from depot_craft import CraftingJob
from depot_field import collect, drops_in_reach, resolve_move

from depot_yard.state import GameState


def make_movement_system() -> Callable[[GameState, TickContext], None]:
    """Move the player one step along the held directions. Rejected moves are silent."""

    def movement_system(state: GameState, ctx: TickContext) -> None:
        if not state.held:
            return
        cfg = state.config
        move = resolve_move(
            state.player.position,
            state.held,
            state.bounds,
            cfg.half_size,
            cfg.player_speed,
            state.obstacles(),
        )
        state.player.position = move.position

    return movement_system


def pickup_nearby(state: GameState) -> list[Result]:
    """Collect every drop within reach of the player, publishing a notice per outcome.

    A drop refused for lack of room (only when drops are kept on the ground)
    is announced once, then again only after the player leaves and returns.
    """
    cfg = state.config
    player = state.player
    nearby = drops_in_reach(player.position, state.drops, cfg.pickup_radius)
    state.refused_drops &= {drop.drop_id for drop in nearby}

    results: list[Result] = []
    for drop in nearby:
        result = collect(
            drop, player.inventory, state.catalog, keep_when_full=cfg.keep_drops_when_full
        )
        results.append(result)
        name = state.catalog.display_name(drop.item_id)
        if result.ok:
            leveled = player.gain_experience(cfg.pickup_experience)
            state.notices.success(
                f"Picked up {drop.quantity} {name}",
                experience=cfg.pickup_experience,
                **result.context,
            )
            if leveled:
                state.notices.info(f"Level up! Now level {player.level}", level=player.level)
        elif result.context.get("lost"):
            state.notices.error(f"Inventory full: {drop.quantity} {name} lost", **result.context)
        elif drop.drop_id not in state.refused_drops:
            state.refused_drops.add(drop.drop_id)
            state.notices.error(f"Inventory full: no room for {name}", **result.context)
    return results


def make_pickup_system() -> Callable[[GameState, TickContext], None]:
    def pickup_system(state: GameState, ctx: TickContext) -> None:
        pickup_nearby(state)

    return pickup_system


def on_craft_complete(state: GameState, ctx: TickContext, job: CraftingJob, result: Result) -> None:
    recipe = state.recipes.get(job.recipe_id)
    state.notices.success(
        f"Created: {result.context['quantity']} {recipe.name}", **result.context
    )


def on_craft_blocked(state: GameState, ctx: TickContext, job: CraftingJob, result: Result) -> None:
    recipe = state.recipes.get(job.recipe_id)
    names = state.container_names()
    where = names.get(job.output_container, job.output_container)
    state.notices.error(
        f"{recipe.name} is waiting for space in {where}",
        failure=result.failure.value,
        **result.context,
    )
