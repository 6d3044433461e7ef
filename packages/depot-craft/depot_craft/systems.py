"""System factory for crafting completion."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from depot import Result

from depot_craft.engine import CraftingEngine
from depot_craft.queue import CraftingJob

if TYPE_CHECKING:
    from depot import TickContext

JobCallback = Callable[[Any, "TickContext", CraftingJob, Result], None]


def make_crafting_system(
    crafting: CraftingEngine,
    on_complete: JobCallback | None = None,
    on_blocked: JobCallback | None = None,
) -> Callable[[Any, TickContext], None]:
    """Return a system that completes due jobs each tick.

    ``on_complete(state, ctx, job, result)`` fires once per finished job.
    ``on_blocked(state, ctx, job, result)`` fires once when a job's output
    first fails to fit its container.
    """

    def crafting_system(state: Any, ctx: TickContext) -> None:
        for job, result in crafting.complete_due(ctx.elapsed):
            if result.ok:
                if on_complete is not None:
                    on_complete(state, ctx, job, result)
            elif on_blocked is not None:
                on_blocked(state, ctx, job, result)

    return crafting_system
