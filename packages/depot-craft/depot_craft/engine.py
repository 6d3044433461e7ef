"""CraftingEngine - starts and completes timed crafting jobs."""
from __future__ import annotations

import logging
from typing import Callable, Mapping

from depot import Failure, Result
from depot_items import Container, ContainerHelper, ItemCatalog, deposit, withdraw_all

from depot_craft.queue import CraftingJob, CraftingQueue
from depot_craft.recipe import Recipe, RecipeBook

logger = logging.getLogger(__name__)

ContainerLookup = Callable[[str], "Container | None"]


class CraftingEngine:
    """Runs timed recipes between role-resolved containers.

    ``roles`` maps a recipe role (``"storage"``, ``"production"``, ...) to a
    container id; ``containers`` resolves a container id to its Container.

    With ``strict_output_capacity`` a finished job whose output does not fit
    stays queued (flagged ``blocked``) and is retried on every poll. Without
    it the output is credited past the container's capacity.
    """

    def __init__(
        self,
        recipes: RecipeBook,
        catalog: ItemCatalog,
        containers: ContainerLookup,
        roles: Mapping[str, str],
        strict_output_capacity: bool = True,
    ) -> None:
        self._recipes = recipes
        self._catalog = catalog
        self._containers = containers
        self._roles = dict(roles)
        self._strict = strict_output_capacity
        self._queue = CraftingQueue()
        self._next_job_id = 1

    @property
    def recipes(self) -> RecipeBook:
        return self._recipes

    @property
    def strict_output_capacity(self) -> bool:
        return self._strict

    def resolve_role(self, role: str) -> Container | None:
        """Container currently designated for *role*, or None."""
        container_id = self._roles.get(role)
        if container_id is None:
            return None
        return self._containers(container_id)

    def is_pending(self, recipe_id: str) -> bool:
        """True while a job for *recipe_id* sits in the queue."""
        return self._queue.has_recipe(recipe_id)

    def jobs(self) -> list[CraftingJob]:
        return self._queue.jobs()

    def __len__(self) -> int:
        return len(self._queue)

    def start(self, recipe_id: str, now: float) -> Result:
        """Validate and debit ingredients, then queue a job finishing at ``now + crafting_time``."""
        recipe = self._recipes.get(recipe_id)
        if recipe is None:
            return Result.fail(Failure.UNKNOWN_RECIPE, recipe_id=recipe_id)
        if self._queue.has_recipe(recipe_id):
            return Result.fail(Failure.RECIPE_ALREADY_QUEUED, recipe_id=recipe_id)

        source = self.resolve_role(recipe.source_role)
        if source is None:
            return Result.fail(
                Failure.MISSING_INGREDIENT_SOURCE, recipe_id=recipe_id, role=recipe.source_role
            )
        destination = self.resolve_role(recipe.output_role)
        if destination is None:
            return Result.fail(
                Failure.MISSING_OUTPUT_DESTINATION, recipe_id=recipe_id, role=recipe.output_role
            )

        missing = ContainerHelper.shortfall(source, recipe.requirements)
        if missing is not None:
            item_id, required, available = missing
            return Result.fail(
                Failure.INSUFFICIENT_INGREDIENT,
                recipe_id=recipe_id,
                item_id=item_id,
                required=required,
                available=available,
            )
        debited = withdraw_all(source, recipe.requirements)
        if not debited:
            return Result.fail(Failure.INSUFFICIENT_INGREDIENT, recipe_id=recipe_id, **debited.context)

        job = CraftingJob(
            job_id=self._next_job_id,
            recipe_id=recipe_id,
            start_time=now,
            deadline=now + recipe.crafting_time,
            output_container=destination.container_id,
        )
        self._next_job_id += 1
        self._queue.push(job)
        logger.info(
            "Started job %d (%s) from %s, due at %.2fs",
            job.job_id, recipe_id, source.container_id, job.deadline,
        )
        return Result.success(
            recipe_id=recipe_id,
            job_id=job.job_id,
            source=source.container_id,
            destination=destination.container_id,
            deadline=job.deadline,
        )

    def complete_due(self, now: float) -> list[tuple[CraftingJob, Result]]:
        """Finish every job due at *now*.

        Returns one ``(job, result)`` per completed job and per job that
        became blocked on this poll. Jobs already blocked retry silently.
        """
        outcomes: list[tuple[CraftingJob, Result]] = []
        retry: list[CraftingJob] = []
        for job in self._queue.pop_due(now):
            recipe = self._recipes.get(job.recipe_id)
            assert recipe is not None
            result = self._credit_output(job, recipe)
            if result.ok:
                logger.info("Completed job %d (%s) into %s", job.job_id, job.recipe_id, job.output_container)
                outcomes.append((job, result))
                continue
            retry.append(job)
            if not job.blocked:
                job.blocked = True
                logger.warning(
                    "Job %d (%s) blocked: %s", job.job_id, job.recipe_id, result.failure.value
                )
                outcomes.append((job, result))
        for job in retry:
            self._queue.push(job)
        return outcomes

    def _credit_output(self, job: CraftingJob, recipe: Recipe) -> Result:
        destination = self._containers(job.output_container)
        if destination is None:
            return Result.fail(
                Failure.MISSING_OUTPUT_DESTINATION,
                recipe_id=recipe.recipe_id,
                job_id=job.job_id,
                container_id=job.output_container,
            )
        output = recipe.output
        result = deposit(
            destination,
            self._catalog,
            output.item_id,
            output.quantity,
            enforce_capacity=self._strict,
        )
        if not result.ok:
            return Result.fail(result.failure, recipe_id=recipe.recipe_id, job_id=job.job_id, **result.context)
        job.blocked = False
        return Result.success(
            recipe_id=recipe.recipe_id,
            job_id=job.job_id,
            destination=destination.container_id,
            item_id=output.item_id,
            quantity=output.quantity,
        )
