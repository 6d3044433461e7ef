"""CraftingJob and the deadline-ordered crafting queue."""
from __future__ import annotations

import heapq
from dataclasses import dataclass


@dataclass
class CraftingJob:
    """An in-flight recipe instance. Ingredients are already debited."""

    job_id: int
    recipe_id: str
    start_time: float
    deadline: float
    output_container: str
    blocked: bool = False

    @property
    def duration(self) -> float:
        return self.deadline - self.start_time

    def remaining(self, now: float) -> float:
        """Seconds until the deadline, never negative."""
        return max(0.0, self.deadline - now)

    def progress(self, now: float) -> float:
        """Fraction of the duration elapsed, clamped to [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return min(1.0, max(0.0, (now - self.start_time) / self.duration))


class CraftingQueue:
    """Priority queue of jobs keyed by ``(deadline, job_id)``."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, CraftingJob]] = []

    def push(self, job: CraftingJob) -> None:
        heapq.heappush(self._heap, (job.deadline, job.job_id, job))

    def pop_due(self, now: float) -> list[CraftingJob]:
        """Remove and return every job whose deadline is at or before *now*, earliest first."""
        due: list[CraftingJob] = []
        while self._heap and self._heap[0][0] <= now:
            due.append(heapq.heappop(self._heap)[2])
        return due

    def peek(self) -> CraftingJob | None:
        return self._heap[0][2] if self._heap else None

    def has_recipe(self, recipe_id: str) -> bool:
        return any(job.recipe_id == recipe_id for _, _, job in self._heap)

    def jobs(self) -> list[CraftingJob]:
        """All queued jobs in completion order."""
        return [job for _, _, job in sorted(self._heap, key=lambda e: (e[0], e[1]))]

    def __len__(self) -> int:
        return len(self._heap)
