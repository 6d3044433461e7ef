"""Shared types for the depot engine: tick context and operation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TypeVar

S = TypeVar("S")


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


System = Callable[[Any, TickContext], None]


class Failure(str, Enum):
    """Named reasons an operation was rejected. State is unchanged on all of them."""

    INSUFFICIENT_SOURCE = "InsufficientSource"
    INSUFFICIENT_CAPACITY = "InsufficientCapacity"
    UNKNOWN_RECIPE = "UnknownRecipe"
    MISSING_INGREDIENT_SOURCE = "MissingIngredientSource"
    MISSING_OUTPUT_DESTINATION = "MissingOutputDestination"
    INSUFFICIENT_INGREDIENT = "InsufficientIngredient"
    RECIPE_ALREADY_QUEUED = "RecipeAlreadyQueued"
    UNKNOWN_CONTAINER = "UnknownContainer"
    INVALID_QUANTITY = "InvalidQuantity"
    SAME_CONTAINER = "SameContainer"
    ALREADY_COLLECTED = "AlreadyCollected"


@dataclass(frozen=True)
class Result:
    """Outcome of a core operation.

    Attributes:
        failure: ``None`` on success, otherwise the reason for rejection.
        context: Details for the caller (item ids, quantities, job ids).
    """

    failure: Failure | None = None
    context: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, **context: Any) -> Result:
        return cls(None, context)

    @classmethod
    def fail(cls, failure: Failure, **context: Any) -> Result:
        return cls(failure, context)
