"""Movement resolver: directional intent to a clamped, collision-checked position."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from depot_field.collision import Field, Rect

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def vector(self) -> tuple[int, int]:
        """Unit step in screen coordinates (y grows downward)."""
        return _VECTORS[self]


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


def parse_directions(values: Iterable[Direction | str]) -> frozenset[Direction]:
    """Normalise held keys to Directions. Unknown names are dropped."""
    held: set[Direction] = set()
    for value in values:
        try:
            held.add(Direction(value))
        except ValueError:
            logger.warning("Ignoring unknown direction %r", value)
    return frozenset(held)


def intent_vector(directions: Iterable[Direction], speed: float) -> tuple[float, float]:
    """Sum of unit vectors times *speed*. Opposites cancel; diagonals are not normalized."""
    dx = dy = 0
    for direction in set(directions):
        vx, vy = direction.vector
        dx += vx
        dy += vy
    return (dx * speed, dy * speed)


@dataclass(frozen=True)
class Move:
    """Outcome of one movement tick."""

    position: tuple[float, float]
    blocked: bool = False


def resolve_move(
    position: tuple[float, float],
    directions: Iterable[Direction],
    field: Field,
    half_size: float,
    speed: float,
    obstacles: Iterable[Rect] = (),
) -> Move:
    """Advance *position* one tick.

    The candidate is clamped to the field, then rejected outright (no axis
    sliding) if the player's box overlaps any obstacle.
    """
    dx, dy = intent_vector(directions, speed)
    if dx == 0 and dy == 0:
        return Move(position)
    candidate = field.clamp((position[0] + dx, position[1] + dy), half_size)
    box = Rect.around(candidate, half_size)
    for obstacle in obstacles:
        if box.overlaps(obstacle):
            return Move(position, blocked=True)
    return Move(candidate)
