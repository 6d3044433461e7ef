"""Axis-aligned boxes, field bounds, and overlap tests."""
from __future__ import annotations

from dataclasses import dataclass

Vec = tuple[float, ...]


def aabb_overlap(pos_a: Vec, half_a: Vec, pos_b: Vec, half_b: Vec) -> bool:
    """True if two center/half-extent boxes overlap. Touching edges do not overlap."""
    for i in range(len(pos_a)):
        if (half_a[i] + half_b[i]) - abs(pos_a[i] - pos_b[i]) <= 0.0:
            return False
    return True


def within_reach(pos_a: Vec, pos_b: Vec, radius: float) -> bool:
    """Independent-axis proximity: every axis closer than *radius*."""
    return all(abs(a - b) < radius for a, b in zip(pos_a, pos_b, strict=True))


@dataclass(frozen=True)
class Rect:
    """Footprint with a top-left origin, as laid out on the field."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Rect size must be positive, got {self.width}x{self.height}")

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def half_extents(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)

    @classmethod
    def around(cls, center: tuple[float, float], half: float) -> Rect:
        """Square box of side ``2 * half`` centered on *center*."""
        return cls(center[0] - half, center[1] - half, 2 * half, 2 * half)

    def overlaps(self, other: Rect) -> bool:
        return aabb_overlap(self.center, self.half_extents, other.center, other.half_extents)

    def gap_to(self, point: tuple[float, float]) -> float:
        """Largest per-axis distance from *point* to this rect (0 inside)."""
        dx = max(self.x - point[0], 0.0, point[0] - (self.x + self.width))
        dy = max(self.y - point[1], 0.0, point[1] - (self.y + self.height))
        return max(dx, dy)


@dataclass(frozen=True)
class Field:
    """Playable area spanning ``[0, width] x [0, height]``."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field size must be positive, got {self.width}x{self.height}")

    def clamp(self, position: tuple[float, float], half: float) -> tuple[float, float]:
        """Clamp each axis of *position* to ``[half, dimension - half]``."""
        x = min(max(position[0], half), self.width - half)
        y = min(max(position[1], half), self.height - half)
        return (x, y)
