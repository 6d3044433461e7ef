"""depot-field - Field bounds, movement and collision, and item pickup."""
from __future__ import annotations

from depot_field.collision import Field, Rect, aabb_overlap, within_reach
from depot_field.movement import Direction, Move, intent_vector, parse_directions, resolve_move
from depot_field.pickup import ItemDrop, collect, compact_drops, drops_in_reach

__all__ = [
    "Direction",
    "Field",
    "ItemDrop",
    "Move",
    "Rect",
    "aabb_overlap",
    "collect",
    "compact_drops",
    "drops_in_reach",
    "intent_vector",
    "parse_directions",
    "resolve_move",
    "within_reach",
]
