"""Core data types for item definitions."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Rarity(str, Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


@dataclass(frozen=True)
class ItemDef:
    """Immutable item definition.

    Attributes:
        item_id: Unique identifier for this item.
        name: Display name.
        icon: Display glyph (an emoji in the default catalog).
        max_stack: Display-only stack size hint (-1 for unlimited). Not enforced.
        rarity: Display tier.
    """

    item_id: str
    name: str = ""
    icon: str = ""
    max_stack: int = -1
    rarity: Rarity = Rarity.COMMON

    def __post_init__(self) -> None:
        if not self.item_id:
            raise ValueError("ItemDef item_id must be non-empty")
        if self.max_stack < -1 or self.max_stack == 0:
            raise ValueError(f"max_stack must be -1 or positive, got {self.max_stack}")
        if not self.name:
            object.__setattr__(self, "name", self.item_id)
        if not isinstance(self.rarity, Rarity):
            object.__setattr__(self, "rarity", Rarity(self.rarity))
