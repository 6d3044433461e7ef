"""Default world content: items, warehouses, recipes, and item drops."""
from __future__ import annotations

from depot_craft import Ingredient, Recipe
from depot_items import ItemDef, Rarity

ITEMS: list[ItemDef] = [
    ItemDef("iron", "Iron", "🔩", max_stack=100, rarity=Rarity.COMMON),
    ItemDef("wood", "Wood", "🪵", max_stack=50, rarity=Rarity.COMMON),
    ItemDef("crystal", "Crystal", "💎", max_stack=10, rarity=Rarity.EPIC),
    ItemDef("gear", "Gear", "⚙️", max_stack=20, rarity=Rarity.RARE),
    ItemDef("cable", "Cable", "🔌", max_stack=30, rarity=Rarity.COMMON),
    ItemDef("container", "Container", "📦", max_stack=25, rarity=Rarity.COMMON),
]

# (id, name, kind, (x, y, width, height), capacity, {item_id: quantity})
WAREHOUSES: list[tuple[str, str, str, tuple[float, float, float, float], int, dict[str, int]]] = [
    ("1", "Main Warehouse", "storage", (80, 80, 140, 100), 1000,
     {"iron": 150, "wood": 200, "crystal": 10}),
    ("2", "Production Hall", "production", (580, 80, 140, 100), 500,
     {"gear": 25, "cable": 45}),
    ("3", "Logistics Center", "logistics", (330, 420, 140, 100), 800,
     {"container": 30}),
]

RECIPES: list[Recipe] = [
    Recipe(
        "gear-recipe", "Gear",
        ingredients=(Ingredient("iron", 3), Ingredient("wood", 1)),
        output=Ingredient("gear", 1),
        crafting_time=30.0,
    ),
    Recipe(
        "cable-recipe", "Cable",
        ingredients=(Ingredient("iron", 2),),
        output=Ingredient("cable", 2),
        crafting_time=15.0,
    ),
    Recipe(
        "container-recipe", "Container",
        ingredients=(Ingredient("iron", 5), Ingredient("wood", 3)),
        output=Ingredient("container", 1),
        crafting_time=45.0,
    ),
]

# (drop id, item_id, x, y, quantity)
DROPS: list[tuple[str, str, float, float, int]] = [
    ("drop-1", "iron", 300, 220, 5),
    ("drop-2", "wood", 520, 240, 3),
    ("drop-3", "crystal", 150, 320, 1),
    ("drop-4", "iron", 660, 300, 4),
    ("drop-5", "cable", 240, 480, 2),
    ("drop-6", "wood", 600, 500, 6),
]
