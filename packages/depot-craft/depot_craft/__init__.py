"""depot-craft - Timed recipes and the crafting queue."""
from depot_craft.engine import CraftingEngine
from depot_craft.queue import CraftingJob, CraftingQueue
from depot_craft.recipe import Ingredient, Recipe, RecipeBook, can_craft
from depot_craft.systems import make_crafting_system

__all__ = [
    "CraftingEngine",
    "CraftingJob",
    "CraftingQueue",
    "Ingredient",
    "Recipe",
    "RecipeBook",
    "can_craft",
    "make_crafting_system",
]
