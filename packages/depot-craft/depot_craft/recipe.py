"""Recipe definitions and the recipe book."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from depot_items import Container, ContainerHelper


@dataclass(frozen=True)
class Ingredient:
    """A quantity of one item id, used for both recipe inputs and output."""

    item_id: str
    quantity: int

    def __post_init__(self) -> None:
        if not self.item_id:
            raise ValueError("Ingredient item_id must be non-empty")
        if self.quantity <= 0:
            raise ValueError(f"quantity must be > 0, got {self.quantity}")


@dataclass(frozen=True)
class Recipe:
    """Immutable crafting recipe definition.

    Attributes:
        recipe_id: Recipe identifier.
        name: Display name.
        ingredients: Items consumed when the job starts.
        output: Item produced when the job completes.
        crafting_time: Seconds between start and completion.
        source_role: Container role the ingredients are drawn from.
        output_role: Container role the output is credited to.
    """

    recipe_id: str
    name: str
    ingredients: tuple[Ingredient, ...]
    output: Ingredient
    crafting_time: float = 0.0
    source_role: str = "storage"
    output_role: str = "production"

    def __post_init__(self) -> None:
        if not self.recipe_id:
            raise ValueError("Recipe recipe_id must be non-empty")
        if self.crafting_time < 0:
            raise ValueError(f"crafting_time must be >= 0, got {self.crafting_time}")
        if not self.source_role or not self.output_role:
            raise ValueError("Recipe roles must be non-empty")
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        seen: set[str] = set()
        for ingredient in self.ingredients:
            if ingredient.item_id in seen:
                raise ValueError(f"duplicate ingredient {ingredient.item_id!r} in {self.recipe_id!r}")
            seen.add(ingredient.item_id)

    @property
    def requirements(self) -> dict[str, int]:
        """Ingredients as an ``item_id -> quantity`` mapping."""
        return {i.item_id: i.quantity for i in self.ingredients}


def can_craft(container: Container, recipe: Recipe) -> bool:
    """Check if the container holds every ingredient."""
    return ContainerHelper.has_all(container, recipe.requirements)


class RecipeBook:
    """Ordered, static collection of recipes keyed by id."""

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._recipes: dict[str, Recipe] = {}
        for recipe in recipes:
            self.define(recipe)

    def define(self, recipe: Recipe) -> None:
        """Register a recipe. Overwrites if the id exists."""
        self._recipes[recipe.recipe_id] = recipe

    def get(self, recipe_id: str) -> Recipe | None:
        return self._recipes.get(recipe_id)

    def has(self, recipe_id: str) -> bool:
        return recipe_id in self._recipes

    def recipes(self) -> list[Recipe]:
        return list(self._recipes.values())

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes.values()))

    def __len__(self) -> int:
        return len(self._recipes)
