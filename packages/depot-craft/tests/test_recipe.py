"""Tests for Recipe, Ingredient, RecipeBook and can_craft."""
from __future__ import annotations

import pytest
from depot_craft import Ingredient, Recipe, RecipeBook, can_craft
from depot_items import Container


def _gear() -> Recipe:
    return Recipe(
        recipe_id="gear-recipe",
        name="Gear",
        ingredients=(Ingredient("iron", 3), Ingredient("wood", 1)),
        output=Ingredient("gear", 1),
        crafting_time=30,
    )


class TestRecipeConstruction:
    def test_full(self) -> None:
        recipe = _gear()
        assert recipe.requirements == {"iron": 3, "wood": 1}
        assert recipe.output == Ingredient("gear", 1)
        assert recipe.crafting_time == 30
        assert recipe.source_role == "storage"
        assert recipe.output_role == "production"

    def test_list_ingredients_become_tuple(self) -> None:
        recipe = Recipe(
            "cable-recipe", "Cable", [Ingredient("iron", 2)], Ingredient("cable", 2)  # type: ignore[arg-type]
        )
        assert isinstance(recipe.ingredients, tuple)

    def test_empty_id_raises(self) -> None:
        with pytest.raises(ValueError, match="recipe_id must be non-empty"):
            Recipe("", "x", (), Ingredient("gear", 1))

    def test_negative_time_raises(self) -> None:
        with pytest.raises(ValueError, match="crafting_time must be >= 0"):
            Recipe("r", "x", (), Ingredient("gear", 1), crafting_time=-1)

    def test_duplicate_ingredient_raises(self) -> None:
        with pytest.raises(ValueError, match="duplicate ingredient"):
            Recipe("r", "x", (Ingredient("iron", 1), Ingredient("iron", 2)), Ingredient("gear", 1))

    def test_ingredient_needs_positive_quantity(self) -> None:
        with pytest.raises(ValueError, match="quantity must be > 0"):
            Ingredient("iron", 0)

    def test_frozen(self) -> None:
        recipe = _gear()
        with pytest.raises(Exception):
            recipe.crafting_time = 1  # type: ignore[misc]


class TestCanCraft:
    def test_sufficient(self) -> None:
        box = Container.with_items("1", {"iron": 3, "wood": 1})
        assert can_craft(box, _gear()) is True

    def test_insufficient(self) -> None:
        box = Container.with_items("1", {"iron": 2, "wood": 5})
        assert can_craft(box, _gear()) is False


class TestRecipeBook:
    def test_lookup(self) -> None:
        book = RecipeBook([_gear()])
        assert book.has("gear-recipe")
        assert book.get("gear-recipe") == _gear()
        assert book.get("nope") is None
        assert len(book) == 1

    def test_order_preserved(self) -> None:
        cable = Recipe("cable-recipe", "Cable", (Ingredient("iron", 2),), Ingredient("cable", 2), 15)
        book = RecipeBook([_gear(), cable])
        assert [r.recipe_id for r in book] == ["gear-recipe", "cable-recipe"]
        assert book.recipes()[1] is cable
