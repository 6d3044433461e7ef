"""Player-facing text for operation outcomes."""
from __future__ import annotations

from typing import Any, Mapping

from depot import Failure, Result
from depot_craft import RecipeBook
from depot_items import ItemCatalog

FAILURE_MESSAGES: dict[Failure, str] = {
    Failure.INSUFFICIENT_SOURCE: "Not enough {item}: {available} of {required}",
    Failure.INSUFFICIENT_CAPACITY: "Not enough space in {container}",
    Failure.UNKNOWN_RECIPE: "Unknown recipe {recipe_id}",
    Failure.MISSING_INGREDIENT_SOURCE: "No {role} warehouse for {recipe}",
    Failure.MISSING_OUTPUT_DESTINATION: "No {role} warehouse for {recipe}",
    Failure.INSUFFICIENT_INGREDIENT: "Not enough resources: {item} ({available} of {required})",
    Failure.RECIPE_ALREADY_QUEUED: "Already crafting {recipe}",
    Failure.UNKNOWN_CONTAINER: "Warehouse not found: {container_id}",
    Failure.INVALID_QUANTITY: "Invalid quantity: {quantity}",
    Failure.SAME_CONTAINER: "Cannot move items into the same container",
    Failure.ALREADY_COLLECTED: "Already collected",
}


class _Fields(dict):
    def __missing__(self, key: str) -> str:
        return "?"


def fields_for(
    context: dict[str, Any],
    catalog: ItemCatalog,
    recipes: RecipeBook,
    container_names: Mapping[str, str] | None = None,
) -> _Fields:
    """Context plus display names for any item, recipe, or container it mentions."""
    fields = _Fields(context)
    if "container_id" in context:
        names = container_names or {}
        fields["container"] = names.get(context["container_id"], context["container_id"])
    if "item_id" in context:
        fields["item"] = catalog.display_name(context["item_id"])
    if "recipe_id" in context:
        recipe = recipes.get(context["recipe_id"])
        fields["recipe"] = recipe.name if recipe is not None else context["recipe_id"]
    return fields


def describe_failure(
    result: Result,
    catalog: ItemCatalog,
    recipes: RecipeBook,
    container_names: Mapping[str, str] | None = None,
) -> str:
    template = FAILURE_MESSAGES[result.failure]
    return template.format_map(fields_for(result.context, catalog, recipes, container_names))
