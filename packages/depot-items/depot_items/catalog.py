"""ItemCatalog class."""
from __future__ import annotations

from typing import Iterable

from depot_items.container import ItemStack
from depot_items.types import ItemDef


class ItemCatalog:
    """Static lookup of item definitions, keyed by item id."""

    def __init__(self, definitions: Iterable[ItemDef] = ()) -> None:
        self._definitions: dict[str, ItemDef] = {}
        for item_def in definitions:
            self.define(item_def)

    def define(self, item_def: ItemDef) -> None:
        """Register an item. Overwrites if the id exists."""
        self._definitions[item_def.item_id] = item_def

    def get(self, item_id: str) -> ItemDef:
        """Look up definition. Raises KeyError if not defined."""
        if item_id not in self._definitions:
            raise KeyError(item_id)
        return self._definitions[item_id]

    def lookup(self, item_id: str) -> ItemDef:
        """Look up definition, falling back to a bare definition for unknown ids."""
        found = self._definitions.get(item_id)
        if found is None:
            return ItemDef(item_id=item_id)
        return found

    def has(self, item_id: str) -> bool:
        return item_id in self._definitions

    def defined_items(self) -> list[str]:
        return list(self._definitions.keys())

    def display_name(self, item_id: str) -> str:
        """Human-readable name, falling back to the id itself."""
        return self.lookup(item_id).name

    def new_stack(self, item_id: str, quantity: int) -> ItemStack:
        """Build a stack for *item_id* carrying the catalog's max_stack."""
        return ItemStack(item_id, quantity, self.lookup(item_id).max_stack)

    def __len__(self) -> int:
        return len(self._definitions)
