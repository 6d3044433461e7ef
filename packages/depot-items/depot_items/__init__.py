"""depot-items - Item catalog, containers, and the transfer engine."""
from depot_items.catalog import ItemCatalog
from depot_items.container import Container, ContainerHelper, ItemStack
from depot_items.transfer import credit, debit, deposit, transfer, withdraw_all
from depot_items.types import ItemDef, Rarity

__all__ = [
    "Container",
    "ContainerHelper",
    "ItemCatalog",
    "ItemDef",
    "ItemStack",
    "Rarity",
    "credit",
    "debit",
    "deposit",
    "transfer",
    "withdraw_all",
]
