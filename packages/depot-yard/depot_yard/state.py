"""Game state: player, warehouses, drops, and the engines that act on them."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from depot_craft import CraftingEngine, RecipeBook
from depot_field import Direction, Field, ItemDrop, Rect
from depot_items import Container, ItemCatalog
from depot_notice import NoticeBus

from depot_yard.config import YardConfig

PLAYER_CONTAINER = "player"


class WarehouseKind(str, Enum):
    STORAGE = "storage"
    PRODUCTION = "production"
    CRAFTING = "crafting"
    LOGISTICS = "logistics"


@dataclass
class Warehouse:
    """A capacity-bounded container standing on the field as a solid footprint."""

    warehouse_id: str
    name: str
    kind: WarehouseKind
    footprint: Rect
    container: Container

    def __post_init__(self) -> None:
        self.kind = WarehouseKind(self.kind)
        if self.container.container_id != self.warehouse_id:
            raise ValueError(
                f"warehouse {self.warehouse_id!r} holds container {self.container.container_id!r}"
            )
        if self.container.capacity < 0:
            raise ValueError(f"warehouse {self.warehouse_id!r} must be capacity-bounded")

    @property
    def capacity(self) -> int:
        return self.container.capacity

    @property
    def used(self) -> int:
        return self.container.used


@dataclass
class Player:
    position: tuple[float, float]
    inventory: Container
    health: int = 100
    experience: int = 0
    experience_per_level: int = 100

    @property
    def level(self) -> int:
        return 1 + self.experience // self.experience_per_level

    def gain_experience(self, amount: int) -> bool:
        """Add experience. Returns True if the level went up."""
        before = self.level
        self.experience += amount
        return self.level > before


@dataclass
class GameState:
    """Everything one yard session owns.

    The crafting engine is built from ``recipes`` and resolves containers
    through :meth:`container`, so warehouses and the player inventory are
    looked up live.
    """

    config: YardConfig
    bounds: Field
    player: Player
    warehouses: dict[str, Warehouse]
    drops: list[ItemDrop]
    catalog: ItemCatalog
    recipes: RecipeBook
    notices: NoticeBus
    held: frozenset[Direction] = frozenset()
    refused_drops: set[str] = field(default_factory=set)
    crafting: CraftingEngine = field(init=False)

    def __post_init__(self) -> None:
        self.warehouses = dict(sorted(self.warehouses.items()))
        self.crafting = CraftingEngine(
            self.recipes,
            self.catalog,
            self.container,
            self.config.roles,
            strict_output_capacity=self.config.strict_output_capacity,
        )

    def container(self, container_id: str) -> Container | None:
        """Resolve a container id to the player inventory or a warehouse container."""
        if container_id == self.player.inventory.container_id:
            return self.player.inventory
        warehouse = self.warehouses.get(container_id)
        return warehouse.container if warehouse is not None else None

    def container_for_role(self, role: str) -> Container | None:
        return self.crafting.resolve_role(role)

    def container_names(self) -> dict[str, str]:
        names = {self.player.inventory.container_id: "Inventory"}
        names.update((wid, w.name) for wid, w in self.warehouses.items())
        return names

    def obstacles(self) -> list[Rect]:
        return [w.footprint for w in self.warehouses.values()]

    def warehouses_of_kind(self, kind: WarehouseKind | str) -> list[Warehouse]:
        wanted = WarehouseKind(kind)
        return [w for w in self.warehouses.values() if w.kind is wanted]
