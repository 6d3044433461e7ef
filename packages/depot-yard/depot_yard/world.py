"""Build a complete yard from config and world content."""
from __future__ import annotations

import logging
from typing import Iterable

from depot_craft import Recipe, RecipeBook
from depot_field import Field, ItemDrop, Rect
from depot_items import Container, ItemCatalog, ItemDef
from depot_notice import NoticeBus

from depot_yard import defaults
from depot_yard.config import YardConfig
from depot_yard.state import PLAYER_CONTAINER, GameState, Player, Warehouse
from depot_yard.yard import Yard

logger = logging.getLogger(__name__)

WarehouseRow = tuple[str, str, str, tuple[float, float, float, float], int, dict[str, int]]
DropRow = tuple[str, str, float, float, int]


def build_warehouse(row: WarehouseRow, catalog: ItemCatalog) -> Warehouse:
    warehouse_id, name, kind, (x, y, width, height), capacity, items = row
    container = Container(
        warehouse_id,
        capacity=capacity,
        stacks={item_id: catalog.new_stack(item_id, qty) for item_id, qty in items.items()},
    )
    return Warehouse(warehouse_id, name, kind, Rect(x, y, width, height), container)


def build_state(
    config: YardConfig | None = None,
    items: Iterable[ItemDef] = defaults.ITEMS,
    warehouses: Iterable[WarehouseRow] = defaults.WAREHOUSES,
    recipes: Iterable[Recipe] = defaults.RECIPES,
    drops: Iterable[DropRow] = defaults.DROPS,
) -> GameState:
    """Wire up a GameState. Defaults give the standard three-warehouse yard."""
    config = config if config is not None else YardConfig()
    catalog = ItemCatalog(items)
    built = [build_warehouse(row, catalog) for row in warehouses]
    by_id = {w.warehouse_id: w for w in built}
    if len(by_id) != len(built):
        raise ValueError("duplicate warehouse id")
    if PLAYER_CONTAINER in by_id:
        raise ValueError(f"warehouse id {PLAYER_CONTAINER!r} is reserved for the player")

    bounds = Field(config.field_width, config.field_height)
    player = Player(
        position=bounds.clamp(config.start, config.half_size),
        inventory=Container(PLAYER_CONTAINER, max_slots=config.inventory_slots),
        experience_per_level=config.experience_per_level,
    )
    start_box = Rect.around(player.position, config.half_size)
    for warehouse in built:
        if start_box.overlaps(warehouse.footprint):
            raise ValueError(f"player starts inside warehouse {warehouse.warehouse_id!r}")

    state = GameState(
        config=config,
        bounds=bounds,
        player=player,
        warehouses=by_id,
        drops=[ItemDrop(*row) for row in drops],
        catalog=catalog,
        recipes=RecipeBook(recipes),
        notices=NoticeBus(),
    )
    for role, container_id in config.roles.items():
        if state.container(container_id) is None:
            logger.warning("Role %r points at unknown container %r", role, container_id)
    logger.info(
        "Built yard: %d warehouses, %d recipes, %d drops",
        len(state.warehouses), len(state.recipes), len(state.drops),
    )
    return state


def build_yard(config: YardConfig | None = None, **content) -> Yard:
    """Build the standard yard, or one with replaced ``items``/``warehouses``/``recipes``/``drops``."""
    return Yard(build_state(config, **content))
