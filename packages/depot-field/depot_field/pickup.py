"""Item drops and the pickup resolver."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from depot import Failure, Result
from depot_items import Container, ContainerHelper, ItemCatalog, deposit

from depot_field.collision import within_reach

logger = logging.getLogger(__name__)


@dataclass
class ItemDrop:
    """A world-placed, collectible quantity of an item.

    ``collected`` is terminal: collected drops stay in their list and are
    skipped by every later pickup check.
    """

    drop_id: str
    item_id: str
    x: float
    y: float
    quantity: int
    collected: bool = False

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise ValueError(f"drop quantity must be > 0, got {self.quantity}")

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


def drops_in_reach(
    position: tuple[float, float], drops: Iterable[ItemDrop], radius: float
) -> list[ItemDrop]:
    """Uncollected drops within *radius* of *position* on both axes."""
    return [
        drop for drop in drops
        if not drop.collected and within_reach(position, drop.position, radius)
    ]


def collect(
    drop: ItemDrop,
    inventory: Container,
    catalog: ItemCatalog,
    keep_when_full: bool = False,
) -> Result:
    """Collect *drop* into *inventory*.

    If the inventory cannot take the items, the drop is still collected and
    its items are lost (``InsufficientCapacity`` with ``lost`` set), unless
    *keep_when_full* leaves it on the ground untouched.
    """
    if drop.collected:
        return Result.fail(Failure.ALREADY_COLLECTED, drop_id=drop.drop_id)

    if not ContainerHelper.can_accept(inventory, drop.item_id, drop.quantity):
        if keep_when_full:
            return Result.fail(
                Failure.INSUFFICIENT_CAPACITY,
                drop_id=drop.drop_id,
                item_id=drop.item_id,
                quantity=drop.quantity,
                lost=0,
            )
        drop.collected = True
        logger.info("Inventory full: %d x %s from %s lost", drop.quantity, drop.item_id, drop.drop_id)
        return Result.fail(
            Failure.INSUFFICIENT_CAPACITY,
            drop_id=drop.drop_id,
            item_id=drop.item_id,
            quantity=drop.quantity,
            lost=drop.quantity,
        )

    drop.collected = True
    deposit(inventory, catalog, drop.item_id, drop.quantity)
    logger.debug("Collected %s: %d x %s", drop.drop_id, drop.quantity, drop.item_id)
    return Result.success(drop_id=drop.drop_id, item_id=drop.item_id, quantity=drop.quantity)


def compact_drops(drops: list[ItemDrop]) -> int:
    """Remove collected drops in place. Call between ticks only. Returns the count removed."""
    kept = [drop for drop in drops if not drop.collected]
    removed = len(drops) - len(kept)
    drops[:] = kept
    return removed
