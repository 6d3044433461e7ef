"""Transfer engine: the only code paths that change container contents.

``debit`` and ``credit`` are the raw primitives; they enforce no capacity
policy and raise on programming errors. ``transfer``, ``deposit`` and
``withdraw_all`` validate first and return a :class:`depot.Result`, mutating
nothing when they fail.
"""
from __future__ import annotations

import logging

from depot import Failure, Result

from depot_items.catalog import ItemCatalog
from depot_items.container import Container, ContainerHelper, ItemStack

logger = logging.getLogger(__name__)


def debit(container: Container, item_id: str, quantity: int) -> int:
    """Remove *quantity* of *item_id*, dropping the stack at zero. Returns the amount removed."""
    if quantity <= 0:
        raise ValueError(f"quantity must be > 0, got {quantity}")
    stack = container.stacks.get(item_id)
    if stack is None or stack.quantity < quantity:
        held = stack.quantity if stack is not None else 0
        raise ValueError(
            f"cannot debit {quantity} {item_id} from {container.container_id} holding {held}"
        )
    stack.quantity -= quantity
    if stack.quantity == 0:
        del container.stacks[item_id]
    return quantity


def credit(container: Container, item_id: str, quantity: int, max_stack: int = -1) -> int:
    """Add *quantity* of *item_id*, merging into an existing stack. Returns the amount added."""
    if quantity <= 0:
        raise ValueError(f"quantity must be > 0, got {quantity}")
    stack = container.stacks.get(item_id)
    if stack is not None:
        stack.quantity += quantity
    else:
        container.stacks[item_id] = ItemStack(item_id, quantity, max_stack)
    return quantity


def transfer(
    source: Container, destination: Container, item_id: str, quantity: int
) -> Result:
    """Move *quantity* of one item between two containers, all or nothing."""
    if quantity <= 0:
        return Result.fail(Failure.INVALID_QUANTITY, item_id=item_id, quantity=quantity)
    if source is destination:
        return Result.fail(
            Failure.SAME_CONTAINER, container_id=source.container_id, item_id=item_id
        )

    stack = source.stacks.get(item_id)
    available = stack.quantity if stack is not None else 0
    if stack is None or available < quantity:
        return Result.fail(
            Failure.INSUFFICIENT_SOURCE,
            container_id=source.container_id,
            item_id=item_id,
            required=quantity,
            available=available,
        )
    if not ContainerHelper.can_accept(destination, item_id, quantity):
        return Result.fail(
            Failure.INSUFFICIENT_CAPACITY,
            container_id=destination.container_id,
            item_id=item_id,
            quantity=quantity,
        )

    max_stack = stack.max_stack
    debit(source, item_id, quantity)
    credit(destination, item_id, quantity, max_stack)
    logger.debug(
        "Moved %d x %s from %s to %s",
        quantity, item_id, source.container_id, destination.container_id,
    )
    return Result.success(
        source=source.container_id,
        destination=destination.container_id,
        item_id=item_id,
        quantity=quantity,
    )


def deposit(
    container: Container,
    catalog: ItemCatalog,
    item_id: str,
    quantity: int,
    enforce_capacity: bool = True,
) -> Result:
    """Credit items arriving from outside any container (pickups, crafting output)."""
    if quantity <= 0:
        return Result.fail(Failure.INVALID_QUANTITY, item_id=item_id, quantity=quantity)
    if enforce_capacity and not ContainerHelper.can_accept(container, item_id, quantity):
        return Result.fail(
            Failure.INSUFFICIENT_CAPACITY,
            container_id=container.container_id,
            item_id=item_id,
            quantity=quantity,
        )
    template = catalog.lookup(item_id)
    credit(container, item_id, quantity, template.max_stack)
    return Result.success(
        destination=container.container_id, item_id=item_id, quantity=quantity
    )


def withdraw_all(container: Container, requirements: dict[str, int]) -> Result:
    """Debit every requirement in one step, or none of them."""
    for item_id, needed in requirements.items():
        if needed <= 0:
            return Result.fail(Failure.INVALID_QUANTITY, item_id=item_id, quantity=needed)
    missing = ContainerHelper.shortfall(container, requirements)
    if missing is not None:
        item_id, needed, available = missing
        return Result.fail(
            Failure.INSUFFICIENT_SOURCE,
            container_id=container.container_id,
            item_id=item_id,
            required=needed,
            available=available,
        )
    for item_id, needed in requirements.items():
        debit(container, item_id, needed)
    return Result.success(container_id=container.container_id, debited=dict(requirements))
