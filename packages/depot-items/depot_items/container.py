"""ItemStack and Container data, and read-only helper functions."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ItemStack:
    """A quantity of one item id held together in a Container.

    ``max_stack`` is carried for display only; merges do not respect it.
    """

    item_id: str
    quantity: int
    max_stack: int = -1


@dataclass
class Container:
    """Mutable holder of item stacks, keyed by item id.

    Attributes:
        container_id: Identifier used by transfer requests.
        capacity: Maximum total quantity across all stacks (-1 for unlimited).
        max_slots: Maximum number of distinct stacks (-1 for unlimited).
        stacks: Mapping of item_id -> ItemStack, in insertion order.

    Warehouses are capacity-bounded; the player inventory is slot-bounded.
    """

    container_id: str
    capacity: int = -1
    max_slots: int = -1
    stacks: dict[str, ItemStack] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.capacity < -1:
            raise ValueError(f"capacity must be >= -1, got {self.capacity}")
        if self.max_slots < -1:
            raise ValueError(f"max_slots must be >= -1, got {self.max_slots}")
        for key, stack in self.stacks.items():
            if key != stack.item_id:
                raise ValueError(f"stack key {key!r} does not match item_id {stack.item_id!r}")
            if stack.quantity <= 0:
                raise ValueError(f"stack {key!r} must hold a positive quantity")
        if self.capacity != -1 and self.used > self.capacity:
            raise ValueError(f"{self.container_id}: {self.used} items exceed capacity {self.capacity}")
        if self.max_slots != -1 and len(self.stacks) > self.max_slots:
            raise ValueError(f"{self.container_id}: {len(self.stacks)} stacks exceed {self.max_slots} slots")

    @property
    def used(self) -> int:
        """Capacity units in use: the sum of all stack quantities."""
        return sum(stack.quantity for stack in self.stacks.values())

    @classmethod
    def with_items(
        cls,
        container_id: str,
        items: dict[str, int],
        capacity: int = -1,
        max_slots: int = -1,
    ) -> Container:
        """Build a container pre-filled from an ``item_id -> quantity`` mapping."""
        stacks = {
            item_id: ItemStack(item_id, quantity)
            for item_id, quantity in items.items()
        }
        return cls(container_id, capacity=capacity, max_slots=max_slots, stacks=stacks)


class ContainerHelper:
    """Pure read-only queries over containers."""

    @staticmethod
    def count(container: Container, item_id: str) -> int:
        """Get current quantity of an item."""
        stack = container.stacks.get(item_id)
        return stack.quantity if stack is not None else 0

    @staticmethod
    def has(container: Container, item_id: str, amount: int = 1) -> bool:
        """Check if at least *amount* of the item exists."""
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        return ContainerHelper.count(container, item_id) >= amount

    @staticmethod
    def has_all(container: Container, requirements: dict[str, int]) -> bool:
        """Check if all requirements are met."""
        return ContainerHelper.shortfall(container, requirements) is None

    @staticmethod
    def shortfall(
        container: Container, requirements: dict[str, int]
    ) -> tuple[str, int, int] | None:
        """First unmet requirement as ``(item_id, required, available)``, or None."""
        for item_id, needed in requirements.items():
            available = ContainerHelper.count(container, item_id)
            if available < needed:
                return item_id, needed, available
        return None

    @staticmethod
    def free_slots(container: Container) -> int:
        """Number of unused slots (-1 if slot-unbounded)."""
        if container.max_slots == -1:
            return -1
        return container.max_slots - len(container.stacks)

    @staticmethod
    def free_capacity(container: Container) -> int:
        """Remaining capacity units (-1 if capacity-unbounded)."""
        if container.capacity == -1:
            return -1
        return container.capacity - container.used

    @staticmethod
    def can_accept(container: Container, item_id: str, quantity: int) -> bool:
        """True if *quantity* of *item_id* fits under every bound of the container."""
        if container.max_slots != -1 and item_id not in container.stacks:
            if len(container.stacks) >= container.max_slots:
                return False
        if container.capacity != -1:
            if container.used + quantity > container.capacity:
                return False
        return True

    @staticmethod
    def names(container: Container) -> list[str]:
        """Get all item ids currently held."""
        return list(container.stacks.keys())

    @staticmethod
    def quantities(container: Container) -> dict[str, int]:
        """Plain ``item_id -> quantity`` view."""
        return {item_id: stack.quantity for item_id, stack in container.stacks.items()}
