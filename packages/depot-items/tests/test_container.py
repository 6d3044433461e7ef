"""Tests for Container and ContainerHelper."""
from __future__ import annotations

import pytest
from depot_items import Container, ContainerHelper, ItemStack


class TestContainerConstruction:
    def test_empty_unbounded(self) -> None:
        box = Container("box")
        assert box.stacks == {}
        assert box.capacity == -1
        assert box.max_slots == -1
        assert box.used == 0

    def test_with_items(self) -> None:
        box = Container.with_items("1", {"iron": 150, "wood": 200}, capacity=1000)
        assert box.used == 350
        assert list(box.stacks) == ["iron", "wood"]
        assert box.stacks["iron"] == ItemStack("iron", 150)

    def test_used_tracks_stack_changes(self) -> None:
        box = Container.with_items("1", {"iron": 10})
        box.stacks["iron"].quantity = 4
        assert box.used == 4

    def test_mismatched_key_raises(self) -> None:
        with pytest.raises(ValueError, match="does not match"):
            Container("box", stacks={"iron": ItemStack("wood", 1)})

    def test_zero_quantity_stack_raises(self) -> None:
        with pytest.raises(ValueError, match="positive quantity"):
            Container.with_items("box", {"iron": 0})

    def test_over_capacity_raises(self) -> None:
        with pytest.raises(ValueError, match="exceed capacity"):
            Container.with_items("box", {"iron": 11}, capacity=10)

    def test_over_slots_raises(self) -> None:
        with pytest.raises(ValueError, match="exceed 1 slots"):
            Container.with_items("bag", {"iron": 1, "wood": 1}, max_slots=1)

    def test_negative_bounds_raise(self) -> None:
        with pytest.raises(ValueError, match="capacity"):
            Container("box", capacity=-2)
        with pytest.raises(ValueError, match="max_slots"):
            Container("box", max_slots=-2)


class TestQueries:
    def test_count(self) -> None:
        box = Container.with_items("box", {"iron": 15})
        assert ContainerHelper.count(box, "iron") == 15
        assert ContainerHelper.count(box, "wood") == 0

    def test_has(self) -> None:
        box = Container.with_items("box", {"iron": 15})
        assert ContainerHelper.has(box, "iron", 15) is True
        assert ContainerHelper.has(box, "iron", 16) is False

    def test_has_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="amount must be >= 0"):
            ContainerHelper.has(Container("box"), "iron", -1)

    def test_shortfall_reports_first_missing(self) -> None:
        box = Container.with_items("box", {"iron": 2, "wood": 9})
        assert ContainerHelper.shortfall(box, {"wood": 1, "iron": 5}) == ("iron", 5, 2)
        assert ContainerHelper.shortfall(box, {"wood": 9}) is None
        assert ContainerHelper.has_all(box, {"iron": 2, "wood": 9}) is True

    def test_free_slots_and_capacity(self) -> None:
        bag = Container.with_items("bag", {"iron": 3}, max_slots=4)
        assert ContainerHelper.free_slots(bag) == 3
        assert ContainerHelper.free_capacity(bag) == -1
        box = Container.with_items("box", {"iron": 3}, capacity=10)
        assert ContainerHelper.free_capacity(box) == 7
        assert ContainerHelper.free_slots(box) == -1

    def test_names_and_quantities(self) -> None:
        box = Container.with_items("box", {"iron": 3, "wood": 4})
        assert ContainerHelper.names(box) == ["iron", "wood"]
        assert ContainerHelper.quantities(box) == {"iron": 3, "wood": 4}


class TestCanAccept:
    def test_capacity_bounded_fits_exactly(self) -> None:
        box = Container.with_items("box", {"iron": 90}, capacity=100)
        assert ContainerHelper.can_accept(box, "wood", 10) is True
        assert ContainerHelper.can_accept(box, "wood", 11) is False

    def test_slot_bounded_existing_stack_any_quantity(self) -> None:
        bag = Container.with_items("bag", {"iron": 1, "wood": 1}, max_slots=2)
        assert ContainerHelper.can_accept(bag, "iron", 10_000) is True

    def test_slot_bounded_needs_free_slot_for_new_item(self) -> None:
        bag = Container.with_items("bag", {"iron": 1, "wood": 1}, max_slots=2)
        assert ContainerHelper.can_accept(bag, "gear", 1) is False
        bag = Container.with_items("bag", {"iron": 1}, max_slots=2)
        assert ContainerHelper.can_accept(bag, "gear", 1) is True

    def test_unbounded_accepts_anything(self) -> None:
        assert ContainerHelper.can_accept(Container("void"), "iron", 10**9) is True

    def test_both_bounds_must_hold(self) -> None:
        box = Container.with_items("box", {"iron": 5}, capacity=10, max_slots=1)
        assert ContainerHelper.can_accept(box, "iron", 5) is True
        assert ContainerHelper.can_accept(box, "iron", 6) is False
        assert ContainerHelper.can_accept(box, "wood", 1) is False
