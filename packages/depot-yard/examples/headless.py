"""Headless yard session -- walk, pick up, store, and craft without a window.

Demonstrates:
- Building the default yard with build_yard()
- Subscribing to notices
- Driving movement with apply_movement_intent() and run()
- Moving items with transfer_item() and crafting with start_crafting()
- Reading a deep-copied snapshot

Run: python -m examples.headless
"""

from depot_notice import Notice
from depot_yard import YardConfig, build_yard


def print_notice(notice: Notice) -> None:
    print(f"  [{notice.severity.value:>7}] {notice.message}")


def main() -> None:
    print("=== Headless Yard ===\n")

    # 10 ticks per second keeps the crafting timeline easy to follow.
    yard = build_yard(YardConfig(tps=10))
    yard.subscribe(print_notice)

    # Walk left and up until we reach the iron drop at (300, 220).
    yard.apply_movement_intent(["left"])
    yard.run(20)
    yard.apply_movement_intent(["up"])
    yard.run(8)
    yard.apply_movement_intent([])
    print(f"\n  player at {yard.state.player.position}\n")

    # Store what we picked up, then craft a gear from the main warehouse.
    yard.transfer_item("player", "1", "iron", 5)
    yard.start_crafting("gear-recipe")
    yard.start_crafting("gear-recipe")  # rejected: already queued

    yard.run(310)

    snap = yard.get_snapshot()
    print(f"\n  t={snap.now:.1f}s  queue={len(snap.crafting_queue)}")
    for warehouse in snap.warehouses:
        stock = ", ".join(f"{s.item_id}={s.quantity}" for s in warehouse.container.stacks.values())
        print(f"  {warehouse.name:<16} {warehouse.used:>4}/{warehouse.capacity:<5} {stock}")


if __name__ == "__main__":
    main()
