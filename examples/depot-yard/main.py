"""Depot Yard - collect, store, and craft with pygame.

Walk the yard, pick up item drops, move stacks between your inventory and the
warehouses, and queue timed recipes that turn stock into parts.

Controls:
  Arrows/WASD  Move
  Tab          Select next inventory stack
  R            Select next stack in the warehouse in reach
  E            Deposit the selected inventory stack into the warehouse in reach
  Q            Withdraw up to 10 of the selected warehouse stack
  1-3          Start crafting recipe 1-3
  Escape       Quit
"""
from __future__ import annotations

import argparse
import sys
from dataclasses import replace

import pygame

from depot_yard import Snapshot, Warehouse, Yard, YardConfig, build_yard, configure_logging, load_config
from ui.constants import COLOR_BG, FPS, LOG_H, SIDEBAR_W, WITHDRAW_AMOUNT
from ui.log_panel import NoticeLogPanel
from ui.renderer import draw_drops, draw_field, draw_player, draw_warehouses
from ui.sidebar import draw_sidebar

MOVE_KEYS: dict[int, str] = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
}
CRAFT_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Depot Yard - depot engine visual demo")
    p.add_argument("--config", type=str, default=None, metavar="FILE",
                   help="TOML file with a [yard] table")
    p.add_argument("--tps", type=int, default=None, help="Ticks per second (default: from config)")
    return p.parse_args()


def held_directions() -> set[str]:
    pressed = pygame.key.get_pressed()
    return {name for key, name in MOVE_KEYS.items() if pressed[key]}


def snapshot_warehouse(snapshot: Snapshot, live: Warehouse | None) -> Warehouse | None:
    if live is None:
        return None
    for warehouse in snapshot.warehouses:
        if warehouse.warehouse_id == live.warehouse_id:
            return warehouse
    return None


def nth_item(stacks: dict, index: int) -> str | None:
    ids = list(stacks)
    if not ids:
        return None
    return ids[index % len(ids)]


def tell(yard: Yard, message: str) -> None:
    yard.state.notices.info(message)
    yard.state.notices.flush()


def deposit_selected(yard: Yard, index: int) -> None:
    warehouse = yard.warehouse_in_reach()
    if warehouse is None:
        tell(yard, "No warehouse in reach")
        return
    inventory = yard.state.player.inventory
    item_id = nth_item(inventory.stacks, index)
    if item_id is None:
        tell(yard, "Inventory is empty")
        return
    quantity = inventory.stacks[item_id].quantity
    yard.transfer_item(inventory.container_id, warehouse.warehouse_id, item_id, quantity)


def withdraw_selected(yard: Yard, index: int) -> None:
    warehouse = yard.warehouse_in_reach()
    if warehouse is None:
        tell(yard, "No warehouse in reach")
        return
    stacks = warehouse.container.stacks
    item_id = nth_item(stacks, index)
    if item_id is None:
        tell(yard, f"{warehouse.name} is empty")
        return
    quantity = min(WITHDRAW_AMOUNT, stacks[item_id].quantity)
    yard.transfer_item(warehouse.warehouse_id, yard.state.player.inventory.container_id, item_id, quantity)


def main() -> None:
    args = parse_args()
    configure_logging()

    config = load_config(args.config) if args.config else YardConfig()
    if args.tps is not None:
        config = replace(config, tps=args.tps)
    yard = build_yard(config)

    log_panel = NoticeLogPanel()
    yard.subscribe(log_panel.add)

    field_w, field_h = int(config.field_width), int(config.field_height)
    screen_w = field_w + SIDEBAR_W
    screen_h = field_h + LOG_H

    pygame.init()
    screen = pygame.display.set_mode((screen_w, screen_h))
    pygame.display.set_caption("Depot Yard")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)
    small_font = pygame.font.SysFont("monospace", 11)

    tick_interval = 1.0 / config.tps
    accumulator = 0.0
    inventory_index = 0
    warehouse_index = 0
    held: set[str] = set()
    recipes = yard.recipes()

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_TAB:
                    inventory_index += 1
                elif event.key == pygame.K_r:
                    warehouse_index += 1
                elif event.key == pygame.K_e:
                    deposit_selected(yard, inventory_index)
                elif event.key == pygame.K_q:
                    withdraw_selected(yard, warehouse_index)
                elif event.key in CRAFT_KEYS:
                    idx = CRAFT_KEYS.index(event.key)
                    if idx < len(recipes):
                        yard.start_crafting(recipes[idx].recipe_id)

        # --- Movement intent, only when the held set changes ---
        now_held = held_directions()
        if now_held != held:
            held = now_held
            yard.apply_movement_intent(held)

        # --- Tick engine at fixed rate ---
        while accumulator >= tick_interval:
            yard.step()
            accumulator -= tick_interval
        # Drain excess accumulator to prevent spiral of death
        if accumulator > tick_interval * 4:
            accumulator = tick_interval * 2

        # --- Render ---
        snapshot = yard.get_snapshot()
        in_reach = snapshot_warehouse(snapshot, yard.warehouse_in_reach())
        if in_reach is not None and in_reach.container.stacks:
            warehouse_index %= len(in_reach.container.stacks)
        if snapshot.player.inventory.stacks:
            inventory_index %= len(snapshot.player.inventory.stacks)

        screen.fill(COLOR_BG)
        draw_field(screen, field_w, field_h)
        draw_warehouses(screen, font, snapshot, in_reach)
        draw_drops(screen, small_font, snapshot, yard.state.catalog)
        draw_player(screen, snapshot, config.player_size)

        draw_sidebar(
            screen, font, field_w, field_h + LOG_H, SIDEBAR_W,
            snapshot, yard.state.catalog, recipes, in_reach,
            inventory_index, warehouse_index,
        )
        log_panel.draw(screen, font, 0, field_h, field_w, LOG_H)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
