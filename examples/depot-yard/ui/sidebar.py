"""Sidebar: player stats, inventory, the warehouse in reach, and recipes."""
from __future__ import annotations

import pygame

from depot_craft import Recipe
from depot_items import ItemCatalog
from depot_yard import Snapshot, Warehouse

from ui.constants import COLOR_HIGHLIGHT, COLOR_SIDEBAR_BG, COLOR_TEXT, COLOR_TEXT_DIM
from ui.renderer import draw_bar, job_color

LINE_H = 18


def _stack_lines(container, catalog: ItemCatalog) -> list[str]:
    return [
        f"{catalog.display_name(stack.item_id):<10} x{stack.quantity}"
        for stack in container.stacks.values()
    ]


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    x: int, h: int, w: int,
    snapshot: Snapshot,
    catalog: ItemCatalog,
    recipes: list[Recipe],
    in_reach: Warehouse | None,
    inventory_index: int,
    warehouse_index: int,
) -> None:
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, (x, 0, w, h))
    x0 = x + 10
    y = 10

    def text(line: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        nonlocal y
        surface.blit(font.render(line, True, color), (x0, y))
        y += LINE_H

    def highlight(active: bool) -> None:
        if active:
            pygame.draw.rect(surface, COLOR_HIGHLIGHT, (x0 - 4, y - 1, w - 12, LINE_H))

    player = snapshot.player
    text(f"Level {player.level}  XP {player.experience}  HP {player.health}")
    text(f"Time {snapshot.now:6.1f}s", COLOR_TEXT_DIM)
    y += 6

    inventory = player.inventory
    text(f"Inventory {len(inventory.stacks)}/{inventory.max_slots}")
    for i, line in enumerate(_stack_lines(inventory, catalog)):
        highlight(i == inventory_index)
        text(f"  {line}")
    y += 6

    if in_reach is None:
        text("No warehouse in reach", COLOR_TEXT_DIM)
    else:
        text(f"{in_reach.name} {in_reach.used}/{in_reach.capacity}")
        for i, line in enumerate(_stack_lines(in_reach.container, catalog)):
            highlight(i == warehouse_index)
            text(f"  {line}")
    y += 6

    text("Recipes")
    jobs = {job.recipe_id: job for job in snapshot.crafting_queue}
    for i, recipe in enumerate(recipes):
        needs = " ".join(f"{ing.quantity}{catalog.display_name(ing.item_id)[:1]}" for ing in recipe.ingredients)
        text(f" [{i + 1}] {recipe.name} ({needs}) {recipe.crafting_time:.0f}s")
        job = jobs.get(recipe.recipe_id)
        if job is not None:
            draw_bar(surface, x0 + 20, y, w - 50, 6, job.progress(snapshot.now), job_color(job.blocked))
            y += 10
    y += 10

    for line in (
        "Arrows/WASD: Move",
        "Tab/R: Select stack",
        "E: Deposit  Q: Withdraw",
        "1-3: Craft  Esc: Quit",
    ):
        text(line, COLOR_TEXT_DIM)
