"""Field, warehouse, drop, and player rendering."""
from __future__ import annotations

import pygame

from depot_items import ItemCatalog
from depot_yard import Snapshot, Warehouse

from ui.constants import (
    COLOR_BAR_BG, COLOR_BAR_FILL, COLOR_BAR_BLOCKED, COLOR_FIELD, COLOR_GRID,
    COLOR_PLAYER, COLOR_PLAYER_EDGE, COLOR_REACH, COLOR_TEXT, RARITY_COLORS,
    WAREHOUSE_COLORS,
)

GRID_STEP = 40


def draw_field(surface: pygame.Surface, width: int, height: int) -> None:
    pygame.draw.rect(surface, COLOR_FIELD, (0, 0, width, height))
    for x in range(0, width + 1, GRID_STEP):
        pygame.draw.line(surface, COLOR_GRID, (x, 0), (x, height))
    for y in range(0, height + 1, GRID_STEP):
        pygame.draw.line(surface, COLOR_GRID, (0, y), (width, y))


def draw_bar(
    surface: pygame.Surface,
    x: int, y: int, w: int, h: int,
    fraction: float,
    color: tuple[int, int, int] = COLOR_BAR_FILL,
) -> None:
    pygame.draw.rect(surface, COLOR_BAR_BG, (x, y, w, h))
    fill = int(w * max(0.0, min(1.0, fraction)))
    if fill > 0:
        pygame.draw.rect(surface, color, (x, y, fill, h))


def draw_warehouses(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snapshot: Snapshot,
    in_reach: Warehouse | None,
) -> None:
    """Draw each footprint with its name and a fill bar."""
    for warehouse in snapshot.warehouses:
        fp = warehouse.footprint
        rect = pygame.Rect(int(fp.x), int(fp.y), int(fp.width), int(fp.height))
        color = WAREHOUSE_COLORS.get(warehouse.kind.value, (120, 120, 120))
        pygame.draw.rect(surface, color, rect)
        edge = COLOR_REACH if in_reach and in_reach.warehouse_id == warehouse.warehouse_id else (20, 20, 20)
        pygame.draw.rect(surface, edge, rect, 2)

        surface.blit(font.render(warehouse.name, True, COLOR_TEXT), (rect.x + 6, rect.y + 6))
        usage = f"{warehouse.used}/{warehouse.capacity}"
        surface.blit(font.render(usage, True, COLOR_TEXT), (rect.x + 6, rect.y + 24))
        draw_bar(
            surface, rect.x + 6, rect.bottom - 14, rect.width - 12, 6,
            warehouse.used / warehouse.capacity if warehouse.capacity else 1.0,
        )


def draw_drops(
    surface: pygame.Surface,
    font: pygame.font.Font,
    snapshot: Snapshot,
    catalog: ItemCatalog,
) -> None:
    """Draw uncollected drops as rarity-colored dots labelled with a letter."""
    for drop in snapshot.drops:
        if drop.collected:
            continue
        item = catalog.lookup(drop.item_id)
        color = RARITY_COLORS.get(item.rarity.value, COLOR_TEXT)
        center = (int(drop.x), int(drop.y))
        pygame.draw.circle(surface, color, center, 8)
        letter = font.render(item.name[:1].upper(), True, (20, 20, 20))
        surface.blit(letter, letter.get_rect(center=center))


def draw_player(surface: pygame.Surface, snapshot: Snapshot, size: float) -> None:
    x, y = snapshot.player.position
    half = size / 2
    rect = pygame.Rect(int(x - half), int(y - half), int(size), int(size))
    pygame.draw.rect(surface, COLOR_PLAYER, rect)
    pygame.draw.rect(surface, COLOR_PLAYER_EDGE, rect, 2)


def job_color(blocked: bool) -> tuple[int, int, int]:
    return COLOR_BAR_BLOCKED if blocked else COLOR_BAR_FILL
