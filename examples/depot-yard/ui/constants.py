"""Layout, color, and rendering constants."""
from __future__ import annotations

# Layout
SIDEBAR_W = 260
LOG_H = 110
FPS = 60

# Interaction
WITHDRAW_AMOUNT = 10

# World colors
COLOR_BG = (20, 20, 30)
COLOR_FIELD = (34, 40, 48)
COLOR_GRID = (40, 46, 56)
COLOR_PLAYER = (90, 200, 255)
COLOR_PLAYER_EDGE = (230, 240, 255)
COLOR_REACH = (255, 255, 255)

WAREHOUSE_COLORS: dict[str, tuple[int, int, int]] = {
    "storage": (70, 110, 170),
    "production": (170, 110, 60),
    "crafting": (140, 80, 160),
    "logistics": (70, 140, 90),
}

RARITY_COLORS: dict[str, tuple[int, int, int]] = {
    "common": (190, 190, 190),
    "rare": (80, 150, 255),
    "epic": (190, 100, 255),
    "legendary": (255, 180, 40),
}

# UI colors
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_LOG_BG = (18, 18, 25)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_HIGHLIGHT = (60, 60, 80)
COLOR_BAR_BG = (40, 40, 50)
COLOR_BAR_FILL = (100, 200, 120)
COLOR_BAR_BLOCKED = (220, 80, 60)

# Notice colors by severity
NOTICE_COLORS: dict[str, tuple[int, int, int]] = {
    "info": (100, 200, 220),
    "success": (100, 220, 100),
    "error": (220, 80, 80),
}
