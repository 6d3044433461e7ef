"""Notice log panel at the bottom of the screen."""
from __future__ import annotations

from collections import deque

import pygame

from depot_notice import Notice

from ui.constants import COLOR_LOG_BG, NOTICE_COLORS


class NoticeLogPanel:
    """Keeps the most recent notices, colored by severity."""

    def __init__(self, max_entries: int = 100) -> None:
        self.entries: deque[tuple[str, tuple[int, int, int]]] = deque(maxlen=max_entries)

    def add(self, notice: Notice) -> None:
        color = NOTICE_COLORS.get(notice.severity.value, NOTICE_COLORS["info"])
        self.entries.append((notice.message, color))

    def draw(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font,
        x: int, y: int, w: int, h: int,
    ) -> None:
        pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
        pygame.draw.line(surface, (50, 50, 60), (x, y), (x + w, y))

        line_h = 16
        max_lines = max(1, (h - 8) // line_h)
        ty = y + 4
        for text, color in list(self.entries)[-max_lines:]:
            surface.blit(font.render(text, True, color), (x + 6, ty))
            ty += line_h
