"""System factory for notice dispatch."""
from __future__ import annotations

from typing import Any, Callable

from depot import TickContext

from depot_notice.bus import NoticeBus


def make_notice_system(bus: NoticeBus) -> Callable[[Any, TickContext], None]:
    def notice_system(state: Any, ctx: TickContext) -> None:
        bus.flush()

    return notice_system
