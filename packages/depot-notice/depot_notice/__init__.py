"""depot-notice - User-facing outcome notices and their per-tick bus."""
from __future__ import annotations

from depot_notice.bus import Notice, NoticeBus, Severity
from depot_notice.systems import make_notice_system

__all__ = ["Notice", "NoticeBus", "Severity", "make_notice_system"]
