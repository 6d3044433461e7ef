"""Notice bus: queued user-facing outcomes, dispatched once per flush."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


_LOG_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.SUCCESS: logging.INFO,
    Severity.ERROR: logging.WARNING,
}


@dataclass(frozen=True)
class Notice:
    """One outcome message for the player.

    ``context`` carries the structured fields behind ``message`` (item ids,
    quantities, container ids) so front-ends can render their own text.
    """

    severity: Severity
    message: str
    context: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "severity", Severity(self.severity))


_Handler = Callable[[Notice], None]


class NoticeBus:
    """Pub/sub for notices with per-tick flush semantics.

    Published notices are logged right away and delivered to subscribers on
    the next ``flush``. Delivered notices are kept in a bounded history,
    newest last.
    """

    def __init__(self, history_size: int = 50) -> None:
        if history_size < 1:
            raise ValueError(f"history_size must be >= 1, got {history_size}")
        self._subscribers: list[_Handler] = []
        self._queue: list[Notice] = []
        self._history: deque[Notice] = deque(maxlen=history_size)

    def subscribe(self, handler: _Handler) -> None:
        self._subscribers.append(handler)

    def unsubscribe(self, handler: _Handler) -> None:
        if handler in self._subscribers:
            self._subscribers.remove(handler)

    def publish(self, severity: Severity | str, message: str, **context: Any) -> Notice:
        notice = Notice(Severity(severity), message, context)
        logger.log(_LOG_LEVELS[notice.severity], "[%s] %s", notice.severity.value, message)
        self._queue.append(notice)
        return notice

    def info(self, message: str, **context: Any) -> Notice:
        return self.publish(Severity.INFO, message, **context)

    def success(self, message: str, **context: Any) -> Notice:
        return self.publish(Severity.SUCCESS, message, **context)

    def error(self, message: str, **context: Any) -> Notice:
        return self.publish(Severity.ERROR, message, **context)

    def flush(self) -> int:
        """Deliver queued notices in publish order. Returns the count delivered.

        Notices published by a handler during a flush wait for the next one.
        """
        pending = self._queue
        self._queue = []
        for notice in pending:
            self._history.append(notice)
            for handler in list(self._subscribers):
                handler(notice)
        return len(pending)

    def clear(self) -> None:
        self._queue.clear()

    @property
    def pending(self) -> int:
        return len(self._queue)

    def history(self, severity: Severity | str | None = None) -> list[Notice]:
        if severity is None:
            return list(self._history)
        wanted = Severity(severity)
        return [n for n in self._history if n.severity is wanted]

    def last(self) -> Notice | None:
        return self._history[-1] if self._history else None
