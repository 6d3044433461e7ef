"""depot - A fixed-timestep simulation engine for the depot game."""

from depot.clock import Clock
from depot.engine import Engine
from depot.types import Failure, Result, System, TickContext

__all__ = [
    "Engine",
    "Clock",
    "TickContext",
    "System",
    "Failure",
    "Result",
]
