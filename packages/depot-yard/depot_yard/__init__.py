"""depot-yard - The collect, store, craft game built on the depot engine."""
from __future__ import annotations

from depot_yard.config import ConfigError, YardConfig, load_config, parse_config
from depot_yard.log import configure_logging
from depot_yard.state import PLAYER_CONTAINER, GameState, Player, Warehouse, WarehouseKind
from depot_yard.world import build_state, build_yard
from depot_yard.yard import Snapshot, Yard

__all__ = [
    "ConfigError",
    "GameState",
    "PLAYER_CONTAINER",
    "Player",
    "Snapshot",
    "Warehouse",
    "WarehouseKind",
    "Yard",
    "YardConfig",
    "build_state",
    "build_yard",
    "configure_logging",
    "load_config",
    "parse_config",
]
