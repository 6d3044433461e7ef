"""Yard tunables and the TOML loader."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_ROLES: dict[str, str] = {
    "storage": "1",
    "production": "2",
    "player": "player",
}


class ConfigError(ValueError):
    """Raised for malformed or out-of-range yard configuration."""


@dataclass(frozen=True)
class YardConfig:
    """Every tunable of a yard session.

    ``roles`` maps a recipe role to the container id that plays it. The
    player's inventory is always the container ``"player"``.
    """

    tps: int = 60
    field_width: float = 800.0
    field_height: float = 600.0
    player_size: float = 30.0
    player_speed: float = 5.0
    start_x: float = 400.0
    start_y: float = 260.0
    pickup_radius: float = 30.0
    pickup_experience: int = 10
    experience_per_level: int = 100
    inventory_slots: int = 12
    interact_reach: float = 40.0
    keep_drops_when_full: bool = False
    strict_output_capacity: bool = True
    roles: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_ROLES))

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ConfigError(f"tps must be positive, got {self.tps}")
        if self.field_width <= 0 or self.field_height <= 0:
            raise ConfigError(
                f"field size must be positive, got {self.field_width}x{self.field_height}"
            )
        if self.player_size <= 0:
            raise ConfigError(f"player_size must be positive, got {self.player_size}")
        if self.player_size > min(self.field_width, self.field_height):
            raise ConfigError("player_size does not fit inside the field")
        if self.player_speed < 0:
            raise ConfigError(f"player_speed must be >= 0, got {self.player_speed}")
        if self.pickup_radius < 0:
            raise ConfigError(f"pickup_radius must be >= 0, got {self.pickup_radius}")
        if self.pickup_experience < 0:
            raise ConfigError(f"pickup_experience must be >= 0, got {self.pickup_experience}")
        if self.experience_per_level <= 0:
            raise ConfigError(
                f"experience_per_level must be positive, got {self.experience_per_level}"
            )
        if self.inventory_slots < 0:
            raise ConfigError(f"inventory_slots must be >= 0, got {self.inventory_slots}")
        if self.interact_reach < 0:
            raise ConfigError(f"interact_reach must be >= 0, got {self.interact_reach}")
        for role, container_id in self.roles.items():
            if not isinstance(role, str) or not isinstance(container_id, str):
                raise ConfigError(f"roles must map strings to strings, got {role!r} = {container_id!r}")

    @property
    def half_size(self) -> float:
        return self.player_size / 2

    @property
    def start(self) -> tuple[float, float]:
        return (self.start_x, self.start_y)


_DEFAULTS = YardConfig()


def _check_type(key: str, value: Any) -> Any:
    default = getattr(_DEFAULTS, key)
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ConfigError(f"yard.{key} must be a boolean, got {value!r}")
        return value
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"yard.{key} must be an integer, got {value!r}")
        return value
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"yard.{key} must be a number, got {value!r}")
        return float(value)
    if not isinstance(value, dict):
        raise ConfigError(f"yard.{key} must be a table, got {value!r}")
    return value


def parse_config(table: Mapping[str, Any], base: YardConfig | None = None) -> YardConfig:
    """Build a config from a ``[yard]`` table, starting from *base*.

    ``[yard.roles]`` entries are merged over the base roles, so a file only
    needs to name the roles it changes.
    """
    base = base if base is not None else YardConfig()
    known = {f.name for f in fields(YardConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(f"unknown yard settings: {', '.join(unknown)}")

    changes: dict[str, Any] = {}
    for key, value in table.items():
        changes[key] = _check_type(key, value)
    if "roles" in changes:
        changes["roles"] = {**base.roles, **changes["roles"]}
    return replace(base, **changes)


def load_config(path: str | Path) -> YardConfig:
    """Read the ``[yard]`` table of a TOML file. A file without one yields defaults."""
    path = Path(path)
    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"{path}: {exc}") from exc

    table = data.get("yard", {})
    if not isinstance(table, dict):
        raise ConfigError(f"{path}: [yard] must be a table")
    config = parse_config(table)
    logger.info("Loaded yard config from %s", path)
    return config
