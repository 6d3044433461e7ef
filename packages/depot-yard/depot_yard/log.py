import logging
import os

ENV_VAR = "DEPOT_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def level_from_env(default_level: int = logging.INFO) -> int:
    """Level named by DEPOT_LOG_LEVEL, or *default_level* if unset or unknown."""
    level_name = os.getenv(ENV_VAR, "").strip()
    if not level_name:
        return default_level
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else default_level


def configure_logging(default_level: int = logging.INFO) -> int:
    """Configure the root logger with the yard's format. Returns the level used.

    Respects DEPOT_LOG_LEVEL if present.
    """
    level = level_from_env(default_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
