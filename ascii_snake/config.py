"""
Configuration for ASCII Snake.

Values come from environment variables (a .env file is loaded first) and
can be overridden by keyword arguments:

  SNAKE_FIELD_WIDTH / SNAKE_FIELD_HEIGHT   field size in cells
  SNAKE_START_INTERVAL                     seconds per advance at spawn
  SNAKE_MIN_INTERVAL                       fastest allowed interval
  SNAKE_ACCELERATION                       seconds removed per eat
  SNAKE_SEED                               RNG seed for food placement
  SNAKE_SOUND_DIR                          directory holding the sound assets
  SNAKE_USE_HELD_KEYS                      also steer from held keys
  SNAKE_LOG_LEVEL                          logging level for the CLI
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from ascii_snake.domain.constants import (
    ACCELERATION,
    MIN_INTERVAL,
    MIN_STAGE_SIZE,
    STAGE_HEIGHT,
    STAGE_WIDTH,
    START_INTERVAL,
)

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class GameConfig:
    width: int = STAGE_WIDTH
    height: int = STAGE_HEIGHT
    start_interval: float = START_INTERVAL
    min_interval: float = MIN_INTERVAL
    acceleration: float = ACCELERATION
    seed: Optional[int] = None
    sound_dir: str = "assets"
    use_held_keys: bool = False
    log_level: str = "INFO"

    def validate(self) -> "GameConfig":
        if self.width < MIN_STAGE_SIZE or self.height < MIN_STAGE_SIZE:
            raise ValueError(
                f"Field must be at least {MIN_STAGE_SIZE}x{MIN_STAGE_SIZE}, "
                f"got {self.width}x{self.height}."
            )
        if self.start_interval <= 0:
            raise ValueError(f"start_interval must be positive, got {self.start_interval}.")
        if not 0 < self.min_interval <= self.start_interval:
            raise ValueError(
                f"min_interval must be in (0, start_interval], got {self.min_interval}."
            )
        if self.acceleration < 0:
            raise ValueError(f"acceleration must not be negative, got {self.acceleration}.")
        return self


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from e


def load_config(**overrides) -> GameConfig:
    """
    Build a validated GameConfig from the environment.

    Keyword arguments replace the matching field; None values are ignored
    so argparse namespaces can be passed through directly.
    """
    config = GameConfig(
        width=_env_int("SNAKE_FIELD_WIDTH", STAGE_WIDTH),
        height=_env_int("SNAKE_FIELD_HEIGHT", STAGE_HEIGHT),
        start_interval=_env_float("SNAKE_START_INTERVAL", START_INTERVAL),
        min_interval=_env_float("SNAKE_MIN_INTERVAL", MIN_INTERVAL),
        acceleration=_env_float("SNAKE_ACCELERATION", ACCELERATION),
        seed=_env_int("SNAKE_SEED", None),
        sound_dir=os.getenv("SNAKE_SOUND_DIR", "assets"),
        use_held_keys=os.getenv("SNAKE_USE_HELD_KEYS", "").strip().lower() in _TRUTHY,
        log_level=os.getenv("SNAKE_LOG_LEVEL", "INFO").upper(),
    )
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = replace(config, **overrides)
    return config.validate()
