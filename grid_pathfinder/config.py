"""Simple configuration loader for grid_pathfinder."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .core.generation import DEFAULT_BLOCK_CHANCE


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

SEED_ENV = "GRID_PATHFINDER_SEED"
LOG_LEVEL_ENV = "GRID_PATHFINDER_LOG_LEVEL"


@dataclass
class GridConfig:
    """Configuration values for grid generation."""

    size: tuple[int, int] = (5, 5)
    block_chance: float = DEFAULT_BLOCK_CHANCE
    seed: Optional[int] = None


@dataclass
class RenderConfig:
    """Configuration for the ASCII renderer."""

    colour: bool = False
    glyphs: Dict[str, str] = field(default_factory=dict)


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    render: RenderConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    size = tuple(int(v) for v in grid_data.get("size", [5, 5]))
    if len(size) != 2 or min(size) <= 0:
        raise ValueError(f"grid.size must be two positive integers, got {size}")
    block_chance = float(grid_data.get("block_chance", DEFAULT_BLOCK_CHANCE))
    if not 0.0 <= block_chance < 1.0:
        raise ValueError(f"grid.block_chance must be in [0, 1), got {block_chance}")
    seed = grid_data.get("seed")
    grid = GridConfig(
        size=size,  # type: ignore[arg-type]
        block_chance=block_chance,
        seed=int(seed) if seed is not None else None,
    )

    render_data = data.get("render", {}) or {}
    render = RenderConfig(
        colour=bool(render_data.get("colour", False)),
        glyphs={str(k): str(v) for k, v in (render_data.get("glyphs") or {}).items()},
    )

    log_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(log_data.get("global_level", "INFO")).upper(),
        module_levels=dict(log_data.get("module_levels") or {}),
    )

    return Config(grid=grid, render=render, logging=logging_cfg)


def _apply_env(cfg: Config) -> Config:
    """Apply environment variable overrides to ``cfg`` in place."""

    seed = os.getenv(SEED_ENV)
    if seed:
        try:
            cfg.grid.seed = int(seed)
        except ValueError:
            raise ValueError(f"{SEED_ENV} must be an integer, got {seed!r}") from None
    level = os.getenv(LOG_LEVEL_ENV)
    if level:
        cfg.logging.global_level = level.upper()
    return cfg


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _apply_env(_parse_config(raw))


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "RenderConfig",
    "LoggingConfig",
    "load_config",
]
