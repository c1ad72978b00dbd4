"""Command-line entry point: generate a grid, run A*, print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from dotenv import load_dotenv

from .config import Config, load_config, CONFIG_PATH
from .core.generation import generate_grid, glyphs_by_attr, grid_from_rows
from .core.grid import Grid, GridError
from .search.astar import SearchResult, search
from .utils.cli.command_parser import read_commands
from .utils.cli.commands import Session, execute
from .utils.cli.terminal_view import TerminalView, format_trail

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
EXIT_BAD_INPUT = 2

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config) -> None:
    """Set the root level and per-module levels from ``cfg.logging``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH) -> Config:
    env_path = Path(".env")
    if env_path.exists(): load_dotenv(env_path)

    cfg = load_config(Path(config_path))
    configure_logging(cfg)
    logger.info("[Bootstrap] Grid size %sx%s, block chance %s, seed %s",
                cfg.grid.size[0], cfg.grid.size[1], cfg.grid.block_chance, cfg.grid.seed)
    return cfg


def build_view(cfg: Config, stream: TextIO | None = None) -> TerminalView:
    return TerminalView(glyphs=cfg.render.glyphs, colour=cfg.render.colour, stream=stream)


def run_once(
    cfg: Config, grid: Optional[Grid] = None, stream: TextIO | None = None
) -> SearchResult:
    """Search ``grid`` (or a freshly generated one) and print the outcome.

    Prints the found flag, the map, then the route from end back to start.
    """

    if grid is None:
        width, height = cfg.grid.size
        grid = generate_grid(width, height, seed=cfg.grid.seed, block_chance=cfg.grid.block_chance)
    view = build_view(cfg, stream)

    result = search(grid)
    view.show(str(result.found).lower())
    view.show(view.render_path(grid, result.route))
    if result.found:
        view.show(format_trail(result.trail))
    return result


def run_interactive(cfg: Config, stdin: TextIO = sys.stdin, stream: TextIO | None = None) -> Session:
    session = Session(config=cfg, view=build_view(cfg, stream), seed=cfg.grid.seed)
    state = {"running": True}
    logger.info("Interactive mode. Type /help for commands.")
    for cmd in read_commands(stdin):
        execute(cmd.name, cmd.args, session, state)
        if not state["running"]:
            break
    return session


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grid-pathfinder",
        description="Find a shortest path on a grid with random obstacles using A*.",
    )
    parser.add_argument("--config", type=Path, default=CONFIG_PATH, help="Path to config.yaml")
    parser.add_argument("--grid", type=Path, help="Read the grid from a glyph file instead of generating one")
    parser.add_argument("--size", type=int, nargs=2, metavar=("WIDTH", "HEIGHT"), help="Override grid size")
    parser.add_argument("--seed", type=int, help="Seed for grid generation")
    parser.add_argument("--interactive", action="store_true", help="Read /commands from stdin")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    cfg = bootstrap(args.config)
    if args.size:
        cfg.grid.size = (args.size[0], args.size[1])
    if args.seed is not None:
        cfg.grid.seed = args.seed

    if args.interactive:
        run_interactive(cfg)
        return 0

    grid = None
    try:
        if args.grid is not None:
            lines = args.grid.read_text(encoding="utf-8").splitlines()
            grid = grid_from_rows(lines, glyphs_by_attr(cfg.render.glyphs))
        result = run_once(cfg, grid)
    except (OSError, GridError) as e:
        logger.error("Cannot run search: %s", e)
        return EXIT_BAD_INPUT
    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
