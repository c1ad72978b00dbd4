"""Implementations of interactive CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from ...config import Config
from ...core.generation import generate_grid, glyphs_by_attr, grid_from_rows
from ...core.grid import Grid, GridError
from ...search.astar import SearchResult, search
from ..profiling import profile_searches
from .terminal_view import TerminalView, format_trail

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = Path("profile.prof")

HELP_TEXT = """Available commands:
  /generate [width height] [seed]  draw a new random grid
  /load <file>                     read a grid from a glyph file
  /seed <n>                        set the seed used by /generate
  /solve                           run A* on the current grid
  /show                            print the current grid
  /path                            print the grid with the last route
  /profile [n]                     profile n searches (default 100)
  /help                            show this message
  /quit                            exit"""


@dataclass
class Session:
    """Mutable state shared by the CLI commands."""

    config: Config
    view: TerminalView
    grid: Optional[Grid] = None
    result: Optional[SearchResult] = None
    seed: Optional[int] = None
    history: list[str] = field(default_factory=list)


def generate(session: Session, args: list[str]) -> Optional[Grid]:
    width, height = session.config.grid.size
    seed = session.seed
    try:
        if len(args) >= 2:
            width, height = int(args[0]), int(args[1])
        if len(args) >= 3:
            seed = int(args[2])
    except ValueError:
        logger.error("Invalid /generate arguments: %s", " ".join(args))
        return None
    try:
        session.grid = generate_grid(
            width, height, seed=seed, block_chance=session.config.grid.block_chance
        )
    except GridError as e:
        logger.error("Cannot generate grid: %s", e)
        return None
    session.result = None
    logger.info("Generated %s", session.grid)
    return session.grid


def load(session: Session, path_str: str) -> Optional[Grid]:
    path = Path(path_str)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
        session.grid = grid_from_rows(lines, glyphs_by_attr(session.config.render.glyphs))
    except (OSError, GridError) as e:
        logger.error("Cannot load grid from %s: %s", path, e)
        return None
    session.result = None
    logger.info("Loaded %s from %s", session.grid, path)
    return session.grid


def set_seed(session: Session, value: str) -> None:
    try:
        session.seed = int(value)
        logger.info("Seed set to %s", session.seed)
    except ValueError:
        logger.error("Invalid seed: %s", value)


def solve(session: Session) -> Optional[SearchResult]:
    if session.grid is None:
        logger.info("No grid yet. Use /generate or /load first.")
        return None
    try:
        session.result = search(session.grid)
    except GridError as e:
        logger.error("Cannot search: %s", e)
        return None
    session.view.show(str(session.result.found).lower())
    if session.result.found:
        session.view.show(format_trail(session.result.trail))
    return session.result


def show(session: Session) -> None:
    if session.grid is None:
        logger.info("No grid yet. Use /generate or /load first.")
        return
    session.view.show(session.view.render_grid(session.grid))


def path(session: Session) -> None:
    if session.grid is None or session.result is None:
        logger.info("Nothing solved yet. Use /solve first.")
        return
    if not session.result.found:
        logger.info("Last search found no route.")
    session.view.show(session.view.render_path(session.grid, session.result.route))


def profile(session: Session, count_str: str | None = None) -> None:
    if session.grid is None:
        logger.info("No grid yet. Use /generate or /load first.")
        return
    try:
        count = int(count_str) if count_str else 100
        if count <= 0:
            logger.info("Number of searches must be positive.")
            return
    except ValueError:
        logger.error("Invalid number of searches: %s", count_str)
        return
    logger.info("Profiling %s searches. Output to %s", count, DEFAULT_PROFILE_PATH)
    stats = profile_searches(count, session.grid, DEFAULT_PROFILE_PATH)
    stats.sort_stats("cumulative").print_stats(10)


def help_command(session: Session) -> None:
    session.view.show(HELP_TEXT)


def execute(command: str, args: list[str], session: Session, state: Dict[str, Any]) -> Any:
    if "running" not in state: state["running"] = True
    cmd_lower = command.lower()
    session.history.append(cmd_lower)

    return_value: Any = None

    if cmd_lower == "generate":
        return_value = generate(session, args)
    elif cmd_lower == "load":
        if args:
            return_value = load(session, args[0])
        else:
            logger.error("Usage: /load <file>")
    elif cmd_lower == "seed":
        if args:
            set_seed(session, args[0])
        else:
            logger.error("Usage: /seed <n>")
    elif cmd_lower == "solve":
        return_value = solve(session)
    elif cmd_lower == "show":
        show(session)
    elif cmd_lower == "path":
        path(session)
    elif cmd_lower == "profile":
        profile(session, args[0] if args else None)
    elif cmd_lower == "help":
        help_command(session)
    elif cmd_lower == "quit":
        state["running"] = False
        logger.info("Quit command received.")
    else:
        logger.error("Unknown command: /%s. Type /help for available commands.", command)

    return return_value


__all__ = [
    "Session", "generate", "load", "set_seed", "solve", "show", "path",
    "profile", "help_command", "execute",
]
