import io
import logging
from pathlib import Path

import pytest

from grid_pathfinder.config import load_config
from grid_pathfinder.core.grid import CellAttr
from grid_pathfinder.utils.cli import commands
from grid_pathfinder.utils.cli.command_parser import CLICommand, parse_command, read_commands
from grid_pathfinder.utils.cli.terminal_view import TerminalView


@pytest.fixture
def session(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("GRID_PATHFINDER_SEED", raising=False)
    cfg = load_config(tmp_path / "missing.yaml")
    out = io.StringIO()
    return commands.Session(config=cfg, view=TerminalView(stream=out))


def _output(session) -> str:
    return session.view.stream.getvalue()


def test_parse_command_basic():
    cmd = parse_command("/generate 4 4 7")
    assert cmd == CLICommand(name="generate", args=["4", "4", "7"])


def test_parse_command_invalid():
    assert parse_command("hello") is None
    assert parse_command("/") is None
    assert parse_command("  /SOLVE  ").name == "solve"


def test_read_commands_skips_other_lines():
    stream = io.StringIO("/seed 3\nnoise\n\n/solve\n")
    assert [c.name for c in read_commands(stream)] == ["seed", "solve"]


def test_generate_uses_arguments(session):
    grid = commands.execute("generate", ["4", "3", "7"], session, {})
    assert grid is session.grid
    assert grid.size == (4, 3)


def test_generate_defaults_to_config_size_and_seed(session):
    commands.execute("seed", ["11"], session, {})
    assert session.seed == 11
    first = commands.execute("generate", [], session, {})
    second = commands.execute("generate", [], session, {})
    assert first.size == (5, 5)
    assert first.rows() == second.rows()


def test_generate_bad_arguments_logged(session, caplog):
    with caplog.at_level(logging.ERROR):
        assert commands.execute("generate", ["a", "b"], session, {}) is None
    assert "Invalid /generate arguments" in caplog.text


def test_solve_prints_result_and_trail(session, tmp_path: Path):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("@o\no#\n")
    commands.execute("load", [str(grid_file)], session, {})
    result = commands.execute("solve", [], session, {})
    assert result.found
    out = _output(session).splitlines()
    assert out[0] == "true"
    assert out[1].startswith("(1, 1)  ")
    assert out[1].rstrip().endswith("(0, 0)")


def test_solve_reports_not_found(session, tmp_path: Path):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("@*#\n")
    commands.execute("load", [str(grid_file)], session, {})
    result = commands.execute("solve", [], session, {})
    assert not result.found
    assert _output(session) == "false\n"


def test_solve_without_grid(session):
    assert commands.execute("solve", [], session, {}) is None
    assert _output(session) == ""


def test_show_and_path(session, tmp_path: Path):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("@o#\n")
    commands.execute("load", [str(grid_file)], session, {})
    commands.execute("show", [], session, {})
    assert _output(session) == "@   o   #\n"
    commands.execute("path", [], session, {})
    assert _output(session) == "@   o   #\n"  # not solved yet


def test_load_missing_file_logged(session, tmp_path: Path, caplog):
    with caplog.at_level(logging.ERROR):
        assert commands.load(session, str(tmp_path / "absent.txt")) is None
    assert "Cannot load grid" in caplog.text


def test_help_lists_commands(session):
    commands.execute("help", [], session, {})
    text = _output(session)
    for name in ("/generate", "/solve", "/show", "/path", "/quit"):
        assert name in text


def test_quit_and_unknown(session, caplog):
    state = {}
    with caplog.at_level(logging.ERROR):
        commands.execute("bogus", [], session, state)
    assert "Unknown command: /bogus" in caplog.text
    assert state["running"] is True
    commands.execute("quit", [], session, state)
    assert state["running"] is False
    assert session.history == ["bogus", "quit"]


def test_profile_command_runs(session, monkeypatch):
    calls = {}

    class DummyStats:
        def sort_stats(self, key):
            calls["sort"] = key
            return self

        def print_stats(self, n):
            calls["n"] = n

    def dummy_profile(count, grid, path):
        calls["count"] = count
        return DummyStats()

    monkeypatch.setattr(commands, "profile_searches", dummy_profile)
    commands.execute("generate", ["3", "3", "1"], session, {})
    commands.execute("profile", ["5"], session, {})
    assert calls == {"count": 5, "sort": "cumulative", "n": 10}


@pytest.mark.parametrize("name,usage", [("load", "/load <file>"), ("seed", "/seed <n>")])
def test_missing_argument_logs_usage(session, caplog, name, usage):
    with caplog.at_level(logging.ERROR):
        commands.execute(name, [], session, {})
    assert f"Usage: {usage}" in caplog.text
    assert "Unknown command" not in caplog.text


def test_load_uses_configured_glyphs(session, tmp_path: Path):
    session.config.render.glyphs = {"free": ".", "block": "X", "start": "S", "end": "E"}
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text("S.X\n..E\n")
    grid = commands.execute("load", [str(grid_file)], session, {})
    assert grid is not None
    assert grid.size == (3, 2)
    assert grid.count(CellAttr.BLOCK) == 1
