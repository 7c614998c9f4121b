"""
Tests for rendering and the command-line interface.
"""

import json

from .. import cli
from ..api import GameService
from ..render import ASCII_GLYPHS, render_board, render_shapes
from ..engine_core import find_shapes


class TestRender:
    """Tests for text rendering."""

    def test_ascii(self, swap_board):
        assert render_board(swap_board, ASCII_GLYPHS) == "RBRR\nGYGY"

    def test_emoji_default(self, grid_from):
        assert render_board(grid_from("R.*")) == "🛑  💣"

    def test_render_shapes(self, l_shape_grid, grid_from):
        assert render_shapes([]) == "no rows on the board"
        assert "compound of 2 rows crossing at (0,2)" in render_shapes(find_shapes(l_shape_grid))
        assert "red row of 3 from (0,0) to (2,0)" in render_shapes(find_shapes(grid_from("RRR")))


class TestCli:
    """Tests for the CLI commands."""

    def test_show(self, capsys):
        code = cli.main(["show", "--width", "4", "--height", "3", "--seed", "1", "--ascii"])
        lines = capsys.readouterr().out.strip().split("\n")
        assert code == 0
        assert len(lines) == 3
        assert all(len(line) == 4 for line in lines)

    def test_shapes_json(self, capsys):
        code = cli.main(["shapes", "--width", "5", "--height", "5", "--seed", "2", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert code == 0
        assert data["width"] == 5
        assert len(data["rows"]) == 5

    def test_play_malformed(self, capsys):
        code = cli.main(["play", "--seed", "1", "--move", "garbage"])
        assert code == 1
        assert "sorry" in capsys.readouterr().out

    def test_play_not_adjacent(self, capsys):
        code = cli.main(["play", "--seed", "1", "--move", "0,0 5,5"])
        assert code == 1
        assert "not next to each other" in capsys.readouterr().out

    def test_play_legal(self, capsys, monkeypatch, swap_board):
        def fixed_service(args, auto_resolve=False):
            service = GameService(auto_resolve=auto_resolve)
            service.use_board(swap_board)
            return service

        monkeypatch.setattr(cli, "_new_service", fixed_service)
        code = cli.main(["play", "--ascii", "--move", "0,0 1,0"])
        out = capsys.readouterr().out

        assert code == 0
        assert "BRRR" in out
        assert "red row of 3" in out

    def test_play_prompts(self, capsys, monkeypatch, swap_board):
        def fixed_service(args, auto_resolve=False):
            service = GameService(auto_resolve=auto_resolve)
            service.use_board(swap_board)
            return service

        monkeypatch.setattr(cli, "_new_service", fixed_service)
        monkeypatch.setattr("builtins.input", lambda prompt: "0,0 1,0")
        code = cli.main(["play", "--ascii", "--resolve"])
        out = capsys.readouterr().out

        assert code == 0
        assert "B..." in out
        assert "cleared 3 cells, placed 0 bombs" in out

    def test_no_command(self, capsys):
        assert cli.main([]) == 1
