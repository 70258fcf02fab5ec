"""
Tests for the autopilot players.
"""

import os
import random
import sys

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ascii_snake.domain import UP, LEFT, GridPos, Frame, CellKind
from ascii_snake.players import GreedyPlayer, RandomPlayer, ScriptedPlayer, safe_moves
from ascii_snake.systems.intent import KeyState


def playing_frame(body, food=None, direction=UP, width=10, height=10):
    cells = []
    if food is not None:
        cells.append((food, CellKind.FOOD))
    cells.extend((pos, CellKind.BODY) for pos in body)
    return Frame(phase="playing", width=width, height=height, cells=cells, score=0,
                 text=[], direction=direction)


class TestSafeMoves:
    """Tests for safe_moves."""

    def test_open_field_excludes_reversal(self):
        """In open space every move but the reversal is safe."""
        frame = playing_frame([GridPos(0, 0)], direction=UP)
        assert sorted(safe_moves(frame)) == ["LEFT", "RIGHT", "UP"]

    def test_corner_avoids_walls(self):
        """At the top-right corner moving up, only LEFT is safe."""
        frame = playing_frame([GridPos(5, 5)], direction=UP)
        assert safe_moves(frame) == ["LEFT"]

    def test_body_is_avoided(self):
        """Cells of the body (except the tail) are blocked."""
        body = [GridPos(0, 0), GridPos(1, 0), GridPos(1, 1), GridPos(0, 1), GridPos(-1, 1)]
        frame = playing_frame(body, direction=LEFT)
        assert "UP" not in safe_moves(frame)


class TestRandomPlayer:
    """Tests for RandomPlayer."""

    def test_presses_space_in_begin(self):
        """The autopilot starts the round itself."""
        frame = Frame(phase="begin", width=10, height=10, cells=[], score=0, text=[])
        assert RandomPlayer().get_keys(frame).was_pressed("space")

    def test_returns_safe_direction(self):
        """The chosen key always maps to a safe move."""
        player = RandomPlayer(rng=random.Random(3))
        frame = playing_frame([GridPos(5, 5)], direction=UP)
        for _ in range(20):
            assert player.get_keys(frame) == KeyState.press("a")


class TestGreedyPlayer:
    """Tests for GreedyPlayer."""

    def test_heads_toward_food(self):
        frame = playing_frame([GridPos(0, 0)], food=GridPos(-3, 0), direction=UP)
        assert GreedyPlayer().get_keys(frame) == KeyState.press("a")

    def test_keeps_going_straight_on_ties(self):
        frame = playing_frame([GridPos(0, 0)], food=GridPos(2, 2), direction=UP)
        assert GreedyPlayer().get_keys(frame) == KeyState.press("w")

    def test_no_food_no_keys(self):
        frame = playing_frame([GridPos(0, 0)], direction=UP)
        assert GreedyPlayer().get_keys(frame) == KeyState()


class TestScriptedPlayer:
    """Tests for ScriptedPlayer."""

    def test_replays_script_then_idles(self):
        player = ScriptedPlayer([["space"], [], ["d"]])
        frame = playing_frame([GridPos(0, 0)])
        assert player.get_keys(frame).was_pressed("space")
        assert player.get_keys(frame) == KeyState()
        assert player.get_keys(frame).was_pressed("d")
        assert player.exhausted
        assert player.get_keys(frame) == KeyState()
