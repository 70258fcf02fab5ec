"""
Tests for the intent resolver.
"""

import os
import sys

import pytest

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ascii_snake.domain import UP, DOWN, LEFT, RIGHT, GridPos, Snake
from ascii_snake.systems.intent import (
    Axes,
    KeyState,
    apply_intent,
    candidate_direction,
    resolve_axes,
)


def axes(up=False, down=False, left=False, right=False):
    return Axes(up=up, down=down, left=left, right=right)


class TestResolveAxes:
    """Tests for collapsing key bindings into axes."""

    def test_wasd_and_arrows_are_equivalent(self):
        """'w' and 'up' both set the up axis."""
        assert resolve_axes(KeyState.press("w")) == resolve_axes(KeyState.press("up"))
        assert resolve_axes(KeyState.press("w", "up")).up is True

    def test_only_just_pressed_by_default(self):
        """Held keys are ignored unless use_held is set."""
        keys = KeyState(held=frozenset({"d"}), just_pressed=frozenset())
        assert resolve_axes(keys) == axes()
        assert resolve_axes(keys, use_held=True) == axes(right=True)

    def test_unknown_keys_ignored(self):
        """Keys outside the bindings do nothing."""
        assert resolve_axes(KeyState.press("space", "q")) == axes()


class TestCandidateDirection:
    """Tests for the candidate direction vector."""

    @pytest.mark.parametrize("ax,expected", [
        (axes(up=True), UP),
        (axes(down=True), DOWN),
        (axes(left=True), LEFT),
        (axes(right=True), RIGHT),
    ])
    def test_single_axis(self, ax, expected):
        """One pressed axis maps to its direction."""
        assert candidate_direction(ax) == expected

    def test_horizontal_takes_priority(self):
        """With both axes pressed, the vertical component is dropped."""
        assert candidate_direction(axes(up=True, right=True)) == RIGHT
        assert candidate_direction(axes(down=True, left=True)) == LEFT

    def test_opposite_keys_cancel(self):
        """Left and right together cancel; vertical still applies."""
        assert candidate_direction(axes(left=True, right=True)) == GridPos(0, 0)
        assert candidate_direction(axes(left=True, right=True, up=True)) == UP


class TestApplyIntent:
    """Tests for updating the pending direction."""

    def test_turn_updates_pending(self):
        """A perpendicular turn becomes the pending direction."""
        snake = Snake([GridPos(0, 0)], direction=UP)
        assert apply_intent(snake, axes(right=True)) is True
        assert snake.pending_direction == RIGHT
        assert snake.current_direction == UP

    @pytest.mark.parametrize("current,reverse_axes", [
        (UP, axes(down=True)),
        (DOWN, axes(up=True)),
        (LEFT, axes(right=True)),
        (RIGHT, axes(left=True)),
    ])
    def test_reversal_leaves_pending_unchanged(self, current, reverse_axes):
        """Pressing the opposite of the current direction is rejected."""
        snake = Snake([GridPos(0, 0)], direction=current)
        assert apply_intent(snake, reverse_axes) is False
        assert snake.pending_direction == current

    def test_reversal_rejected_after_buffered_turn(self):
        """The guard compares against current, not pending, direction."""
        snake = Snake([GridPos(0, 0)], direction=UP)
        apply_intent(snake, axes(left=True))
        apply_intent(snake, axes(down=True))
        assert snake.pending_direction == LEFT

    def test_no_input_leaves_pending_unchanged(self):
        """A zero candidate does nothing."""
        snake = Snake([GridPos(0, 0)], direction=LEFT)
        snake.pending_direction = UP
        assert apply_intent(snake, axes()) is False
        assert snake.pending_direction == UP
