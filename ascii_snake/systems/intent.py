"""
Intent resolver - turns key state into the snake's pending direction.
"""

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, NamedTuple

from ascii_snake.domain.constants import KEYS_DOWN, KEYS_LEFT, KEYS_RIGHT, KEYS_UP
from ascii_snake.domain.position import GridPos
from ascii_snake.domain.snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyState:
    """
    Key names held this frame and pressed this frame.
    """
    held: FrozenSet[str] = field(default_factory=frozenset)
    just_pressed: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def press(cls, *keys: str) -> "KeyState":
        """A frame where *keys* went down (and are therefore held)."""
        pressed = frozenset(k.lower() for k in keys)
        return cls(held=pressed, just_pressed=pressed)

    def is_held(self, key: str) -> bool:
        return key in self.held

    def was_pressed(self, key: str) -> bool:
        return key in self.just_pressed


NO_KEYS = KeyState()


class Axes(NamedTuple):
    up: bool
    down: bool
    left: bool
    right: bool


def resolve_axes(keys: KeyState, use_held: bool = False) -> Axes:
    """
    Collapse equivalent bindings (WASD and arrows) into four booleans.
    """
    active = keys.just_pressed | keys.held if use_held else keys.just_pressed
    return Axes(
        up=bool(active & KEYS_UP),
        down=bool(active & KEYS_DOWN),
        left=bool(active & KEYS_LEFT),
        right=bool(active & KEYS_RIGHT),
    )


def candidate_direction(axes: Axes) -> GridPos:
    """(right - left, up - down) with horizontal taking priority."""
    dx = int(axes.right) - int(axes.left)
    dy = int(axes.up) - int(axes.down)
    if dx != 0:
        dy = 0
    return GridPos(dx, dy)


def is_reversal(direction: GridPos, current: GridPos) -> bool:
    return not direction.is_zero() and direction == -current


def apply_intent(snake: Snake, axes: Axes) -> bool:
    """
    Overwrite the snake's pending direction from *axes*.

    Returns True if pending_direction changed. A zero candidate or an exact
    reversal of current_direction leaves it untouched.
    """
    candidate = candidate_direction(axes)
    if candidate.is_zero() or is_reversal(candidate, snake.current_direction):
        return False
    if candidate != snake.pending_direction:
        logger.debug(f"Pending direction {snake.pending_direction} -> {candidate}")
    snake.pending_direction = candidate
    return True
