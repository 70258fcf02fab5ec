"""
Base player interface for headless runs.
"""

from typing import Dict, List

from ascii_snake.domain.constants import DIRECTIONS, KEY_START
from ascii_snake.domain.field import Field
from ascii_snake.domain.frame import Frame
from ascii_snake.domain.position import GridPos
from ascii_snake.systems.intent import KeyState

DIRECTION_KEYS: Dict[str, str] = {"UP": "w", "DOWN": "s", "LEFT": "a", "RIGHT": "d"}


class Player:
    """
    Base class/interface for player logic.

    Each player is responsible for returning the key state for the next
    frame given the last frame the game produced.
    """

    def get_keys(self, frame: Frame) -> KeyState:
        """
        Return the keys for the next frame.

        Args:
            frame: The most recent frame

        Returns:
            KeyState to pass to SnakeGame.update
        """
        raise NotImplementedError


class AutopilotPlayer(Player):
    """
    Shared plumbing for players that steer by picking a direction name.

    Presses Space whenever the game is waiting to begin.
    """

    def get_keys(self, frame: Frame) -> KeyState:
        if frame.phase == "begin":
            return KeyState.press(KEY_START)
        body = frame.body
        if not body:
            return KeyState()
        move = self.choose_move(frame)
        if move is None:
            return KeyState()
        return KeyState.press(DIRECTION_KEYS[move])

    def choose_move(self, frame: Frame):
        raise NotImplementedError


def safe_moves(frame: Frame) -> List[str]:
    """
    Direction names that avoid walls, the body and a reversal.

    The tail is treated as free since it moves away on the same advance.
    """
    field = Field(frame.width, frame.height)
    body = frame.body
    head = body[0]
    blocked = set(body[:-1])

    moves = []
    for move, delta in DIRECTIONS.items():
        if frame.direction is not None and delta == -frame.direction:
            continue
        nxt = head + delta
        if not field.in_bounds(nxt) or nxt in blocked:
            continue
        moves.append(move)
    return moves


def manhattan(a: GridPos, b: GridPos) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)
