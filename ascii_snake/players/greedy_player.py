"""
Greedy player - heads straight for the food.
"""

from typing import Optional

from ascii_snake.domain.constants import DIRECTIONS
from ascii_snake.domain.frame import Frame
from .base import AutopilotPlayer, manhattan, safe_moves


class GreedyPlayer(AutopilotPlayer):
    """
    Picks the safe move that gets closest to the food. Keeps the current
    direction on ties so it does not zig-zag.
    """

    def choose_move(self, frame: Frame) -> Optional[str]:
        valid_moves = safe_moves(frame)
        if not valid_moves:
            return None

        food = frame.food
        if food is None:
            return None

        head = frame.body[0]

        def score(move: str):
            straight = frame.direction is not None and DIRECTIONS[move] == frame.direction
            return manhattan(head + DIRECTIONS[move], food), not straight

        return min(valid_moves, key=score)
