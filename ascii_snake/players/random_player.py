"""
Random player implementation - picks random safe moves.
"""

import random
from typing import Optional

from ascii_snake.domain.constants import DIRECTIONS
from ascii_snake.domain.frame import Frame
from .base import AutopilotPlayer, safe_moves


class RandomPlayer(AutopilotPlayer):
    """
    A random AI that picks a valid direction that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def choose_move(self, frame: Frame) -> str:
        valid_moves = safe_moves(frame)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(list(DIRECTIONS))

        return self.rng.choice(valid_moves)
