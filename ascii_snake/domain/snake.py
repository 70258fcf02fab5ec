"""
Snake entity for the simulation core.
"""

from collections import deque
from typing import Iterable, Optional

from .constants import START_DIRECTION
from .position import GridPos


class Snake:
    """
    Represents the one snake on the field.

    Attributes:
        body: deque of GridPos from head at index 0 to tail at the end
        grid_pos: cached head cell, refreshed after every motion step
        current_direction: direction applied on the last advance
        pending_direction: buffered intent, committed on the next advance
        alive: whether this snake is still alive
        death_reason: 'wall' or 'self' once the snake has died
    """

    def __init__(self, body: Iterable[GridPos], direction: GridPos = START_DIRECTION):
        self.body = deque(body)
        if not self.body:
            raise ValueError("Snake body needs at least one cell.")
        self.grid_pos = self.body[0]
        self.current_direction = direction
        self.pending_direction = direction
        self.alive = True
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> GridPos:
        """Return the head position (first element)."""
        return self.body[0]

    @property
    def tail(self) -> GridPos:
        return self.body[-1]

    def __len__(self):
        return len(self.body)

    def __contains__(self, cell: GridPos) -> bool:
        return cell in self.body

    def __repr__(self):
        return (
            f"<Snake head={self.head}, length={len(self.body)}, "
            f"dir={self.current_direction}, alive={self.alive}>"
        )
