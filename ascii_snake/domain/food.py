"""
Food and GrowRequest entities.
"""

from dataclasses import dataclass

from .position import GridPos


@dataclass(frozen=True)
class Food:
    pos: GridPos


@dataclass
class GrowRequest:
    """
    One scheduled segment of growth.

    Attributes:
        turns_remaining: advances left before this request fires
        pos: tail cell captured when the food was eaten
        ordinal: score at the time of the eat that created it
    """
    turns_remaining: int
    pos: GridPos
    ordinal: int
