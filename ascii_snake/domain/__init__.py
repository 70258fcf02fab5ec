"""
Domain entities for the ASCII Snake simulation core.

This module contains the value types and entities that the per-frame
systems operate on. None of them know about input, audio or drawing.
"""

from .constants import UP, DOWN, LEFT, RIGHT, ZERO, DIRECTIONS
from .position import GridPos
from .field import Field
from .snake import Snake
from .food import Food, GrowRequest
from .frame import Frame, CellKind
from .events import Phase, SoundEvent, RoundResult

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'ZERO', 'DIRECTIONS',
    'GridPos',
    'Field',
    'Snake',
    'Food',
    'GrowRequest',
    'Frame',
    'CellKind',
    'Phase',
    'SoundEvent',
    'RoundResult',
]
