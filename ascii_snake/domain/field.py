"""
Field - the bounded rectangular grid centred on the origin.
"""

from typing import Iterator, Tuple

from .constants import MIN_STAGE_SIZE
from .position import GridPos


class Field:
    """
    A width x height grid. Valid cells satisfy
    -(width // 2) < x <= width // 2 and the same for y, which is the
    interior of a (width + 2) x (height + 2) bordered board.
    """

    def __init__(self, width: int, height: int):
        if width < MIN_STAGE_SIZE or height < MIN_STAGE_SIZE:
            raise ValueError(
                f"Field must be at least {MIN_STAGE_SIZE}x{MIN_STAGE_SIZE}, got {width}x{height}."
            )
        self.width = width
        self.height = height
        self.half_width = width // 2
        self.half_height = height // 2

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def min_cell(self) -> GridPos:
        return GridPos(-self.half_width + 1, -self.half_height + 1)

    @property
    def max_cell(self) -> GridPos:
        return GridPos(self.min_cell.x + self.width - 1, self.min_cell.y + self.height - 1)

    def in_bounds(self, p: GridPos) -> bool:
        lo, hi = self.min_cell, self.max_cell
        return lo.x <= p.x <= hi.x and lo.y <= p.y <= hi.y

    def to_screen(self, p: GridPos) -> Tuple[int, int]:
        """Column/row on the bordered board, row 0 at the bottom border."""
        return p.x + self.half_width, p.y + self.half_height

    def cells(self) -> Iterator[GridPos]:
        lo, hi = self.min_cell, self.max_cell
        for y in range(lo.y, hi.y + 1):
            for x in range(lo.x, hi.x + 1):
                yield GridPos(x, y)

    def __repr__(self):
        return f"<Field {self.width}x{self.height} {self.min_cell}..{self.max_cell}>"
