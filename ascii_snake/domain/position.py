"""
GridPos value type - a cell on the field or a direction vector.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridPos:
    x: int
    y: int

    def __add__(self, other: "GridPos") -> "GridPos":
        return GridPos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "GridPos") -> "GridPos":
        return GridPos(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "GridPos":
        return GridPos(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __repr__(self):
        return f"({self.x}, {self.y})"
