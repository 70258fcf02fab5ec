"""
Frame - a render snapshot of the game for one update.
"""

import enum
from typing import List, Optional, Tuple

from .constants import BODY_GLYPH, EMPTY_GLYPH, FOOD_GLYPH
from .position import GridPos


class CellKind(enum.Enum):
    BODY = "body"
    FOOD = "food"


GLYPHS = {CellKind.BODY: BODY_GLYPH, CellKind.FOOD: FOOD_GLYPH}


class Frame:
    """
    What the render collaborator needs to draw one frame.

    Attributes:
        phase: name of the current phase ('begin' or 'playing')
        width, height: field dimensions (the board adds a one-cell border)
        cells: list of (GridPos, CellKind), food first so the body draws over it
        score: current score
        text: list of ((dx, dy), str) UI lines anchored at the board centre
        advanced: whether the snake moved during this frame
        direction: the snake's current direction, None without a snake
    """

    def __init__(
        self,
        phase: str,
        width: int,
        height: int,
        cells: List[Tuple[GridPos, CellKind]],
        score: int,
        text: List[Tuple[Tuple[int, int], str]],
        advanced: bool = False,
        direction: Optional[GridPos] = None,
    ):
        self.phase = phase
        self.width = width
        self.height = height
        self.cells = cells
        self.score = score
        self.text = text
        self.advanced = advanced
        self.direction = direction

    def cells_of(self, kind: CellKind) -> List[GridPos]:
        return [pos for pos, k in self.cells if k is kind]

    @property
    def body(self) -> List[GridPos]:
        return self.cells_of(CellKind.BODY)

    @property
    def food(self) -> Optional[GridPos]:
        food = self.cells_of(CellKind.FOOD)
        return food[0] if food else None

    def print_board(self) -> str:
        """
        Returns a string representation of the bordered board:
        BODY_GLYPH = snake segment
        FOOD_GLYPH = food
        UI text is written over the board at its anchor.
        Row 0 of the board is the bottom border, so rows print in reverse.
        """
        board_w, board_h = self.width + 2, self.height + 2
        board = [[EMPTY_GLYPH for _ in range(board_w)] for _ in range(board_h)]

        # Border
        for x in range(board_w):
            board[0][x] = "─"
            board[board_h - 1][x] = "─"
        for y in range(board_h):
            board[y][0] = "│"
            board[y][board_w - 1] = "│"
        board[0][0], board[0][board_w - 1] = "└", "┘"
        board[board_h - 1][0], board[board_h - 1][board_w - 1] = "┌", "┐"

        half_w, half_h = self.width // 2, self.height // 2
        for pos, kind in self.cells:
            col, row = pos.x + half_w, pos.y + half_h
            if 0 < col < board_w - 1 and 0 < row < board_h - 1:
                board[row][col] = GLYPHS[kind]

        centre_x, centre_y = board_w // 2, board_h // 2
        for (dx, dy), line in self.text:
            row = centre_y + dy
            if not 0 <= row < board_h:
                continue
            for i, ch in enumerate(line):
                col = centre_x + dx + i
                if 0 <= col < board_w:
                    board[row][col] = ch

        return "\n".join("".join(board[y]) for y in range(board_h - 1, -1, -1))

    def __repr__(self):
        return (
            f"<Frame phase={self.phase}, score={self.score}, "
            f"cells={len(self.cells)}, text={len(self.text)}>"
        )
