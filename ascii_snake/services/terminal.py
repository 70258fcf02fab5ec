"""
Terminal output for headless runs.

Writes Frame.print_board() to a stream, optionally clearing the screen
first with ANSI codes.
"""

import sys
from typing import Optional, TextIO

from ascii_snake.domain.frame import Frame

ANSI_CLEAR = "\033[2J\033[H"


class TerminalView:
    """Draws frames to *stream*, skipping frames where nothing moved."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frames_drawn = 0
        self._last_phase: Optional[str] = None

    def draw(self, frame: Frame, force: bool = False) -> bool:
        changed_phase = frame.phase != self._last_phase
        self._last_phase = frame.phase
        if not (force or frame.advanced or changed_phase):
            return False

        if self.clear:
            self.stream.write(ANSI_CLEAR)
        self.stream.write(f"Score: {frame.score}\n")
        self.stream.write(frame.print_board() + "\n")
        self.stream.flush()
        self.frames_drawn += 1
        return True
