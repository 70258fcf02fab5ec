"""
Scripted player - replays a fixed list of key presses, one per frame.
"""

from typing import Iterable, List

from ascii_snake.domain.frame import Frame
from ascii_snake.systems.intent import KeyState
from .base import Player


class ScriptedPlayer(Player):
    def __init__(self, script: Iterable[Iterable[str]]):
        self.script: List[KeyState] = [KeyState.press(*keys) for keys in script]
        self.position = 0

    def get_keys(self, frame: Frame) -> KeyState:
        if self.position >= len(self.script):
            return KeyState()
        keys = self.script[self.position]
        self.position += 1
        return keys

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.script)
