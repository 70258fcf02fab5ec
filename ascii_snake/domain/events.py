"""
Phase, sound events and the per-round result record.
"""

import enum
from dataclasses import dataclass
from typing import Optional


class Phase(enum.Enum):
    BEGIN = "begin"
    PLAYING = "playing"


class SoundEvent(enum.Enum):
    READY = "ready"
    NOM = "nom"
    OUCH = "ouch"


@dataclass(frozen=True)
class RoundResult:
    """Summary of a round, recorded when the snake dies."""
    score: int
    death_reason: Optional[str]
    advances: int
    length: int

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "death_reason": self.death_reason,
            "advances": self.advances,
            "length": self.length,
        }
