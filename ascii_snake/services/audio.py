"""
Sound board for the game's three sound events.

The core only emits SoundEvent values. This module maps each event to an
asset file and hands it to a playback backend. Playback is best-effort:
a missing asset or a failing backend is logged and skipped, never raised.
"""

import logging
import os
from typing import Callable, Dict, List, Optional

from ascii_snake.domain.events import SoundEvent

logger = logging.getLogger(__name__)

SOUND_ASSETS: Dict[SoundEvent, str] = {
    SoundEvent.READY: "ding.wav",
    SoundEvent.NOM: "nom.wav",
    SoundEvent.OUCH: "ouch.wav",
}


class SoundBoard:
    """
    Resolves sound events to asset paths and plays them.

    Attributes:
        sound_dir: directory the asset names are resolved against
        backend: callable taking an asset path; None means log only
        played: asset paths handed to the backend, oldest first
    """

    def __init__(self, sound_dir: str = "assets", backend: Optional[Callable[[str], None]] = None):
        self.sound_dir = sound_dir
        self.backend = backend
        self.played: List[str] = []
        self._missing = set()

    def asset_path(self, event: SoundEvent) -> str:
        return os.path.join(self.sound_dir, SOUND_ASSETS[event])

    def play(self, event: SoundEvent) -> bool:
        """
        Play the asset for *event*.

        Returns:
            True if the asset was handed to the backend, False otherwise
        """
        path = self.asset_path(event)

        if self.backend is None:
            logger.debug(f"Sound {event.value} -> {path} (no backend)")
            return False

        if not os.path.isfile(path):
            if path not in self._missing:
                logger.warning(f"Sound asset not found, {event.value} will be silent: {path}")
                self._missing.add(path)
            return False

        try:
            self.backend(path)
        except Exception as e:  # noqa: BLE001 - sound must never stop the game
            logger.error(f"Failed to play {path}: {e}")
            return False

        self.played.append(path)
        return True

    def __call__(self, event: SoundEvent):
        self.play(event)
