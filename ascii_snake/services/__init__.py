"""
Collaborators around the simulation core: sound playback and terminal output.
"""

from .audio import SoundBoard, SOUND_ASSETS
from .terminal import TerminalView

__all__ = ['SoundBoard', 'SOUND_ASSETS', 'TerminalView']
