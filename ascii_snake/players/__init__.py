"""
Player implementations for headless ASCII Snake runs.

Players turn the last frame into the key state for the next one, standing
in for a keyboard.
"""

from .base import Player, AutopilotPlayer, safe_moves
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .scripted_player import ScriptedPlayer

AVAILABLE_PLAYERS = {
    'random': RandomPlayer,
    'greedy': GreedyPlayer,
}

__all__ = [
    'Player',
    'AutopilotPlayer',
    'safe_moves',
    'RandomPlayer',
    'GreedyPlayer',
    'ScriptedPlayer',
    'AVAILABLE_PLAYERS',
]
