"""
Per-frame systems, in the order SnakeGame.update runs them:

  intent  - key state -> pending direction
  clock   - elapsed time -> advance events
  motion  - one grid step plus scheduled growth
  world   - food spawn, eat check, death check, round start
"""

from .intent import KeyState, NO_KEYS, Axes, resolve_axes, candidate_direction, apply_intent
from .clock import TickClock
from .motion import advance, commit_direction, tick_grow_queue, new_grow_queue
from .world import spawn_food, check_eat, check_death, collision_reason, game_over, start_round

__all__ = [
    'KeyState', 'NO_KEYS', 'Axes', 'resolve_axes', 'candidate_direction', 'apply_intent',
    'TickClock',
    'advance', 'commit_direction', 'tick_grow_queue', 'new_grow_queue',
    'spawn_food', 'check_eat', 'check_death', 'collision_reason', 'game_over', 'start_round',
]
