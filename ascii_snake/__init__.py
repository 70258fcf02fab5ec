"""
ascii_snake - simulation core for a grid-based snake game.

The package is split the same way the game is driven each frame:

  domain    - value types and entities (GridPos, Snake, Food, Frame).
  systems   - the per-frame stages (intent, clock, motion, world).
  game      - SnakeGame, the per-frame update and the phase machine.
  services  - thin collaborators (sound board, terminal board dump).
  players   - autopilots that produce key state for headless runs.
"""

__version__ = "0.3.0"
