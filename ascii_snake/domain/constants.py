"""
Game constants for ASCII Snake.
"""

from .position import GridPos

# Movement directions (+Y is up)
UP = GridPos(0, 1)
DOWN = GridPos(0, -1)
LEFT = GridPos(-1, 0)
RIGHT = GridPos(1, 0)
ZERO = GridPos(0, 0)
DIRECTIONS = {"UP": UP, "DOWN": DOWN, "LEFT": LEFT, "RIGHT": RIGHT}

# Field and speed defaults
STAGE_WIDTH = 40
STAGE_HEIGHT = 36
MIN_STAGE_SIZE = 4
START_INTERVAL = 1 / 8
MIN_INTERVAL = 1 / 35
ACCELERATION = 0.005

# Spawn
START_POS = ZERO
START_DIRECTION = UP

# Glyphs
BODY_GLYPH = "█"
FOOD_GLYPH = "☼"
EMPTY_GLYPH = " "

# Keys
KEY_START = "space"
KEYS_UP = frozenset({"w", "up"})
KEYS_DOWN = frozenset({"s", "down"})
KEYS_LEFT = frozenset({"a", "left"})
KEYS_RIGHT = frozenset({"d", "right"})

# UI text, anchored as (dx, dy) offsets from the board centre
TITLE_TEXT = [
    ((-5, 5), "ASCII SNAKE"),
    ((-6, 2), "Use WASD to move"),
    ((-9, 1), "Press Space to Begin"),
]
GAME_OVER_TEXT = [
    ((-4, 1), "Game Over!"),
    ((-12, 0), "Press Spacebar to restart"),
]
