"""
World state manager - food, eating, death and round start.

Every function here takes the SnakeGame context and skips quietly when the
snake or food it depends on does not exist (e.g. during the Begin phase).
"""

import logging
from itertools import islice
from typing import TYPE_CHECKING, Optional

from ascii_snake.domain.constants import GAME_OVER_TEXT, START_DIRECTION, START_POS
from ascii_snake.domain.events import Phase, RoundResult, SoundEvent
from ascii_snake.domain.food import Food, GrowRequest
from ascii_snake.domain.position import GridPos
from ascii_snake.domain.snake import Snake

if TYPE_CHECKING:
    from ascii_snake.game import SnakeGame

logger = logging.getLogger(__name__)


def _random_free_cell(game: "SnakeGame") -> Optional[GridPos]:
    """
    Return a random in-bounds cell not occupied by the snake.
    We'll do a simple loop to find one.
    """
    field = game.field
    if len(game.snake.body) >= field.area:
        logger.warning(f"No free cell left on {field!r}, skipping food spawn")
        return None

    lo, hi = field.min_cell, field.max_cell
    occupied = set(game.snake.body)
    while True:
        pos = GridPos(game.rng.randint(lo.x, hi.x), game.rng.randint(lo.y, hi.y))
        if pos not in occupied:
            return pos


def spawn_food(game: "SnakeGame") -> Optional[Food]:
    if game.food is not None or game.snake is None:
        return None
    pos = _random_free_cell(game)
    if pos is None:
        return None
    game.food = Food(pos)
    logger.debug(f"Food spawned at {pos}")
    return game.food


def check_eat(game: "SnakeGame") -> bool:
    """
    Eat the food if the head is on it: score, schedule growth, speed up.
    """
    snake, food = game.snake, game.food
    if snake is None or food is None or snake.grid_pos != food.pos:
        return False

    game.score += 1
    game.food = None
    game.grow_queue.append(
        GrowRequest(turns_remaining=game.score, pos=snake.tail, ordinal=game.score)
    )
    interval = game.clock.accelerate()
    game.emit(SoundEvent.NOM)
    logger.info(f"Ate food at {food.pos}: score {game.score}, interval {interval:.4f}s")
    return True


def collision_reason(game: "SnakeGame") -> Optional[str]:
    snake = game.snake
    if snake is None:
        return None
    if not game.field.in_bounds(snake.grid_pos):
        return "wall"
    if snake.grid_pos in islice(snake.body, 1, None):
        return "self"
    return None


def check_death(game: "SnakeGame") -> bool:
    reason = collision_reason(game)
    if reason is None:
        return False
    game_over(game, reason)
    return True


def game_over(game: "SnakeGame", reason: str):
    """
    End the round: drop the snake and food, show the game-over text and
    go back to the Begin phase.
    """
    snake = game.snake
    snake.alive = False
    snake.death_reason = reason

    game.last_result = RoundResult(
        score=game.score,
        death_reason=reason,
        advances=game.advances,
        length=len(snake.body),
    )
    game.results.append(game.last_result)
    game.snake = None
    game.food = None
    game.grow_queue.clear()
    game.text = list(GAME_OVER_TEXT)
    game.phase = Phase.BEGIN
    game.emit(SoundEvent.OUCH)
    logger.info(
        f"Game Over ({reason}) at {snake.grid_pos}: score {game.score}, "
        f"{game.advances} advances"
    )


def start_round(game: "SnakeGame") -> Snake:
    """
    Spawn a fresh snake and reset the score, growth queue and tick clock.
    """
    game.snake = Snake([START_POS], direction=START_DIRECTION)
    game.food = None
    game.grow_queue.clear()
    game.score = 0
    game.advances = 0
    game.clock.reset()
    game.text = []
    game.phase = Phase.PLAYING
    game.rounds_played += 1
    game.emit(SoundEvent.READY)
    logger.info(f"Round {game.rounds_played} started on {game.field!r}")
    return game.snake
