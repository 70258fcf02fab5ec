"""
Motion and growth engine - one grid step per advance.

Order of one advance:
  1) commit pending_direction (reversal guard re-checked)
  2) push the new head
  3) decrement every grow request
  4) let the oldest request at zero keep the tail, otherwise pop it
  5) refresh grid_pos
"""

import logging
from collections import deque
from typing import Deque, Optional

from ascii_snake.domain.food import GrowRequest
from ascii_snake.domain.position import GridPos
from ascii_snake.domain.snake import Snake
from .intent import is_reversal

logger = logging.getLogger(__name__)


def commit_direction(snake: Snake) -> GridPos:
    if not is_reversal(snake.pending_direction, snake.current_direction):
        snake.current_direction = snake.pending_direction
    else:
        snake.pending_direction = snake.current_direction
    return snake.current_direction


def tick_grow_queue(grow_queue: Deque[GrowRequest]) -> Optional[GrowRequest]:
    """
    Decrement every request once and pop the oldest one that reached zero.

    Only one request fires per advance; others already at zero stay queued
    for the following advances in the order they were made.
    """
    for request in grow_queue:
        if request.turns_remaining > 0:
            request.turns_remaining -= 1

    for request in grow_queue:
        if request.turns_remaining == 0:
            grow_queue.remove(request)
            return request
    return None


def advance(snake: Snake, grow_queue: Deque[GrowRequest]) -> Optional[GrowRequest]:
    """
    Move *snake* one cell and apply at most one pending growth.

    Returns the GrowRequest that fired on this advance, if any.
    """
    direction = commit_direction(snake)
    next_head = snake.head + direction
    snake.body.appendleft(next_head)

    fired = tick_grow_queue(grow_queue)
    if fired is None:
        snake.body.pop()
    else:
        logger.debug(
            f"Grow request #{fired.ordinal} fired, length now {len(snake.body)}"
        )

    snake.grid_pos = next_head
    return fired


def new_grow_queue() -> Deque[GrowRequest]:
    return deque()
