"""
Tests for the motion and growth engine.
"""

import os
import sys
from collections import deque

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ascii_snake.domain import UP, DOWN, LEFT, RIGHT, GridPos, GrowRequest, Snake
from ascii_snake.systems.motion import (
    advance,
    commit_direction,
    new_grow_queue,
    tick_grow_queue,
)


def line_snake(length, direction=UP):
    """A straight snake with its head at the origin, trailing behind."""
    body = [GridPos(0, 0) + GridPos(-direction.x * i, -direction.y * i) for i in range(length)]
    return Snake(body, direction=direction)


class TestAdvance:
    """Tests for a single motion step."""

    def test_length_one_moves_three_cells(self):
        """Three advances from (0,0) moving up land on (0,3) with length 1."""
        snake = Snake([GridPos(0, 0)], direction=UP)
        queue = new_grow_queue()
        for _ in range(3):
            advance(snake, queue)
        assert snake.grid_pos == GridPos(0, 3)
        assert list(snake.body) == [GridPos(0, 3)]

    def test_length_invariant_without_growth(self):
        """Without grow requests the body length never changes."""
        snake = line_snake(4, RIGHT)
        queue = new_grow_queue()
        for _ in range(10):
            advance(snake, queue)
            assert len(snake.body) == 4
        assert snake.head == GridPos(10, 0)
        assert list(snake.body) == [GridPos(10 - i, 0) for i in range(4)]

    def test_grid_pos_tracks_head(self):
        """grid_pos always equals the head after a step."""
        snake = line_snake(3, UP)
        snake.pending_direction = LEFT
        advance(snake, new_grow_queue())
        assert snake.grid_pos == snake.head == GridPos(-1, 0)

    def test_pending_direction_committed(self):
        """The buffered direction is applied on the advance."""
        snake = line_snake(2, UP)
        snake.pending_direction = RIGHT
        advance(snake, new_grow_queue())
        assert snake.current_direction == RIGHT
        assert snake.head == GridPos(1, 0)


class TestCommitDirection:
    """Tests for the reversal guard at commit time."""

    def test_reversal_rejected_at_commit(self):
        """A reversed pending direction is dropped, not applied."""
        snake = line_snake(3, UP)
        snake.pending_direction = DOWN
        assert commit_direction(snake) == UP
        assert snake.pending_direction == UP

    def test_turn_committed(self):
        snake = line_snake(3, UP)
        snake.pending_direction = LEFT
        assert commit_direction(snake) == LEFT


class TestGrowQueue:
    """Tests for delayed growth."""

    def test_request_fires_when_countdown_reaches_zero(self):
        """A request with turns_remaining=2 grows the body on the second advance."""
        snake = line_snake(2, UP)
        queue = deque([GrowRequest(turns_remaining=2, pos=snake.tail, ordinal=2)])

        advance(snake, queue)
        assert len(snake.body) == 2
        assert queue[0].turns_remaining == 1

        fired = advance(snake, queue)
        assert fired is not None and fired.ordinal == 2
        assert len(snake.body) == 3
        assert len(queue) == 0

    def test_growth_keeps_vacated_tail(self):
        """The tail cell stays in place on the advance that grows."""
        snake = line_snake(2, UP)
        tail = snake.tail
        queue = deque([GrowRequest(turns_remaining=1, pos=tail, ordinal=1)])
        advance(snake, queue)
        assert snake.tail == tail
        assert list(snake.body) == [GridPos(0, 1), GridPos(0, 0), GridPos(0, -1)]

    def test_all_requests_decrement_every_advance(self):
        """Every queued request counts down, not just the oldest."""
        queue = deque([
            GrowRequest(turns_remaining=3, pos=GridPos(0, 0), ordinal=1),
            GrowRequest(turns_remaining=5, pos=GridPos(0, 0), ordinal=2),
        ])
        assert tick_grow_queue(queue) is None
        assert [r.turns_remaining for r in queue] == [2, 4]

    def test_one_request_fires_per_advance_in_order(self):
        """Requests due together resolve oldest first, one per advance."""
        queue = deque([
            GrowRequest(turns_remaining=1, pos=GridPos(0, 0), ordinal=1),
            GrowRequest(turns_remaining=1, pos=GridPos(0, 0), ordinal=2),
        ])
        assert tick_grow_queue(queue).ordinal == 1
        assert queue[0].turns_remaining == 0
        assert tick_grow_queue(queue).ordinal == 2
        assert tick_grow_queue(queue) is None

    def test_final_length_counts_every_request(self):
        """After all requests resolve, length = initial + number of requests."""
        snake = line_snake(1, RIGHT)
        queue = deque(
            GrowRequest(turns_remaining=n, pos=snake.tail, ordinal=n) for n in (1, 2, 2, 4)
        )
        for _ in range(10):
            advance(snake, queue)
        assert not queue
        assert len(snake.body) == 5
        assert len(set(snake.body)) == 5
