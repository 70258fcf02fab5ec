"""
SnakeGame - the per-frame update and the Begin/Playing phase machine.
"""

import logging
import random
from typing import Callable, List, Optional

from ascii_snake.config import GameConfig, load_config
from ascii_snake.domain.constants import KEY_START, TITLE_TEXT
from ascii_snake.domain.events import Phase, RoundResult, SoundEvent
from ascii_snake.domain.field import Field
from ascii_snake.domain.food import Food
from ascii_snake.domain.frame import CellKind, Frame
from ascii_snake.domain.snake import Snake
from ascii_snake.systems.clock import TickClock
from ascii_snake.systems.intent import NO_KEYS, KeyState, apply_intent, resolve_axes
from ascii_snake.systems.motion import advance, new_grow_queue
from ascii_snake.systems.world import check_death, check_eat, spawn_food, start_round

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Field (width, height)
      - Phase (Begin / Playing)
      - The snake, the food and the grow queue
      - Score and tick clock
      - Sound events and UI text for the collaborators
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        on_sound: Optional[Callable[[SoundEvent], None]] = None,
    ):
        self.config = config if config is not None else load_config()
        self.field = Field(self.config.width, self.config.height)
        self.clock = TickClock(
            self.config.start_interval,
            self.config.min_interval,
            self.config.acceleration,
        )
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.on_sound = on_sound

        self.phase = Phase.BEGIN
        self.snake: Optional[Snake] = None
        self.food: Optional[Food] = None
        self.grow_queue = new_grow_queue()
        self.score = 0
        self.advances = 0
        self.advanced = False
        self.rounds_played = 0
        self.last_result: Optional[RoundResult] = None
        self.results: List[RoundResult] = []

        self.text = list(TITLE_TEXT)
        self.events: List[SoundEvent] = []

    def emit(self, event: SoundEvent):
        """Queue a sound event and hand it to the sound callback, if any."""
        self.events.append(event)
        if self.on_sound is not None:
            self.on_sound(event)

    def drain_events(self) -> List[SoundEvent]:
        events, self.events = self.events, []
        return events

    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    def update(self, dt: float, keys: KeyState = NO_KEYS) -> Frame:
        """
        Run one frame:
          1) Begin phase: only watch for the start key
          2) Resolve key state into the pending direction
          3) Tick the clock; advance the snake if due
          4) Spawn food, then eat and death checks if the snake moved
        """
        self.advanced = False

        if self.phase is Phase.BEGIN:
            if keys.was_pressed(KEY_START):
                start_round(self)
            return self.frame()

        if self.snake is None:
            return self.frame()

        apply_intent(self.snake, resolve_axes(keys, self.config.use_held_keys))

        if self.clock.tick(dt):
            advance(self.snake, self.grow_queue)
            self.advances += 1
            self.advanced = True

        spawn_food(self)

        if self.advanced:
            check_eat(self)
            check_death(self)

        return self.frame()

    def frame(self) -> Frame:
        cells = []
        if self.food is not None:
            cells.append((self.food.pos, CellKind.FOOD))
        if self.snake is not None:
            cells.extend((pos, CellKind.BODY) for pos in self.snake.body)
        return Frame(
            phase=self.phase.value,
            width=self.field.width,
            height=self.field.height,
            cells=cells,
            score=self.score,
            text=list(self.text),
            advanced=self.advanced,
            direction=self.snake.current_direction if self.snake is not None else None,
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.frame().print_board() + "\n")

    def __repr__(self):
        return (
            f"<SnakeGame phase={self.phase.value}, score={self.score}, "
            f"snake={self.snake!r}, food={self.food}>"
        )
