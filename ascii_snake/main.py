"""
Headless runner for ASCII Snake.

Drives SnakeGame with a fixed frame time and an autopilot player, then
prints a JSON summary of the rounds played.
"""

import argparse
import json
import logging
import random
from typing import Dict, Optional

from ascii_snake.config import GameConfig, load_config
from ascii_snake.game import SnakeGame
from ascii_snake.players import AVAILABLE_PLAYERS, Player
from ascii_snake.services.audio import SoundBoard
from ascii_snake.services.terminal import TerminalView

logger = logging.getLogger(__name__)


def run_simulation(
    config: GameConfig,
    player: Player,
    max_frames: int = 10_000,
    rounds: int = 1,
    fps: float = 60.0,
    view: Optional[TerminalView] = None,
    sound_board: Optional[SoundBoard] = None,
) -> Dict:
    """
    Runs snake rounds until *rounds* have ended or *max_frames* have passed.

    Args:
        config: Game configuration
        player: Supplies the key state for each frame
        max_frames: Hard cap on frames, so a perfect autopilot still stops
        rounds: Number of rounds to finish
        fps: Simulated frames per second (dt = 1 / fps)
        view: Optional terminal view to draw frames to
        sound_board: Optional sound board fed with the game's sound events

    Returns:
        A dictionary summarizing the run (frames, rounds, per-round results).
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}.")

    game = SnakeGame(config, on_sound=sound_board)
    dt = 1.0 / fps
    frame = game.frame()
    frames = 0

    while frames < max_frames and len(game.results) < rounds:
        keys = player.get_keys(frame)
        frame = game.update(dt, keys)
        game.drain_events()
        frames += 1
        if view is not None:
            view.draw(frame)

    if len(game.results) < rounds:
        logger.info(f"Stopped after {frames} frames with a round still running")

    return {
        "frames": frames,
        "rounds_finished": len(game.results),
        "results": [r.to_dict() for r in game.results],
        "in_progress": game.playing,
        "current_score": game.score if game.playing else None,
        "best_score": max((r.score for r in game.results), default=0),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run ASCII Snake headless with an autopilot player."
    )
    parser.add_argument("--player", type=str, choices=sorted(AVAILABLE_PLAYERS), default="greedy",
                        help="Autopilot that steers the snake")
    parser.add_argument("--width", type=int, required=False, default=None,
                        help="Field width in cells")
    parser.add_argument("--height", type=int, required=False, default=None,
                        help="Field height in cells")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--fps", type=float, required=False, default=60.0,
                        help="Simulated frames per second")
    parser.add_argument("--max-frames", type=int, required=False, default=10_000,
                        help="Stop after this many frames")
    parser.add_argument("--rounds", type=int, required=False, default=1,
                        help="Number of rounds to play")
    parser.add_argument("--show", action="store_true",
                        help="Draw the board every time the snake moves")

    args = parser.parse_args(argv)

    config = load_config(width=args.width, height=args.height, seed=args.seed)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    player_cls = AVAILABLE_PLAYERS[args.player]
    player = player_cls(rng=random.Random(config.seed)) if args.player == "random" else player_cls()
    view = TerminalView(clear=True) if args.show else None

    result = run_simulation(
        config,
        player,
        max_frames=args.max_frames,
        rounds=args.rounds,
        fps=args.fps,
        view=view,
        sound_board=SoundBoard(config.sound_dir),
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
