#!/usr/bin/env python3
"""
Play a full game with the greedy AI and print a summary.

Every step is choose_ai_direction() followed by tick(), the same pair the
/ai-move endpoint runs. Useful for eyeballing the heuristic without a browser.
"""

import argparse
import json
import logging
import os
import random
import sys
from typing import Dict, Any, Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import DEFAULT_WIDTH, DEFAULT_HEIGHT  # noqa: E402
from domain.errors import InvalidDimensions, BoardFull  # noqa: E402
from domain.game_state import GameState  # noqa: E402

logger = logging.getLogger(__name__)


def run_ai_game(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    max_ticks: int = 1000,
    seed: Optional[int] = None,
    show_board: bool = False
) -> Dict[str, Any]:
    """
    Run one AI-controlled game until it ends or max_ticks steps have run.

    Returns:
        Summary dict with score, ticks, length, game_over and death_reason.
    """
    game = GameState(width, height, rng=random.Random(seed))

    steps = 0
    while not game.game_over and steps < max_ticks:
        game.choose_ai_direction()
        game.tick()
        steps += 1
        if show_board:
            print(f"\nStep {steps} ({game.direction}), score {game.score}")
            print(game.render())

    if not game.game_over:
        logger.info(f"Stopped after {max_ticks} steps without game over")

    return {
        "score": game.score,
        "ticks": game.ticks,
        "length": len(game.snake),
        "game_over": game.game_over,
        "death_reason": game.death_reason,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Run a headless Snake game driven by the greedy AI."
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH,
                        help=f"Width of the board (default: {DEFAULT_WIDTH}).")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT,
                        help=f"Height of the board (default: {DEFAULT_HEIGHT}).")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Maximum number of steps before stopping (default: 1000).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement.")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every step.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    try:
        result = run_ai_game(
            width=args.width,
            height=args.height,
            max_ticks=args.max_ticks,
            seed=args.seed,
            show_board=args.show_board
        )
    except (InvalidDimensions, BoardFull) as e:
        parser.error(str(e))

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return result


if __name__ == "__main__":
    main()
