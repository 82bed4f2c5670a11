"""Main entry point for Thai Checkers (Mak-Hot)."""

import argparse
import random
import sys

from .config import get_config
from .engine import Engine, PlayerType
from .game_state import GameState
from .types import Difficulty, Player
from .utils import setup_logger


def print_initial_state():
    """Print the initial board state and legal moves."""
    state = GameState.initial()

    print("=" * 40)
    print("Mak-Hot - Initial State")
    print("=" * 40)
    print()
    print(state)
    print()

    moves = state.legal_moves()
    print(f"Legal moves for {state.current_player.name}: {len(moves)}")
    print()
    for i, move in enumerate(moves, 1):
        print(f"  {i}. {move}")
    print()


def run_match(args) -> int:
    """Play a headless bot-vs-bot game and print the outcome."""
    engine = Engine(rng=random.Random(args.seed) if args.seed is not None else None)
    engine.set_player_type(Player.RED, PlayerType.BOT, Difficulty(args.red_difficulty))
    engine.set_player_type(Player.BLACK, PlayerType.BOT, Difficulty(args.black_difficulty))

    result = engine.run_match(max_plies=args.max_plies)

    print(result.final_state)
    print()
    if result.winner is None:
        print(f"No winner after {result.total_moves} moves")
    else:
        print(f"{result.winner.name} wins after {result.total_moves} moves")
    return 0


def main(argv=None):
    """Main entry point."""
    config = get_config()
    difficulties = [d.value for d in Difficulty]

    parser = argparse.ArgumentParser(description='Thai Checkers (Mak-Hot) engine')
    parser.add_argument('--test', action='store_true',
                        help='Print the initial board and legal moves')
    parser.add_argument('--match', action='store_true',
                        help='Play a bot-vs-bot game')
    parser.add_argument('--red-difficulty', choices=difficulties, default=config.ai.difficulty,
                        help='Difficulty of the Red bot')
    parser.add_argument('--black-difficulty', choices=difficulties, default=config.ai.difficulty,
                        help='Difficulty of the Black bot')
    parser.add_argument('--max-plies', type=int, default=300,
                        help='Stop the match after this many moves')
    parser.add_argument('--seed', type=int, default=config.ai.seed,
                        help='Random seed for reproducible games')
    parser.add_argument('--log-level', default=config.logging.level,
                        help='Logging level (DEBUG, INFO, WARNING)')
    args = parser.parse_args(argv)

    setup_logger("makhot", log_file=config.logging.log_file or None, level=args.log_level)

    if args.match:
        return run_match(args)

    print_initial_state()
    return 0


if __name__ == "__main__":
    sys.exit(main())
