"""
Main script to play Othello against the computer, or watch it play itself.
"""
import os
import sys
import argparse
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, PLAYER_KINDS, get_default_config
from othello.logger import setup_logger
from othello.game.game import (AIMover, HumanMover, InputRetriesExceeded, ReversiGame,
                               describe_result, render_board)
from othello.search.minimax import AlphaBetaSearch


def build_mover(kind: str, config: Config):
    """Create the mover for one side."""
    if kind == "ai":
        return AIMover(AlphaBetaSearch.from_config(config.search),
                       trace_depth=config.search.trace_depth,
                       trace_file=config.search.trace_file)
    return HumanMover(max_retries=config.game.max_input_retries)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Play Othello')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--white', choices=PLAYER_KINDS, default=None,
                        help='Who plays white')
    parser.add_argument('--black', choices=PLAYER_KINDS, default=None,
                        help='Who plays black')
    parser.add_argument('--depth', type=int, default=None,
                        help='Search depth in plies for computer players')
    parser.add_argument('--trace-file', type=str, default=None,
                        help='Write the outline of each computer search to this file')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, ...)')
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file and apply command line overrides on top of it."""
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    if args.white:
        config.game.white = args.white
    if args.black:
        config.game.black = args.black
    if args.depth is not None:
        config.search.depth = args.depth
    if args.trace_file:
        config.search.trace_file = args.trace_file
    if args.log_level:
        config.logging.log_level = args.log_level
    return config


def main(argv=None):
    """Play one game with the specified configuration."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args)

    try:
        config.validate()
    except ValueError as exc:
        parser.error(str(exc))

    logger = setup_logger(config)
    game = ReversiGame(build_mover(config.game.white, config),
                       build_mover(config.game.black, config),
                       logger=logger, display=print)

    print("White moves first! Type a move as row then column letters, e.g. 'cd'.")
    try:
        result = game.play()
    except (KeyboardInterrupt, InputRetriesExceeded) as exc:
        print(f"\nGame stopped: {str(exc) or 'interrupted'}")
        result = game.result()
        print(render_board(result.board))
    finally:
        logger.close()

    print(describe_result(result))


if __name__ == "__main__":
    main()
