from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_settings
from .errors import LoopoverError
from .logging_config import setup_logging
from .notation import parse_moves
from .shuffle import make_rng
from .state import new_game

logger = logging.getLogger(__name__)


def build_parser(default_size: str) -> argparse.ArgumentParser:
    # Moves are not an argparse positional: backward moves such as -2C1 would be
    # read as unknown options. main() collects them from the leftover tokens.
    parser = argparse.ArgumentParser(
        description='Loopover board simulator (programmer notation)',
        usage='%(prog)s [options] [MOVE ...]',
        epilog="Moves are applied in order, e.g. 1R0 -2C1 3r0'",
    )
    parser.add_argument('--size', default=default_size, help='Board size as WxH, WXH or W*H')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for shuffling')
    parser.add_argument('--shuffle', choices=['fast', 'moves'], default=None,
                        help='Shuffle before applying moves: fast tile swaps or random moves')
    parser.add_argument('--iterations', type=int, default=0,
                        help='Random moves for --shuffle moves; 0 uses width + height')
    parser.add_argument('--log-level', default=None, help='Logging level (DEBUG, INFO, ...)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = build_parser(settings.size)
    args, moves = parser.parse_known_args(argv)
    unknown = [t for t in moves if t.startswith('--')]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")

    level = logging.getLevelName(args.log_level.upper()) if args.log_level else settings.log_level
    setup_logging(level if isinstance(level, int) else logging.INFO)

    try:
        state = new_game(args.size)
        if args.shuffle:
            done = state.shuffle(fast=args.shuffle == 'fast', iterations=args.iterations,
                                 rng=make_rng(args.seed))
            if args.shuffle == 'fast':
                print('Fast shuffled board')
            else:
                print(f'Shuffled board with {done} iterations')
        # Parse everything first so a bad token leaves the board untouched.
        for move in parse_moves(' '.join(moves), state.board):
            state.apply(move)
    except LoopoverError as e:
        print(f'error: {e}', file=sys.stderr)
        return 2

    print('Board state:')
    print(state.board.pretty())
    print(f'{state.move_count} moves so far')
    if state.is_solved():
        print('Solved')
    logger.debug('applied %d moves, %d steps', len(moves), state.move_count)
    return 0
