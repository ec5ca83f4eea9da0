from __future__ import annotations

# Facade module that re-exports Loopover core functionality.
# Used by the Flask app and tests; single-responsibility modules live
# under loopover_core/*.

from loopover_core.board import Board, Coord
from loopover_core.errors import (
    BoardSizeError,
    BoardStateError,
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidAmountError,
    InvalidAxisError,
    InvalidHeightError,
    InvalidIndexError,
    InvalidWidthError,
    LoopoverError,
    MissingAmountError,
    MissingAxisError,
    MissingIndexError,
    NoSeparatorError,
    NotationError,
    ParseErrorKind,
    ZeroAmountError,
)
from loopover_core.moves import Axis, Move, apply_move, format_move
from loopover_core.notation import parse_dimensions, parse_move, parse_moves
from loopover_core.shuffle import make_rng, move_sequence_shuffle, random_move, uniform_swap_shuffle
from loopover_core.state import GameState, new_game

__all__ = [
    'Axis',
    'Board',
    'BoardSizeError',
    'BoardStateError',
    'Coord',
    'EmptyInputError',
    'GameState',
    'IndexOutOfRangeError',
    'InvalidAmountError',
    'InvalidAxisError',
    'InvalidHeightError',
    'InvalidIndexError',
    'InvalidWidthError',
    'LoopoverError',
    'MissingAmountError',
    'MissingAxisError',
    'MissingIndexError',
    'Move',
    'NoSeparatorError',
    'NotationError',
    'ParseErrorKind',
    'ZeroAmountError',
    'apply_move',
    'format_move',
    'make_rng',
    'move_sequence_shuffle',
    'new_game',
    'parse_dimensions',
    'parse_move',
    'parse_moves',
    'random_move',
    'uniform_swap_shuffle',
]


def main() -> None:
    # CLI driver delegated to loopover_core.cli
    from loopover_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
