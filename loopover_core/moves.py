from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .board import Board
from .errors import IndexOutOfRangeError, ZeroAmountError

logger = logging.getLogger(__name__)


class Axis(Enum):
    ROW = 'R'
    COLUMN = 'C'

    def dimension(self, board: Board) -> int:
        """Length of a line along this axis: width for rows, height for columns."""
        return board.width if self is Axis.ROW else board.height

    def line_count(self, board: Board) -> int:
        """Number of lines along this axis, i.e. the valid index range."""
        return board.height if self is Axis.ROW else board.width


@dataclass(frozen=True)
class Move:
    """
    A rotation of one row or column.

    `index` counts from the top (rows) or the left (columns). The sign of
    `amount` picks the direction; its magnitude is the number of unit
    rotations and is never reduced modulo the line length.
    """
    axis: Axis
    index: int
    amount: int

    @classmethod
    def checked(cls, board: Board, axis: Axis, index: int, amount: int) -> 'Move':
        """Builds a move validated against `board`."""
        text = format_move(cls(axis, index, amount))
        if amount == 0:
            raise ZeroAmountError(f"amount cannot be 0 in move {text!r}", text, '0')
        limit = axis.line_count(board)
        if not 0 <= index < limit:
            raise IndexOutOfRangeError(
                f"index must be in [0, {limit}) in move {text!r}", text, index, limit)
        return cls(axis, index, amount)

    @property
    def steps(self) -> int:
        return abs(self.amount)

    @property
    def forward(self) -> bool:
        return self.amount > 0

    def dimension(self, board: Board) -> int:
        return self.axis.dimension(board)

    def inverse(self) -> 'Move':
        return Move(self.axis, self.index, -self.amount)


def format_move(move: Move) -> str:
    """Canonical notation; the reverse-index apostrophe is never produced."""
    return f"{move.amount}{move.axis.value}{move.index}"


def _rotate_once(board: Board, move: Move) -> None:
    # Positions of the target line, near edge first.
    if move.axis is Axis.ROW:
        line = [board.index(x, move.index) for x in range(board.width)]
    else:
        line = [board.index(move.index, y) for y in range(board.height)]
    if not move.forward:
        line.reverse()
    cells = board.cells
    carry = cells[line[-1]]
    for pos in line:
        cells[pos], carry = carry, cells[pos]


def apply_move(board: Board, move: Move) -> int:
    """
    Applies `move` to `board` in place as |amount| unit rotations and returns
    that step count.

    Forward carries the far-edge value (last column / bottom row) into the
    near edge and shifts the rest one step along; backward does the reverse.
    """
    for _ in range(move.steps):
        _rotate_once(board, move)
    logger.debug("applied %s (%d steps)", format_move(move), move.steps)
    return move.steps
