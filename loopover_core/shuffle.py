from __future__ import annotations

import logging
import random
from typing import Optional

from .board import Board
from .moves import Axis, Move, apply_move

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Creates an independent random source; pass a seed for reproducible shuffles."""
    return random.Random(seed)


def uniform_swap_shuffle(board: Board, rng: Optional[random.Random] = None) -> int:
    """
    Visits every tile in scan order and swaps it with a randomly picked
    different tile. Fast, but later swaps can partly undo earlier ones, so the
    result is not a uniformly random permutation. Returns the number of swaps.
    """
    rng = rng or make_rng()
    swaps = 0
    for x1, y1 in board.coords():
        x2, y2 = x1, y1
        while (x2, y2) == (x1, y1):
            x2 = rng.randrange(board.width)
            y2 = rng.randrange(board.height)
        a, b = board.index(x1, y1), board.index(x2, y2)
        board.cells[a], board.cells[b] = board.cells[b], board.cells[a]
        swaps += 1
    logger.debug("swap-shuffled %dx%d board (%d swaps)", board.width, board.height, swaps)
    return swaps


def random_move(board: Board, rng: random.Random) -> Move:
    """Picks a forward move on a random line by 1..dimension-1 steps."""
    axis = Axis.ROW if rng.randrange(2) == 0 else Axis.COLUMN
    index = rng.randrange(axis.line_count(board))
    amount = rng.randrange(axis.dimension(board) - 1) + 1
    return Move(axis=axis, index=index, amount=amount)


def move_sequence_shuffle(board: Board, iterations: int = 0, rng: Optional[random.Random] = None) -> int:
    """
    Shuffles by applying `iterations` random moves, the way a person would
    scramble the puzzle by hand. `iterations <= 0` means width + height.
    Returns the number of moves applied.
    """
    rng = rng or make_rng()
    if iterations <= 0:
        iterations = board.width + board.height
    for _ in range(iterations):
        apply_move(board, random_move(board, rng))
    logger.debug("move-shuffled %dx%d board (%d moves)", board.width, board.height, iterations)
    return iterations
