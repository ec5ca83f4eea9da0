from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .config import DEFAULT_SIZE
from .moves import Move, apply_move
from .notation import parse_dimensions, parse_move
from .shuffle import move_sequence_shuffle, uniform_swap_shuffle


@dataclass
class GameState:
    """A board plus the number of unit rotations played on it since the last reset."""
    board: Board
    move_count: int = 0

    def play(self, text: str) -> Move:
        """Parses and applies one move. Nothing changes if the move is rejected."""
        move = parse_move(text, self.board)
        self.apply(move)
        return move

    def apply(self, move: Move) -> int:
        steps = apply_move(self.board, move)
        self.move_count += steps
        return steps

    def reset(self) -> None:
        self.board.reset()
        self.move_count = 0

    def shuffle(self, fast: bool = True, iterations: int = 0, rng: Optional[random.Random] = None) -> int:
        if fast:
            return uniform_swap_shuffle(self.board, rng)
        return move_sequence_shuffle(self.board, iterations, rng)

    def is_solved(self) -> bool:
        return self.board.is_solved()


def new_game(size_text: str = '') -> GameState:
    """Starts a solved game from a size string such as "5x5"; empty means the default size."""
    width, height = parse_dimensions(size_text or DEFAULT_SIZE)
    return GameState(board=Board(width, height))
