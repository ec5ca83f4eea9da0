from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

from .errors import BoardSizeError, BoardStateError

Coord = Tuple[int, int]  # (x, y): column, row


@dataclass(eq=False)
class Board:
    """A mutable width x height Loopover board, stored row-major."""
    width: int
    height: int
    cells: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 1:
            raise BoardSizeError('width', self.width)
        if self.height <= 1:
            raise BoardSizeError('height', self.height)
        self.cells = [0] * (self.width * self.height)
        self.reset()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> 'Board':
        """Rebuilds a board from rows of values, checking they are exactly 1..width*height."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        board = cls(width, height)
        flat: List[int] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise BoardStateError(f"row {y} has {len(row)} cells, expected {width}")
            flat.extend(int(v) for v in row)
        if sorted(flat) != list(range(1, width * height + 1)):
            raise BoardStateError(f"cells must hold each of 1..{width * height} exactly once")
        board.cells = flat
        return board

    def index(self, x: int, y: int) -> int:
        """Calculates the 1D index for a given column and row."""
        return y * self.width + x

    def at(self, x: int, y: int) -> int:
        return self.cells[self.index(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        self.cells[self.index(x, y)] = value

    def solved_value(self, x: int, y: int) -> int:
        return x + y * self.width + 1

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates in scan order (row by row)."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def row(self, y: int) -> List[int]:
        start = y * self.width
        return self.cells[start:start + self.width]

    def column(self, x: int) -> List[int]:
        return self.cells[x::self.width]

    def rows(self) -> List[List[int]]:
        return [self.row(y) for y in range(self.height)]

    def reset(self) -> None:
        """Puts every tile back in its solved position."""
        for x, y in self.coords():
            self.set(x, y, self.solved_value(x, y))

    def is_solved(self) -> bool:
        return all(self.at(x, y) == self.solved_value(x, y) for x, y in self.coords())

    def copy(self) -> 'Board':
        other = Board(self.width, self.height)
        other.cells = list(self.cells)
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width, self.height, self.cells) == (other.width, other.height, other.cells)

    def pretty(self) -> str:
        """Generates a human-readable grid, numbers right-aligned to the widest value."""
        pad = len(str(self.width * self.height))
        return "\n".join(
            "".join(f" {v:>{pad}}" for v in self.row(y)) for y in range(self.height)
        )
