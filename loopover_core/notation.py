from __future__ import annotations

import re
from typing import List, Tuple

from .board import Board
from .errors import (
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidAmountError,
    InvalidAxisError,
    InvalidHeightError,
    InvalidIndexError,
    InvalidWidthError,
    MissingAmountError,
    MissingAxisError,
    MissingIndexError,
    NoSeparatorError,
    NotationError,
    ZeroAmountError,
)
from .moves import Axis, Move

# Programmer's notation for a move:
#
#   move   = amount axis index [ "'" ]
#   amount = [ "-" ] digit { digit }        ; amount != 0
#   axis   = "R" | "r" | "C" | "c"
#   index  = digit { digit }
#
# A trailing apostrophe counts the index from the far edge (bottom row or
# right column) instead of the near one.

REVERSE_INDEX_MARK = "'"
DIMENSION_SEPARATORS = 'xX*'

_AXES = {'r': Axis.ROW, 'c': Axis.COLUMN}
_SIGNED = re.compile(r'-?[0-9]+')
_UNSIGNED = re.compile(r'[0-9]+')
_TOKEN_SPLIT = re.compile(r'[\s,]+')


def _find_axis(text: str) -> int:
    for i, ch in enumerate(text):
        if ch.isalpha():
            return i
    return -1


def parse_move(text: str, board: Board) -> Move:
    """Parses one move in programmer's notation, validated against `board`'s dimensions."""
    if not text:
        raise EmptyInputError("empty input", text)

    ai = _find_axis(text)
    if ai == -1:
        raise MissingAxisError(f"no move character in move {text!r}", text)
    marker = text[ai]
    axis = _AXES.get(marker.lower())
    if axis is None:
        raise InvalidAxisError(f"invalid move character {marker!r} in move {text!r}", text, marker)

    amount_str = text[:ai]
    if not amount_str:
        raise MissingAmountError(f"missing amount in move {text!r}", text)
    if not _SIGNED.fullmatch(amount_str):
        raise InvalidAmountError(f"invalid number for amount in move {text!r}", text, amount_str)
    amount = int(amount_str)
    if amount == 0:
        raise ZeroAmountError(f"amount cannot be 0 in move {text!r}", text, amount_str)

    index_str = text[ai + 1:]
    reverse_index = text.endswith(REVERSE_INDEX_MARK)
    if reverse_index:
        index_str = index_str[:-1]
    if not index_str:
        raise MissingIndexError(f"missing index in move {text!r}", text)
    if not _UNSIGNED.fullmatch(index_str):
        raise InvalidIndexError(f"invalid number for index in move {text!r}", text, index_str)
    index = int(index_str)

    limit = axis.line_count(board)
    if reverse_index:
        index = limit - 1 - index
    if not 0 <= index < limit:
        raise IndexOutOfRangeError(
            f"index must be in [0, {limit}) in move {text!r}", text, index, limit)

    return Move(axis=axis, index=index, amount=amount)


def parse_moves(text: str, board: Board) -> List[Move]:
    """Parses a whitespace or comma separated sequence of moves; the first bad token raises."""
    moves: List[Move] = []
    tokens = [t for t in _TOKEN_SPLIT.split(text) if t]
    for position, token in enumerate(tokens):
        try:
            moves.append(parse_move(token, board))
        except NotationError as e:
            e.position = position
            raise
    return moves


def parse_dimensions(text: str) -> Tuple[int, int]:
    """
    Converts "WIDTHxHEIGHT", "WIDTHXHEIGHT" or "WIDTH*HEIGHT" into (width, height).
    Sizes are not range-checked here; Board does that.
    """
    if not text:
        raise EmptyInputError("empty input", text)
    split_at = next((i for i, ch in enumerate(text) if ch in DIMENSION_SEPARATORS), -1)
    if split_at == -1:
        raise NoSeparatorError(f"{text!r} doesn't seem to be a valid dimension", text)
    width_str, height_str = text[:split_at], text[split_at + 1:]
    if not _SIGNED.fullmatch(width_str):
        raise InvalidWidthError(f"invalid width {width_str!r} in {text!r}", text, width_str)
    if not _SIGNED.fullmatch(height_str):
        raise InvalidHeightError(f"invalid height {height_str!r} in {text!r}", text, height_str)
    return int(width_str), int(height_str)
