from __future__ import annotations

from enum import Enum
from typing import Optional


class LoopoverError(ValueError):
    """Base class for every error raised by the Loopover core."""


class BoardSizeError(LoopoverError):
    """Raised when a board is created with a dimension of 1 or less."""

    def __init__(self, name: str, value: int):
        super().__init__(f"board {name} must be greater than 1, got {value}")
        self.name = name
        self.value = value


class BoardStateError(LoopoverError):
    """Raised when cell values do not form the set 1..width*height."""


class ParseErrorKind(Enum):
    EMPTY_INPUT = 'EmptyInput'
    MISSING_AXIS = 'MissingAxis'
    INVALID_AXIS = 'InvalidAxis'
    MISSING_AMOUNT = 'MissingAmount'
    INVALID_AMOUNT = 'InvalidAmount'
    ZERO_AMOUNT = 'ZeroAmount'
    MISSING_INDEX = 'MissingIndex'
    INVALID_INDEX = 'InvalidIndex'
    INDEX_OUT_OF_RANGE = 'IndexOutOfRange'
    NO_SEPARATOR = 'NoSeparator'
    INVALID_WIDTH = 'InvalidWidth'
    INVALID_HEIGHT = 'InvalidHeight'


class NotationError(LoopoverError):
    """
    A move or size string was rejected.

    `text` is the whole input, `fragment` the part that failed to parse.
    """
    kind: ParseErrorKind
    position: Optional[int] = None  # token number when parsed from a sequence

    def __init__(self, message: str, text: str, fragment: Optional[str] = None):
        super().__init__(message)
        self.text = text
        self.fragment = fragment


class EmptyInputError(NotationError):
    kind = ParseErrorKind.EMPTY_INPUT


class MissingAxisError(NotationError):
    kind = ParseErrorKind.MISSING_AXIS


class InvalidAxisError(NotationError):
    kind = ParseErrorKind.INVALID_AXIS


class MissingAmountError(NotationError):
    kind = ParseErrorKind.MISSING_AMOUNT


class InvalidAmountError(NotationError):
    kind = ParseErrorKind.INVALID_AMOUNT


class ZeroAmountError(NotationError):
    kind = ParseErrorKind.ZERO_AMOUNT


class MissingIndexError(NotationError):
    kind = ParseErrorKind.MISSING_INDEX


class InvalidIndexError(NotationError):
    kind = ParseErrorKind.INVALID_INDEX


class IndexOutOfRangeError(NotationError):
    kind = ParseErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, message: str, text: str, index: int, limit: int):
        super().__init__(message, text, str(index))
        self.index = index
        self.limit = limit


class NoSeparatorError(NotationError):
    kind = ParseErrorKind.NO_SEPARATOR


class InvalidWidthError(NotationError):
    kind = ParseErrorKind.INVALID_WIDTH


class InvalidHeightError(NotationError):
    kind = ParseErrorKind.INVALID_HEIGHT
