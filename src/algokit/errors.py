"""
Error types raised by algokit.

Every error is a ValueError subclass, so callers that only care about
"bad input" can catch ValueError.
"""
from typing import Optional


class AlgoKitError(ValueError):
    """Base class for all algokit input errors."""


class InvalidShape(AlgoKitError):
    """Matrix rows have unequal length (or the array is not 2-D)."""

    def __init__(self, message: str, row: Optional[int] = None,
                 expected: Optional[int] = None, actual: Optional[int] = None):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class InvalidWindowSize(AlgoKitError):
    """Window size is <= 0 or larger than the sequence."""

    def __init__(self, window_size: int, length: int):
        super().__init__(
            f"window size {window_size} is invalid for a sequence of length {length}"
        )
        self.window_size = window_size
        self.length = length


class EmptyInput(AlgoKitError):
    """A zero-length sequence was passed where at least one element is required."""

    def __init__(self, what: str = "sequence"):
        super().__init__(f"{what} must not be empty")
        self.what = what
