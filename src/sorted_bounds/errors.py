from __future__ import annotations


class SortedBoundsError(Exception):
    """Base error for sorted_bounds failures."""


class InvalidInputError(SortedBoundsError, ValueError):
    """Input that cannot be searched."""


class UnsortedSequenceError(InvalidInputError):
    """Sequence is not in non-decreasing order."""

    def __init__(self, index: int, message: str | None = None) -> None:
        if message is None:
            message = f"sequence is not sorted at index {index}"
        super().__init__(message)
        self.index = index
