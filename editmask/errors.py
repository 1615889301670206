"""Exceptions raised by the mask compiler."""
from __future__ import annotations


class InvalidMask(ValueError):
    """
    A mask pattern that cannot be compiled.

    Raised for unterminated or empty character sets and malformed ranges.
    ``position`` is the zero-based index in the pattern the problem was
    detected at.
    """

    def __init__(self, reason: str, position: int) -> None:
        super().__init__(f"{reason} at position {position}")
        self.reason = reason
        self.position = position
