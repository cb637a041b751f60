"""
Errors raised by the engine on malformed input.

Both are ValueError subclasses so callers that already guard with
`except ValueError` keep working. An empty search result is NOT an error.
"""

from __future__ import annotations


class LengthMismatch(ValueError):
    """Secret, guess, pattern or feedback lengths disagree."""

    def __init__(self, what: str, expected: int, got: int):
        self.what = what
        self.expected = expected
        self.got = got
        super().__init__(f"{what} length mismatch: expected {expected}, got {got}")


class InvalidSymbol(ValueError):
    """A pattern contains a character outside its alphabet."""

    def __init__(self, symbol: str, position: int, allowed: str):
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Invalid pattern character {symbol!r} at position {position} "
            f"(expected one of {allowed})"
        )
