# leutils/tokeniser/errors.py
"""
errors.

Does: Define the error raised when an argument line leaves a double quote open.
Used by: scanner.scan() and everything built on it (Token, Tokeniser).
"""

from __future__ import annotations

__all__ = ["UnclosedQuoteError"]


class UnclosedQuoteError(ValueError):
    """Raise when a quoted span is opened but never closed before end of input."""

    def __init__(self, fragment: str) -> None:
        super().__init__(fragment)
        self.fragment = fragment

    def __str__(self) -> str:
        return f'Expected closing quote for starting quote -> "{self.fragment}'
