# leutils/tokeniser/scanner.py
"""
scanner.py.

Does: Single-pass finite-state scan of an argument line into space-separated
      arguments, honouring double-quoted spans and backslash-escaped quotes.
Returns: scan() → tuple of argument strings; raises UnclosedQuoteError.
Used by: Token.tokenise() (escape-aware) and Tokeniser.tokenise() (plain).
"""

from __future__ import annotations

import enum
import logging

from .errors import UnclosedQuoteError

__all__ = ["ScanState", "scan"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

QUOTE = '"'
ESCAPE = "\\"
DELIMITER = " "


class ScanState(enum.Enum):
    NORMAL = enum.auto()
    IN_QUOTES = enum.auto()
    ESCAPED = enum.auto()


class _Scanner:
    """
    Does: Hold the scan state (current state, pending buffer, collected args)
          and apply one transition per character.
    """

    def __init__(self, *, escapes: bool) -> None:
        self.escapes = escapes
        self.state = ScanState.NORMAL
        # State to go back to once an escaped character is consumed
        self._resume = ScanState.NORMAL
        self._buffer: list[str] = []
        self.arguments: list[str] = []

    @property
    def pending(self) -> str:
        return "".join(self._buffer)

    def _flush(self) -> None:
        if self._buffer:
            arg = self.pending
            self.arguments.append(arg)
            self._buffer.clear()
            log.debug("flushed argument %r", arg)

    def step(self, c: str) -> None:
        # Escape check precedes quote toggle and delimiting
        match self.state:
            case ScanState.ESCAPED:
                self._buffer.append(QUOTE if c == QUOTE else ESCAPE + c)
                self.state = self._resume
            case _ if c == ESCAPE and self.escapes:
                self._resume = self.state
                self.state = ScanState.ESCAPED
            case ScanState.NORMAL if c == QUOTE:
                self.state = ScanState.IN_QUOTES
            case ScanState.IN_QUOTES if c == QUOTE:
                self.state = ScanState.NORMAL
                self._flush()
            case ScanState.NORMAL if c == DELIMITER:
                self._flush()
            case _:
                self._buffer.append(c)

    def finish(self) -> tuple[str, ...]:
        if self.state is ScanState.ESCAPED:
            # Lone trailing backslash is kept literally
            self._buffer.append(ESCAPE)
            self.state = self._resume

        fragment = self.pending
        self._flush()

        if self.state is ScanState.IN_QUOTES:
            log.debug("unclosed quote, dangling fragment %r", fragment)
            raise UnclosedQuoteError(fragment)

        return tuple(self.arguments)


def scan(text: str, *, escapes: bool = True) -> tuple[str, ...]:
    """
    Does: Split `text` (trimmed first) on ASCII spaces outside double quotes.
          With escapes=True a backslash before '"' yields a literal quote;
          a backslash before anything else is kept as-is.
    Returns: Tuple of arguments in input order.
    Raises: UnclosedQuoteError if a quoted span is still open at end of input.
    """
    scanner = _Scanner(escapes=escapes)
    for c in text.strip():
        scanner.step(c)
    return scanner.finish()
