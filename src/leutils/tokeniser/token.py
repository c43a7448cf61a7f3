# leutils/tokeniser/token.py
"""
token.py.

Does: Immutable result of tokenising one argument line: the arguments in
      input order plus the flags and options picked out of them once, at
      construction time.
Returns: tokenise() / Token.tokenise() → Token; raises UnclosedQuoteError.
Used by: CLI dispatchers that feed raw command lines and inspect the result.

Example:
    >>> t = tokenise('mkdir "location/of folder" -p --verbose')
    >>> t.arguments
    ('mkdir', 'location/of folder', '-p', '--verbose')
    >>> t.flags, t.options
    (('-p',), ('--verbose',))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

from leutils.utils.log import debug

from .classify import FLAG_PREFIX, OPTION_PREFIX, select_flags, select_options
from .scanner import scan

__all__ = ["Token", "tokenise"]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)


def _checked(seq: Sequence[str], index: int, what: str) -> str:
    """Does: Fetch seq[index], refusing negative and out-of-range indexes."""
    if index < 0 or index >= len(seq):
        raise IndexError(f"{what} index {index} out of range for length {len(seq)}")
    return seq[index]


class Token:
    """
    Collected space-separated arguments of a single input string.

    Equality and hashing only look at the arguments; flags and options are
    derived from them and never change after construction.
    """

    __slots__ = ("_arguments", "_flags", "_options")

    def __init__(self, arguments: Iterable[str]) -> None:
        args = tuple(arguments)
        object.__setattr__(self, "_arguments", args)
        object.__setattr__(self, "_flags", select_flags(args))
        object.__setattr__(self, "_options", select_options(args))

    @classmethod
    def tokenise(cls, text: str) -> Token:
        """
        Does: Scan `text` into arguments. Spaces split arguments except inside
              double quotes; \\" is a literal quote that never toggles quoting.
        Returns: New Token.
        Raises: UnclosedQuoteError if a double quote is left open.
        """
        debug(f"tokenise {text!r}", topic="tokeniser")
        token = cls(scan(text, escapes=True))
        log.debug("tokenised %d argument(s), %d flag(s), %d option(s)",
                  len(token._arguments), len(token._flags), len(token._options))
        return token

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ── Arguments ────────────────────────────────────────────────────────────

    @property
    def arguments(self) -> tuple[str, ...]:
        return self._arguments

    def number_of_arguments(self) -> int:
        return len(self._arguments)

    def is_empty(self) -> bool:
        return not self._arguments

    def has_exactly(self, n: int) -> bool:
        """Does: True iff exactly `n` arguments were found."""
        return len(self._arguments) == n

    def argument_at(self, index: int) -> str:
        return _checked(self._arguments, index, "argument")

    def first_argument(self) -> str:
        return _checked(self._arguments, 0, "argument")

    def last_argument(self) -> str:
        return _checked(self._arguments, len(self._arguments) - 1, "argument")

    def path_from_argument(self, index: int) -> Path:
        """
        Does: Build a filesystem path from the argument at `index`.
        Returns: Path; existence and validity are NOT checked, callers validate.
        """
        return Path(self.argument_at(index))

    # ── Flags & options ──────────────────────────────────────────────────────

    @property
    def flags(self) -> tuple[str, ...]:
        return self._flags

    @property
    def options(self) -> tuple[str, ...]:
        return self._options

    def flag_at(self, index: int, include_dash_prefix: bool = True) -> str:
        flag = _checked(self._flags, index, "flag")
        return flag if include_dash_prefix else flag[len(FLAG_PREFIX):]

    def flag_value_at(self, index: int) -> str:
        """Does: Return the letter right after the dash, e.g. "f" for "-fad"."""
        return self.flag_at(index, include_dash_prefix=False)[0]

    def option_at(self, index: int, include_dash_prefix: bool = True) -> str:
        option = _checked(self._options, index, "option")
        return option if include_dash_prefix else option[len(OPTION_PREFIX):]

    # ── Dunder protocol ──────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._arguments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._arguments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._arguments == other._arguments

    def __hash__(self) -> int:
        return hash(self._arguments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(arguments={list(self._arguments)!r})"


def tokenise(text: str) -> Token:
    """Does: Shortcut for Token.tokenise(text)."""
    return Token.tokenise(text)
