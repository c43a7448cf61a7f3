# leutils/tokeniser/plain.py
"""
plain.py.

Does: Quote-aware but escape-unaware tokeniser kept for callers of the older
      API: a backslash is an ordinary character and no flag/option
      classification is done.
Returns: Tokeniser.tokenise() → Tokeniser; raises UnclosedQuoteError.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from leutils.utils.log import debug

from .scanner import scan

__all__ = ["Tokeniser"]


class Tokeniser:
    __slots__ = ("_arguments",)

    def __init__(self, arguments: tuple[str, ...]) -> None:
        object.__setattr__(self, "_arguments", tuple(arguments))

    @classmethod
    def tokenise(cls, text: str) -> Tokeniser:
        debug(f"plain tokenise {text!r}", topic="tokeniser")
        return cls(scan(text, escapes=False))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def arguments(self) -> tuple[str, ...]:
        return self._arguments

    def number_of_arguments(self) -> int:
        return len(self._arguments)

    def is_empty(self) -> bool:
        return not self._arguments

    def __len__(self) -> int:
        return len(self._arguments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._arguments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tokeniser):
            return NotImplemented
        return self._arguments == other._arguments

    def __hash__(self) -> int:
        return hash(self._arguments)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(arguments={list(self._arguments)!r})"
