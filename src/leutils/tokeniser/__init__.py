# leutils/tokeniser/__init__.py
"""
tokeniser.
=========

Does: Split a command-line-style string into arguments and classify them.
Exports: tokenise, Token, Tokeniser, UnclosedQuoteError,
         scan, ScanState, is_flag, is_option
Used by: CLI dispatchers consuming raw command lines.
"""

from __future__ import annotations

from .classify import (
    is_flag,
    is_option,
)
from .errors import UnclosedQuoteError
from .plain import Tokeniser
from .scanner import (
    ScanState,
    scan,
)
from .token import (
    Token,
    tokenise,
)

__all__ = [
    # token
    "Token",
    "tokenise",
    "Tokeniser",
    # errors
    "UnclosedQuoteError",
    # scanning & classification
    "scan",
    "ScanState",
    "is_flag",
    "is_option",
]
