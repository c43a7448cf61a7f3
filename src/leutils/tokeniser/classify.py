# leutils/tokeniser/classify.py
# ──────────────────────────────────────────────────────────────
# Flag / option classification of scanned arguments
# ──────────────────────────────────────────────────────────────
"""
classify.

Does: Tell flags ("-x…", single dash then an ASCII letter) from options
      ("--…", double dash) and pick them out of an argument sequence.
Returns: is_flag(), is_option(), select_flags(), select_options().
Used by: Token construction (computed once, stored alongside the arguments).
"""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = [
    "FLAG_PREFIX",
    "OPTION_PREFIX",
    "is_flag",
    "is_option",
    "select_flags",
    "select_options",
]

FLAG_PREFIX = "-"
OPTION_PREFIX = "--"

# Single dash, then an ASCII letter; "--x" never matches since '-' is not a letter
_FLAG_RE = re.compile(r"-[A-Za-z]")


def is_flag(arg: str) -> bool:
    """Does: True for "-a", "-fad"; False for "-", "-2", "-#", "--a"."""
    return _FLAG_RE.match(arg) is not None


def is_option(arg: str) -> bool:
    """Does: True for anything starting with "--", whatever follows."""
    return arg.startswith(OPTION_PREFIX)


def select_flags(arguments: Iterable[str]) -> tuple[str, ...]:
    return tuple(a for a in arguments if is_flag(a))


def select_options(arguments: Iterable[str]) -> tuple[str, ...]:
    return tuple(a for a in arguments if is_option(a))
