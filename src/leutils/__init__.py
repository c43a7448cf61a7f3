"""
leutils
=======

Does: Root package initializer for the leutils utility library.
Returns: Re-exports the argument tokeniser (`tokenise`, `Token`, `Tokeniser`,
         `UnclosedQuoteError`) from `leutils.tokeniser`.
Used by: All imports starting from `leutils.*`.
"""

from __future__ import annotations

from .tokeniser import Token, Tokeniser, UnclosedQuoteError, tokenise

__all__: list[str] = ["Token", "Tokeniser", "UnclosedQuoteError", "tokenise"]
__version__ = "1.0.0"
__docformat__ = "google"
