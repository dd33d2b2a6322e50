"""
The tokenizer turns the raw bytes of an ini file into a flat list of tokens:
section open markers, words and equal signs. Closing brackets and newlines
only delimit words, they never become tokens themselves.

Whitespace (space and tab) is dropped wherever it occurs, so ``k = v a l``
gives the words ``k`` and ``val``. A word is only emitted when it is
delimited, there is no flush at end of input, ie. a last line without a
terminating newline loses its final word.

The tokenizer accepts any input and never raises.
"""

from .ini_tokenizer import IniTokenizer, tokenize
from .token import Token
from .token_kind import TokenKind

__all__ = ["IniTokenizer", "Token", "TokenKind", "tokenize"]
