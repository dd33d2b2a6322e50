from dataclasses import dataclass

from _credini.tokenizer.token_kind import TokenKind


@dataclass
class Token:
    """
    A token in an ini file. For marker tokens the value is the
    marker itself, ie. Token(TokenKind.EQUALS, 3, "="), for words
    it is the decoded word, possibly empty.
    """

    kind: TokenKind
    start: int
    value: str = ""

    @classmethod
    def marker(cls, kind, start):
        return cls(kind, start, TokenKind.markers()[kind])
