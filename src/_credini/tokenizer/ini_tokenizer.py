from _credini.tokenizer.token import Token
from _credini.tokenizer.token_kind import TokenKind

SECTION_OPEN = ord("[")
SECTION_CLOSE = ord("]")
EQUALS = ord("=")
NEWLINE = ord("\n")
BLANKS = (ord(" "), ord("\t"))


def as_bytes(data):
    """
    If given a string, encode it as utf-8, otherwise do nothing.
    """
    if isinstance(data, str):
        data = data.encode("utf-8", errors="surrogateescape")
    return bytes(data)


def decode_word(word):
    return word.decode("utf-8", errors="surrogateescape")


class IniTokenizer:
    """
    Iterable of the tokens in a buffer of ini data.

    >>> [t.value for t in IniTokenizer(b"[a]\\nk = v\\n")]
    ['[', 'a', 'k', '=', 'v']

    """

    def __init__(self, data):
        """
        :param data: The bytes of the ini file. Strings are
            encoded as utf-8.
        """
        self.data = as_bytes(data)

    def previous_byte(self, position):
        """
        :returns: The byte before position, the start of the
            buffer counts as a newline.
        """
        if position == 0:
            return NEWLINE
        return self.data[position - 1]

    def __iter__(self):
        word = bytearray()
        word_start = 0
        for position, char in enumerate(self.data):
            if char == SECTION_OPEN:
                yield Token.marker(TokenKind.SECTION_OPEN, position)
                word = bytearray()
                word_start = position + 1
            elif char in (SECTION_CLOSE, EQUALS):
                yield Token(TokenKind.WORD, word_start, decode_word(word))
                word = bytearray()
                word_start = position + 1
                if char == EQUALS:
                    yield Token.marker(TokenKind.EQUALS, position)
            elif char == NEWLINE:
                if self.previous_byte(position) not in (SECTION_CLOSE, NEWLINE):
                    yield Token(TokenKind.WORD, word_start, decode_word(word))
                    word = bytearray()
                word_start = position + 1
            elif char in BLANKS:
                if not word:
                    word_start = position + 1
            else:
                word.append(char)


def tokenize(data):
    """
    :param data: bytes (or str) of an ini file.
    :returns: list of the tokens in data, in the order they occur.
    """
    return list(IniTokenizer(data))
