"""
The parser consumes the list of tokens given by the tokenizer (see
_credini.tokenizer) and generates the sections of the file in the order
they appear.

The tokens of a section are a section open marker, the name of the section
and then a body running up to the next section open marker. Within the body
every ``word = word`` run is a key and its value, anything else is ignored.

A section open marker must be followed by a name, so unlike a plain scan
which would take the second marker of ``[[`` as the name, ``[[`` is rejected
with MalformedSectionError.
"""

from _credini.exceptions import MalformedSectionError
from _credini.section import Section
from _credini.tokenizer.token_kind import TokenKind


class IniParser:
    """
    Parser of the flat ini format used by credentials files, ie.
    an iterable of the sections in the given tokens.

    >>> from _credini.tokenizer import tokenize
    >>> parser = IniParser(tokenize(b"[a]\\nk=v\\n"))
    >>> next(iter(parser))
    Section(name='a', keys={'k': 'v'})

    Repeated keys within a section overwrite earlier values.
    """

    def __init__(self, tokens):
        """
        :param tokens: iterable of tokens, ie. IniTokenizer.
        """
        self.tokens = list(tokens)

    def token_at(self, index):
        """
        :returns: The token at index, or None if index is
            outside the list of tokens.
        """
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def is_word_at(self, index):
        token = self.token_at(index)
        return token is not None and token.kind == TokenKind.WORD

    def parse_name(self, index):
        """
        Parse the name of the section opened by the token
        at index - 1.
        """
        token = self.token_at(index)
        if token is None:
            opener = self.tokens[index - 1]
            raise MalformedSectionError(
                f"Expected section name after '[' at {opener.start}, found end of file"
            )
        if token.kind == TokenKind.SECTION_OPEN:
            raise MalformedSectionError(
                f"Expected section name at {token.start}, found '['"
            )
        return token.value

    def section_end(self, start):
        """
        :returns: The index of the next section open marker
            at or after start, or the number of tokens if there is none.
        """
        end = start
        while (
            end < len(self.tokens)
            and self.tokens[end].kind != TokenKind.SECTION_OPEN
        ):
            end += 1
        return end

    def parse_keys(self, start, end):
        """
        Parse the key value pairs of the section body
        between start and end.

        The key of an equal sign may be the name of the section, as the
        lookback is not limited to the body.
        """
        keys = {}
        for index in range(start, end):
            if self.tokens[index].kind != TokenKind.EQUALS:
                continue
            if (
                index + 1 < end
                and self.is_word_at(index - 1)
                and self.is_word_at(index + 1)
            ):
                keys[self.tokens[index - 1].value] = self.tokens[index + 1].value
        return keys

    def parse_section(self, index):
        """
        Parse the section opened at index.

        :returns: Tuple of the section and the index following it.
        """
        name = self.parse_name(index + 1)
        end = self.section_end(index + 2)
        return Section(name, self.parse_keys(index + 2, end)), end

    def __iter__(self):
        index = 0
        while index < len(self.tokens):
            if self.tokens[index].kind == TokenKind.SECTION_OPEN:
                section, index = self.parse_section(index)
                yield section
            else:
                index += 1


def parse(tokens):
    """
    :param tokens: The tokens of an ini file.
    :returns: list of sections in tokens in the order they appear.
    :raises MalformedSectionError: if a section open marker is
        not followed by a name.
    """
    return list(IniParser(tokens))
