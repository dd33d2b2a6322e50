import pytest

from _credini.exceptions import MalformedSectionError
from _credini.parser import IniParser, parse
from _credini.section import Section
from _credini.tokenizer import Token, TokenKind, tokenize


def parse_text(contents):
    return parse(tokenize(contents))


def test_parse_empty():
    assert parse([]) == []
    assert parse_text(b"") == []


def test_parse_two_sections_in_order():
    assert parse_text(b"[A]\nk=v\n\n[B]\nx=y\n\n") == [
        Section("A", {"k": "v"}),
        Section("B", {"x": "y"}),
    ]


def test_parse_removes_whitespace_in_values():
    assert parse_text(b"[A]\nk = v a l\n\n") == [Section("A", {"k": "val"})]


def test_last_write_wins():
    assert parse_text(b"[A]\nk=1\nk=2\n\n") == [Section("A", {"k": "2"})]


def test_missing_trailing_newline_drops_last_pair():
    assert parse_text(b"[A]\nk=v") == [Section("A", {})]
    assert parse_text(b"[A]\nj=w\nk=v") == [Section("A", {"j": "w"})]


def test_section_without_keys():
    assert parse_text(b"[A]\n\n[B]\nk=v\n") == [
        Section("A", {}),
        Section("B", {"k": "v"}),
    ]


def test_tokens_before_first_section_are_ignored():
    assert parse_text(b"k=v\nstray\n[A]\nx=y\n") == [Section("A", {"x": "y"})]


def test_stray_words_are_ignored():
    assert parse_text(b"[A]\nstray\nk=v\nother\n") == [Section("A", {"k": "v"})]


def test_empty_value():
    assert parse_text(b"[A]\nk=\n") == [Section("A", {"k": ""})]


def test_duplicate_sections_are_kept():
    assert parse_text(b"[A]\nk=1\n[A]\nk=2\n") == [
        Section("A", {"k": "1"}),
        Section("A", {"k": "2"}),
    ]


def test_section_name_may_be_key():
    assert parse_text(b"[a=b\n") == [Section("a", {"a": "b"})]


def test_value_cut_by_section_open_is_ignored():
    assert parse_text(b"[A]\nk=[B]\nx=y\n") == [
        Section("A", {}),
        Section("B", {"x": "y"}),
    ]


def test_equals_accepted_as_name():
    tokens = [
        Token.marker(TokenKind.SECTION_OPEN, 0),
        Token.marker(TokenKind.EQUALS, 1),
        Token(TokenKind.WORD, 2, "k"),
        Token.marker(TokenKind.EQUALS, 3),
        Token(TokenKind.WORD, 4, "v"),
    ]
    assert parse(tokens) == [Section("=", {"k": "v"})]


def test_trailing_section_open_is_malformed():
    with pytest.raises(MalformedSectionError, match="end of file"):
        parse_text(b"[A]\nk=v\n[")


def test_section_open_as_name_is_malformed():
    with pytest.raises(MalformedSectionError, match="at 1"):
        parse_text(b"[[A]\n")


def test_malformed_section_is_value_error():
    with pytest.raises(ValueError):
        parse([Token.marker(TokenKind.SECTION_OPEN, 0)])


def test_parser_is_iterable():
    sections = iter(IniParser(tokenize(b"[A]\n[B]\n")))
    assert next(sections).name == "A"
    assert next(sections).name == "B"
    with pytest.raises(StopIteration):
        next(sections)


def test_key_is_present():
    (section,) = parse_text(b"[A]\nk=v\n")
    assert section.key_is_present("k")
    assert not section.key_is_present("v")
    assert not section.key_is_present("A")
    section["x"] = "y"
    assert section.key_is_present("x")
    assert "x" in section
