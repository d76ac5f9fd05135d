# SPDX-License-Identifier: MIT
"""Unit tests for the version grammar lexer and parser diagnostics."""

import pytest

from semrange import ParseError, UnexpectedCharacterError, parse_version
from semrange.lexer import CharStream, CharType
from semrange.parser import VersionParser, parse_build, parse_pre_release

DIGIT = CharType.DIGIT
LETTER = CharType.LETTER
DOT = CharType.DOT
HYPHEN = CharType.HYPHEN
PLUS = CharType.PLUS
EOI = CharType.EOI


class TestCharType:
    """Tests for character classification."""

    @pytest.mark.parametrize(
        "char, expected",
        [
            ("0", DIGIT),
            ("9", DIGIT),
            ("a", LETTER),
            ("Z", LETTER),
            (".", DOT),
            ("-", HYPHEN),
            ("+", PLUS),
            (None, EOI),
            ("!", CharType.ILLEGAL),
            (" ", CharType.ILLEGAL),
            ("é", CharType.ILLEGAL),
            ("٣", CharType.ILLEGAL),
        ],
    )
    def test_for_character(self, char, expected):
        assert CharType.for_character(char) is expected

    def test_matches(self):
        assert DIGIT.matches("0")
        assert not DIGIT.matches("a")
        assert EOI.matches(None)
        assert not EOI.matches("-")


class TestCharStream:
    """Tests for the character stream."""

    def test_lookahead(self):
        chars = CharStream("1.2")
        assert chars.lookahead() == "1"
        assert chars.lookahead(3) == "2"
        assert chars.lookahead(4) is None

    def test_consume_expected(self):
        chars = CharStream("1.2")
        assert chars.consume(DIGIT) == "1"
        assert chars.position == 1

    def test_consume_unexpected(self):
        chars = CharStream("x", offset=3)
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            chars.consume(DIGIT)
        assert exc_info.value.position == 3
        assert exc_info.value.expected == (DIGIT,)

    def test_positive_lookahead_before(self):
        chars = CharStream("12a.3")
        assert chars.positive_lookahead_before((DOT, EOI), LETTER)
        assert not CharStream("123.a").positive_lookahead_before((DOT, EOI), LETTER)


class TestDiagnostics:
    """Parse failures report the character, its offset and the accepted types."""

    @pytest.mark.parametrize(
        "text, unexpected, position, expected",
        [
            ("", None, 0, (DIGIT,)),
            ("v1.0.0", "v", 0, (DIGIT,)),
            ("1.2", None, 3, (DOT,)),
            ("01.0.0", "1", 1, (DOT,)),
            ("1.0.01", "1", 5, (HYPHEN, PLUS, EOI)),
            ("1.2.3.4", ".", 5, (HYPHEN, PLUS, EOI)),
            ("1.0.0-", None, 6, (DIGIT, LETTER, HYPHEN)),
            ("1.0.0-01", "1", 7, (DOT, PLUS, EOI)),
            ("1.0.0-alpha..1", ".", 12, (DIGIT, LETTER, HYPHEN)),
            ("1.0.0-alpha!", "!", 11, (DOT, PLUS, EOI)),
            ("1.0.0+", None, 6, (DIGIT, LETTER, HYPHEN)),
            ("1.2.3+rc.1+abcdefg", "+", 10, (DOT, EOI)),
        ],
    )
    def test_error_triple(self, text, unexpected, position, expected):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse_version(text)
        error = exc_info.value
        assert error.unexpected == unexpected
        assert error.position == position
        assert error.expected == expected

    def test_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_version("1.0")

    def test_message(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse_version("1.2.3+rc.1+abcdefg")
        assert str(exc_info.value) == (
            "Unexpected character '+' at position 10, expecting [DOT, EOI]"
        )

    def test_end_of_input_message(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse_version("1.2")
        assert str(exc_info.value) == "Unexpected end of input at position 3, expecting [DOT]"

    def test_offset(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            VersionParser("1.x.0", offset=4).parse()
        assert exc_info.value.position == 6


class TestPartParsers:
    """Tests for parsing pre-release and build text on its own."""

    def test_parse_pre_release(self):
        assert str(parse_pre_release("alpha.1")) == "alpha.1"

    def test_parse_pre_release_rejects_build(self):
        with pytest.raises(UnexpectedCharacterError) as exc_info:
            parse_pre_release("alpha+b")
        assert exc_info.value.position == 5
        assert exc_info.value.expected == (DOT, EOI)

    def test_parse_build_allows_leading_zeros(self):
        assert str(parse_build("001.0a")) == "001.0a"

    def test_parse_build_rejects_empty(self):
        with pytest.raises(UnexpectedCharacterError):
            parse_build("")

    def test_parse_returns_parts(self):
        normal, pre_release, build = VersionParser("1.2.3-rc.1+b.2").parse()
        assert str(normal) == "1.2.3"
        assert str(pre_release) == "rc.1"
        assert str(build) == "b.2"
