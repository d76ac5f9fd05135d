# SPDX-License-Identifier: MIT
"""Recursive-descent parser for the SemVer 2.0.0 grammar.

Grammar::

    version      := normal ("-" preRelease)? ("+" build)?
    normal       := numericId "." numericId "." numericId
    numericId    := "0" | nonZeroDigit digit*
    preRelease   := preReleaseId ("." preReleaseId)*
    preReleaseId := alphanumericId | numericId
    build        := buildId ("." buildId)*
    buildId      := (digit | letter | "-")+

The parser never recovers: the first unexpected character aborts parsing with
an :class:`~semrange.errors.UnexpectedCharacterError` naming the character,
its offset and the character types accepted there.
"""

from __future__ import annotations

from typing import Optional

from .identifiers import Identifier, MetadataVersion
from .lexer import CharStream, CharType
from .normal import NormalVersion, component_from_digits

DIGIT = CharType.DIGIT
LETTER = CharType.LETTER
DOT = CharType.DOT
HYPHEN = CharType.HYPHEN
PLUS = CharType.PLUS
EOI = CharType.EOI

_IDENTIFIER_CHARS = (DIGIT, LETTER, HYPHEN)


class VersionParser:
    """Parses version text, or its pre-release and build parts on their own.

    Args:
        text: The text to parse
        offset: Added to every reported error position
    """

    def __init__(self, text: str, offset: int = 0) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Version must be a string, got {type(text).__name__}")
        self.chars = CharStream(text, offset)

    def parse(self) -> tuple[NormalVersion, Optional[MetadataVersion], Optional[MetadataVersion]]:
        """Parse a complete version into its normal, pre-release and build parts."""
        normal = self._normal()
        pre_release = None
        build = None

        separator = self.chars.consume(HYPHEN, PLUS, EOI)
        if separator == "-":
            pre_release = self._pre_release()
            separator = self._end_of(DOT, PLUS, EOI, accept=(PLUS, EOI))
        if separator == "+":
            build = self._build()
            self._end_of(DOT, EOI, accept=(EOI,))
        return normal, pre_release, build

    def parse_pre_release(self) -> MetadataVersion:
        """Parse text consisting of a pre-release part only."""
        pre_release = self._pre_release()
        self._end_of(DOT, EOI, accept=(EOI,))
        return pre_release

    def parse_build(self) -> MetadataVersion:
        """Parse text consisting of build metadata only."""
        build = self._build()
        self._end_of(DOT, EOI, accept=(EOI,))
        return build

    def _end_of(self, *expected: CharType, accept: tuple[CharType, ...]) -> Optional[str]:
        # Report the full follow set while only consuming what ends the part.
        if not self.chars.positive_lookahead(*accept):
            raise self.chars.error(*expected)
        return self.chars.consume()

    def _normal(self) -> NormalVersion:
        major = self._numeric_identifier(DOT)
        self.chars.consume(DOT)
        minor = self._numeric_identifier(DOT)
        self.chars.consume(DOT)
        patch = self._numeric_identifier(HYPHEN, PLUS, EOI)
        return NormalVersion(
            component_from_digits(major, "major"),
            component_from_digits(minor, "minor"),
            component_from_digits(patch, "patch"),
        )

    def _pre_release(self) -> MetadataVersion:
        identifiers = [self._pre_release_identifier()]
        while self.chars.positive_lookahead(DOT):
            self.chars.consume(DOT)
            identifiers.append(self._pre_release_identifier())
        return MetadataVersion(tuple(identifiers))

    def _pre_release_identifier(self) -> Identifier:
        self._check_for_empty_identifier()
        start = self.chars.position
        if self.chars.positive_lookahead_before((DOT, PLUS, EOI), LETTER, HYPHEN):
            text = self._alphanumeric_identifier()
        else:
            text = self._numeric_identifier(DOT, PLUS, EOI)
        return Identifier.classify(text, offset=start)

    def _build(self) -> MetadataVersion:
        identifiers = [self._build_identifier()]
        while self.chars.positive_lookahead(DOT):
            self.chars.consume(DOT)
            identifiers.append(self._build_identifier())
        return MetadataVersion(tuple(identifiers))

    def _build_identifier(self) -> Identifier:
        self._check_for_empty_identifier()
        start = self.chars.position
        text = self._alphanumeric_identifier()
        return Identifier.classify(text, allow_leading_zeros=True, offset=start)

    def _alphanumeric_identifier(self) -> str:
        chars = [self.chars.consume(*_IDENTIFIER_CHARS)]
        while self.chars.positive_lookahead(*_IDENTIFIER_CHARS):
            chars.append(self.chars.consume())
        return "".join(chars)

    def _numeric_identifier(self, *follow: CharType) -> str:
        if self.chars.lookahead() == "0" and self.chars.lookahead_type(2) is DIGIT:
            raise self.chars.error(*follow, distance=2)
        digits = [self.chars.consume(DIGIT)]
        while self.chars.positive_lookahead(DIGIT):
            digits.append(self.chars.consume())
        return "".join(digits)

    def _check_for_empty_identifier(self) -> None:
        if not self.chars.positive_lookahead(*_IDENTIFIER_CHARS):
            raise self.chars.error(*_IDENTIFIER_CHARS)


def parse_valid_semver(
    text: str, offset: int = 0
) -> tuple[NormalVersion, Optional[MetadataVersion], Optional[MetadataVersion]]:
    return VersionParser(text, offset).parse()


def parse_pre_release(text: str) -> MetadataVersion:
    """Parse a pre-release string such as ``alpha.1``."""
    return VersionParser(text).parse_pre_release()


def parse_build(text: str) -> MetadataVersion:
    """Parse a build metadata string such as ``build.007``."""
    return VersionParser(text).parse_build()
