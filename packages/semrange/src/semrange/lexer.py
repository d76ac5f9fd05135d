# SPDX-License-Identifier: MIT
"""Character classification and streaming for the version grammar.

Version text is consumed one character at a time. Each character is
classified into a :class:`CharType`; the parser asks the stream for the types
it can accept and the stream reports a positioned error otherwise.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .errors import UnexpectedCharacterError

_DIGITS = frozenset("0123456789")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


class CharType(Enum):
    """Classes of characters recognized by the version grammar."""

    DIGIT = "digit"
    LETTER = "letter"
    DOT = "dot"
    HYPHEN = "hyphen"
    PLUS = "plus"
    EOI = "end of input"
    ILLEGAL = "illegal"

    def matches(self, char: Optional[str]) -> bool:
        """Return True if the character (None for end of input) is of this type."""
        return CharType.for_character(char) is self

    @classmethod
    def for_character(cls, char: Optional[str]) -> "CharType":
        """Classify a single character; None stands for the end of input."""
        if char is None:
            return cls.EOI
        if char in _DIGITS:
            return cls.DIGIT
        if char in _LETTERS:
            return cls.LETTER
        if char == ".":
            return cls.DOT
        if char == "-":
            return cls.HYPHEN
        if char == "+":
            return cls.PLUS
        return cls.ILLEGAL


class CharStream:
    """A cursor over version text with typed lookahead.

    Args:
        text: The text to stream
        offset: Added to every reported position, for text embedded in a
            larger input
    """

    def __init__(self, text: str, offset: int = 0) -> None:
        self.text = text
        self.offset = offset
        self._index = 0

    @property
    def position(self) -> int:
        """Absolute position of the next character."""
        return self._index + self.offset

    def lookahead(self, distance: int = 1) -> Optional[str]:
        """Return the character ``distance`` places ahead, or None past the end."""
        index = self._index + distance - 1
        if index < len(self.text):
            return self.text[index]
        return None

    def lookahead_type(self, distance: int = 1) -> CharType:
        return CharType.for_character(self.lookahead(distance))

    def positive_lookahead(self, *expected: CharType) -> bool:
        """Return True if the next character is of one of the expected types."""
        return self.lookahead_type() in expected

    def positive_lookahead_before(self, boundary: tuple[CharType, ...], *expected: CharType) -> bool:
        """Return True if an expected type occurs before the nearest boundary type."""
        distance = 1
        while True:
            char_type = self.lookahead_type(distance)
            if char_type in boundary or char_type is CharType.EOI:
                return False
            if char_type in expected:
                return True
            distance += 1

    def consume(self, *expected: CharType) -> Optional[str]:
        """Consume the next character, which must be of one of the expected types.

        Raises:
            UnexpectedCharacterError: If the next character is of another type
        """
        char = self.lookahead()
        if expected and CharType.for_character(char) not in expected:
            raise UnexpectedCharacterError(char, self.position, expected)
        if char is not None:
            self._index += 1
        return char

    def error(self, *expected: CharType, distance: int = 1) -> UnexpectedCharacterError:
        """Build an error for the character ``distance`` places ahead."""
        return UnexpectedCharacterError(
            self.lookahead(distance), self.position + distance - 1, expected
        )
