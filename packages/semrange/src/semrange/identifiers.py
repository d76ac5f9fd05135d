# SPDX-License-Identifier: MIT
"""Pre-release and build metadata identifiers.

An identifier is one dot-separated segment of the pre-release or build part
of a version. Numeric identifiers compare as integers and always sort before
alphanumeric ones, which compare by ASCII value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .errors import InvalidOperationError, UnexpectedCharacterError
from .lexer import CharType

_IDENTIFIER_CHARS = (CharType.DIGIT, CharType.LETTER, CharType.HYPHEN)
_NUMERIC_FOLLOW = (CharType.DOT, CharType.PLUS, CharType.EOI)


def _decimal_successor(digits: str) -> str:
    # Add one to a digit string, carrying from the right.
    head = digits.rstrip("9")
    nines = len(digits) - len(head)
    if not head:
        return "1" + "0" * nines
    return head[:-1] + str(int(head[-1]) + 1) + "0" * nines


class IdentifierKind(Enum):
    NUMERIC = "numeric"
    ALPHANUMERIC = "alphanumeric"


@dataclass(frozen=True, slots=True)
class Identifier:
    """A single pre-release or build identifier.

    Attributes:
        text: The identifier exactly as written
        kind: NUMERIC for digit-only identifiers, ALPHANUMERIC otherwise
    """

    text: str
    kind: IdentifierKind

    @classmethod
    def classify(cls, text: str, allow_leading_zeros: bool = False, offset: int = 0) -> "Identifier":
        """Create an identifier, deriving its kind from the content.

        Args:
            text: Identifier text, made of ASCII digits, letters and hyphens
            allow_leading_zeros: Accept digit-only text such as ``007``
                (build metadata allows it, pre-release does not)
            offset: Added to error positions

        Raises:
            UnexpectedCharacterError: If the text is empty, contains an
                illegal character or a numeric identifier has a leading zero
        """
        if not text:
            raise UnexpectedCharacterError(None, offset, _IDENTIFIER_CHARS)
        for index, char in enumerate(text):
            if CharType.for_character(char) not in _IDENTIFIER_CHARS:
                raise UnexpectedCharacterError(char, offset + index, _IDENTIFIER_CHARS)

        if all(CharType.DIGIT.matches(char) for char in text):
            if not allow_leading_zeros and len(text) > 1 and text[0] == "0":
                raise UnexpectedCharacterError(text[1], offset + 1, _NUMERIC_FOLLOW)
            return cls(text, IdentifierKind.NUMERIC)
        return cls(text, IdentifierKind.ALPHANUMERIC)

    @property
    def is_numeric(self) -> bool:
        return self.kind is IdentifierKind.NUMERIC

    @property
    def value(self) -> int:
        """Integer value of a numeric identifier."""
        if not self.is_numeric:
            raise InvalidOperationError(f"Identifier {self.text!r} is not numeric")
        return int(self.text)

    def sort_key(self) -> tuple:
        # Digits compare by significant length, then text; build ties ("01" vs "1") by full text.
        if self.is_numeric:
            digits = self.text.lstrip("0")
            return (0, len(digits), digits, self.text)
        return (1, self.text)

    def compare(self, other: "Identifier") -> int:
        """Return -1, 0 or 1 as this identifier sorts before, with or after other."""
        key, other_key = self.sort_key(), other.sort_key()
        if key == other_key:
            return 0
        return -1 if key < other_key else 1

    def successor(self) -> "Identifier":
        """Return the numeric identifier one greater than this one."""
        if not self.is_numeric:
            raise InvalidOperationError(f"Identifier {self.text!r} is not numeric")
        return Identifier(_decimal_successor(self.text.lstrip("0") or "0"), IdentifierKind.NUMERIC)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class MetadataVersion:
    """A non-empty, ordered sequence of identifiers.

    Absent pre-release or build metadata is represented by ``None`` on the
    owning version, never by an empty sequence.
    """

    identifiers: tuple[Identifier, ...]

    def __post_init__(self) -> None:
        if not self.identifiers:
            raise ValueError("Metadata must contain at least one identifier")

    def __str__(self) -> str:
        return ".".join(identifier.text for identifier in self.identifiers)

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self.identifiers)

    def __len__(self) -> int:
        return len(self.identifiers)

    def sort_key(self) -> tuple:
        return tuple(identifier.sort_key() for identifier in self.identifiers)

    def compare(self, other: "MetadataVersion") -> int:
        """Compare identifier by identifier; a strict prefix sorts first."""
        for mine, theirs in zip(self.identifiers, other.identifiers):
            result = mine.compare(theirs)
            if result != 0:
                return result
        if len(self.identifiers) == len(other.identifiers):
            return 0
        return -1 if len(self.identifiers) < len(other.identifiers) else 1

    def increment(self) -> "MetadataVersion":
        """Return a copy with the last numeric identifier incremented by one.

        Raises:
            InvalidOperationError: If no identifier is numeric
        """
        for index in range(len(self.identifiers) - 1, -1, -1):
            identifier = self.identifiers[index]
            if identifier.is_numeric:
                identifiers = list(self.identifiers)
                identifiers[index] = identifier.successor()
                return MetadataVersion(tuple(identifiers))
        raise InvalidOperationError(f"Metadata {str(self)!r} has no numeric identifier to increment")
