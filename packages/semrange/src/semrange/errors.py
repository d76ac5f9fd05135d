# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing versions and constraint expressions.

Lexical and syntax failures share the :class:`ParseError` base so callers can
catch them uniformly. Invalid state transitions on values (such as
incrementing absent metadata) raise :class:`InvalidOperationError`, which is
deliberately not a parse error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .expr.lexer import Token, TokenType
    from .lexer import CharType


class ParseError(Exception):
    """Raised when version or constraint text cannot be parsed."""

    pass


def _format_expected(expected: Sequence[object]) -> str:
    return "[" + ", ".join(getattr(e, "name", str(e)) for e in expected) + "]"


class UnexpectedCharacterError(ParseError):
    """Raised when a character of an unexpected type is met in version text.

    Attributes:
        unexpected: The offending character, or None at end of input
        position: Zero-based offset of the offending character
        expected: Character types that would have been accepted
    """

    def __init__(
        self,
        unexpected: Optional[str],
        position: int,
        expected: Sequence["CharType"] = (),
    ):
        self.unexpected = unexpected
        self.position = position
        self.expected = tuple(expected)
        super().__init__(self._create_message())

    def _create_message(self) -> str:
        if self.unexpected is None:
            message = f"Unexpected end of input at position {self.position}"
        else:
            message = f"Unexpected character {self.unexpected!r} at position {self.position}"
        if self.expected:
            message += f", expecting {_format_expected(self.expected)}"
        return message


class LexerError(ParseError):
    """Raised when a constraint expression contains an illegal character.

    Attributes:
        expression: The full expression text
        position: Zero-based offset of the illegal character
        character: The illegal character
    """

    def __init__(self, expression: str, position: int):
        self.expression = expression
        self.position = position
        self.character = expression[position]
        super().__init__(
            f"Illegal character {self.character!r} at position {position} in {expression!r}"
        )


class UnexpectedTokenError(ParseError):
    """Raised when a token does not fit the constraint grammar at its position.

    Attributes:
        token: The offending token
        expected: Token types that would have been accepted
    """

    def __init__(self, token: "Token", expected: Sequence["TokenType"] = ()):
        self.token = token
        self.expected = tuple(expected)
        super().__init__(self._create_message())

    @property
    def position(self) -> int:
        return self.token.position

    def _create_message(self) -> str:
        if self.token.lexeme:
            message = (
                f"Unexpected token {self.token.type.name}({self.token.lexeme!r}) "
                f"at position {self.token.position}"
            )
        else:
            message = f"Unexpected end of input at position {self.token.position}"
        if self.expected:
            message += f", expecting {_format_expected(self.expected)}"
        return message


class InvalidOperationError(Exception):
    """Raised when an operation is not defined for the current value.

    Incrementing absent metadata, or metadata without a numeric identifier,
    raises this error.
    """

    pass
