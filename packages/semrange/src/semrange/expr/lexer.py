# SPDX-License-Identifier: MIT
"""Tokenizer for constraint expressions.

Splits text such as ``>=1.0.0 & (<2.0.0 | ^3.1)`` into tokens. Version
literals are kept whole; the parser decides whether a literal is a full
version, a partial version or a wildcard.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import LexerError


class TokenType(Enum):
    EQUAL = "="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="
    TILDE = "~"
    CARET = "^"
    AND = "&"
    OR = "|"
    NOT = "!"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    HYPHEN = "-"
    VERSION = "version"
    EOI = "end of input"


COMPARISON_OPERATORS = (
    TokenType.EQUAL,
    TokenType.NOT_EQUAL,
    TokenType.GREATER,
    TokenType.GREATER_EQUAL,
    TokenType.LESS,
    TokenType.LESS_EQUAL,
)


@dataclass(frozen=True, slots=True)
class Token:
    """A lexeme with its type and the position of its first character."""

    type: TokenType
    lexeme: str
    position: int

    def __str__(self) -> str:
        return f"{self.type.name}({self.lexeme!r})"


WILDCARDS = frozenset("*xX")

_WHITESPACE = frozenset(" \t\r\n")
_VERSION_START = frozenset("0123456789") | WILDCARDS
_VERSION_CHARS = (
    frozenset("0123456789.+-")
    | frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
    | WILDCARDS
)

# Two-character operators are checked before their one-character prefixes.
_OPERATORS = {
    "!=": TokenType.NOT_EQUAL,
    ">=": TokenType.GREATER_EQUAL,
    "<=": TokenType.LESS_EQUAL,
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "=": TokenType.EQUAL,
    ">": TokenType.GREATER,
    "<": TokenType.LESS,
    "~": TokenType.TILDE,
    "^": TokenType.CARET,
    "&": TokenType.AND,
    "|": TokenType.OR,
    "!": TokenType.NOT,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "-": TokenType.HYPHEN,
}


class Lexer:
    """Turns constraint text into a list of tokens ending with EOI."""

    def __init__(self, expression: str) -> None:
        if not isinstance(expression, str):
            raise TypeError(f"Expression must be a string, got {type(expression).__name__}")
        self.expression = expression

    def tokenize(self) -> list[Token]:
        """Tokenize the whole expression.

        Raises:
            LexerError: On the first character that starts no token
        """
        text = self.expression
        tokens: list[Token] = []
        index = 0
        while index < len(text):
            char = text[index]
            if char in _WHITESPACE:
                index += 1
                continue
            if char in _VERSION_START:
                end = index + 1
                while end < len(text) and text[end] in _VERSION_CHARS:
                    end += 1
                tokens.append(Token(TokenType.VERSION, text[index:end], index))
                index = end
                continue
            pair = text[index : index + 2]
            if pair in _OPERATORS:
                tokens.append(Token(_OPERATORS[pair], pair, index))
                index += 2
                continue
            if char in _OPERATORS:
                tokens.append(Token(_OPERATORS[char], char, index))
                index += 1
                continue
            raise LexerError(text, index)
        tokens.append(Token(TokenType.EOI, "", len(text)))
        return tokens


def tokenize(expression: str) -> list[Token]:
    return Lexer(expression).tokenize()
