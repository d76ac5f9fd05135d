# SPDX-License-Identifier: MIT
"""Recursive-descent parser for constraint expressions.

Grammar, loosest binding first::

    expression := andExpr ("|" andExpr)*
    andExpr    := term ("&" term)*
    term       := "!" term
                | "(" expression ")"
                | compOp version
                | "~" partial
                | "^" partial
                | partial ("-" partial)?

``partial`` is a full version or a prefix of one whose missing or wildcard
(``*``, ``x``, ``X``) components select a range. Tilde, caret, hyphen and
wildcard forms are desugared into :class:`~semrange.expr.nodes.Range` nodes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..errors import UnexpectedCharacterError, UnexpectedTokenError
from ..lexer import CharType
from ..normal import NormalVersion, component_from_digits
from ..parser import parse_valid_semver
from ..version import Version
from .lexer import COMPARISON_OPERATORS, WILDCARDS, Token, TokenType, tokenize
from .nodes import And, CompareOp, Comparison, Expression, Not, Or, Range

logger = logging.getLogger(__name__)

# Lowest version of all: 0.0.0 with the smallest possible pre-release.
LOWEST_VERSION = Version.parse("0.0.0-0")

_TERM_START = (
    TokenType.NOT,
    TokenType.LEFT_PAREN,
    *COMPARISON_OPERATORS,
    TokenType.TILDE,
    TokenType.CARET,
    TokenType.VERSION,
)


@dataclass(frozen=True)
class PartialVersion:
    """A version literal that may omit or wildcard its trailing components.

    ``major`` is None for a lone wildcard; ``minor`` and ``patch`` are None
    when omitted or wildcarded. ``full`` holds the parsed version when all
    three components are given.
    """

    major: Optional[int]
    minor: Optional[int] = None
    patch: Optional[int] = None
    full: Optional[Version] = None

    def filled(self) -> Version:
        """Return the version with missing components set to zero."""
        if self.full is not None:
            return self.full
        return Version(NormalVersion(self.major or 0, self.minor or 0, self.patch or 0))


class TokenStream:
    """A cursor over tokens with typed lookahead."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0

    def lookahead(self) -> Token:
        return self._tokens[self._index]

    def positive_lookahead(self, *expected: TokenType) -> bool:
        return self.lookahead().type in expected

    def consume(self, *expected: TokenType) -> Token:
        token = self.lookahead()
        if expected and token.type not in expected:
            raise UnexpectedTokenError(token, expected)
        if token.type is not TokenType.EOI:
            self._index += 1
        return token


class ExpressionParser:
    """Parses constraint text into an expression tree.

    Example:
        >>> tree = ExpressionParser(">=1.0.0 & <2.0.0").parse()
        >>> tree.interpret(Version.parse("2.0.0-beta"))
        True

    Raises:
        LexerError: If the text contains an illegal character
    """

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.tokens = TokenStream(tokenize(expression))

    def parse(self) -> Expression:
        """Parse the whole expression.

        Raises:
            UnexpectedTokenError: If the tokens do not follow the grammar
            UnexpectedCharacterError: If a version literal is malformed
        """
        tree = self._expression()
        self._expect_end(TokenType.EOI)
        logger.debug("Parsed constraint %r as %s", self.expression, tree)
        return tree

    def _expect_end(self, closing: TokenType) -> None:
        if not self.tokens.positive_lookahead(closing):
            raise UnexpectedTokenError(
                self.tokens.lookahead(), (TokenType.AND, TokenType.OR, closing)
            )
        self.tokens.consume()

    def _expression(self) -> Expression:
        left = self._and_expression()
        while self.tokens.positive_lookahead(TokenType.OR):
            self.tokens.consume()
            left = Or(left, self._and_expression())
        return left

    def _and_expression(self) -> Expression:
        left = self._term()
        while self.tokens.positive_lookahead(TokenType.AND):
            self.tokens.consume()
            left = And(left, self._term())
        return left

    def _term(self) -> Expression:
        token = self.tokens.consume(*_TERM_START)
        if token.type is TokenType.NOT:
            return Not(self._term())
        if token.type is TokenType.LEFT_PAREN:
            inner = self._expression()
            self._expect_end(TokenType.RIGHT_PAREN)
            return inner
        if token.type in COMPARISON_OPERATORS:
            operand = self._partial(self.tokens.consume(TokenType.VERSION), wildcards=False)
            return Comparison(CompareOp(token.type.value), operand.filled())
        if token.type is TokenType.TILDE:
            return self._tilde(self._partial(self.tokens.consume(TokenType.VERSION), wildcards=False))
        if token.type is TokenType.CARET:
            return self._caret(self._partial(self.tokens.consume(TokenType.VERSION), wildcards=False))

        start = self._partial(token)
        if self.tokens.positive_lookahead(TokenType.HYPHEN):
            self.tokens.consume()
            end = self._partial(self.tokens.consume(TokenType.VERSION), wildcards=False)
            if start.major is None:
                raise UnexpectedCharacterError(token.lexeme[0], token.position, (CharType.DIGIT,))
            return Range(start.filled(), end.filled(), include_low=True, include_high=True)
        return self._bare(start)

    def _bare(self, version: PartialVersion) -> Expression:
        if version.full is not None:
            return Comparison(CompareOp.EQUAL, version.full)
        if version.major is None:
            return Comparison(CompareOp.GREATER_EQUAL, LOWEST_VERSION)
        low = version.filled()
        if version.minor is None:
            return Range(low, low.increment_major_version())
        return Range(low, low.increment_minor_version())

    def _tilde(self, version: PartialVersion) -> Expression:
        low = version.filled()
        if version.minor is None:
            return Range(low, low.increment_major_version())
        return Range(low, low.increment_minor_version())

    def _caret(self, version: PartialVersion) -> Expression:
        low = version.filled()
        if version.major != 0 or version.minor is None:
            return Range(low, low.increment_major_version())
        if version.minor != 0 or version.patch is None:
            return Range(low, low.increment_minor_version())
        return Range(low, low.increment_patch_version())

    def _partial(self, token: Token, wildcards: bool = True) -> PartialVersion:
        """Interpret a version literal token.

        A literal with three numeric components is parsed with the full
        version grammar; anything shorter may only hold numeric components
        optionally followed by wildcards.
        """
        text = token.lexeme
        components = _split_normal(text)
        if len(components) >= 3 and not any(part in WILDCARDS for part in components[:3]):
            normal, pre_release, build = parse_valid_semver(text, offset=token.position)
            return PartialVersion(
                normal.major, normal.minor, normal.patch, Version(normal, pre_release, build)
            )

        numbers: list[Optional[int]] = []
        position = token.position
        for index, part in enumerate(components):
            if index > 0:
                position += 1
            if part in WILDCARDS and wildcards:
                numbers.append(None)
            elif numbers and numbers[-1] is None:
                # Only wildcards may follow a wildcard.
                raise UnexpectedCharacterError(part[:1] or None, position)
            else:
                numbers.append(_numeric_component(part, position))
            position += len(part)

        consumed = position - token.position
        if consumed < len(text):
            expected = (CharType.DOT, CharType.EOI) if len(numbers) < 3 else (CharType.EOI,)
            raise UnexpectedCharacterError(text[consumed], position, expected)

        numbers += [None] * (3 - len(numbers))
        return PartialVersion(*numbers)


def _split_normal(text: str) -> list[str]:
    """Split the leading ``a.b.c`` run of a literal, stopping at ``-``, ``+`` or a fourth part."""
    parts = []
    current = ""
    for char in text:
        if char in "-+":
            break
        if char == ".":
            parts.append(current)
            current = ""
            if len(parts) == 3:
                return parts
            continue
        current += char
    parts.append(current)
    return parts


def _numeric_component(part: str, position: int) -> int:
    for index, char in enumerate(part):
        if not CharType.DIGIT.matches(char):
            raise UnexpectedCharacterError(char, position + index, (CharType.DIGIT,))
    if not part:
        raise UnexpectedCharacterError(None, position, (CharType.DIGIT,))
    if len(part) > 1 and part[0] == "0":
        raise UnexpectedCharacterError(part[1], position + 1, (CharType.DOT, CharType.EOI))
    return component_from_digits(part)


def parse_constraint(expression: str) -> Expression:
    """Parse constraint text into an expression tree.

    Examples:
        >>> str(parse_constraint("^1.2"))
        '>=1.2.0 & <2.0.0'
    """
    return ExpressionParser(expression).parse()
