# SPDX-License-Identifier: MIT
"""Constraint expressions over semantic versions."""

from .helpers import between, eq, gt, gte, lt, lte, neq
from .lexer import Lexer, Token, TokenType, tokenize
from .nodes import And, CompareOp, Comparison, Expression, Not, Or, Range, evaluate
from .parser import ExpressionParser, PartialVersion, parse_constraint

__all__ = [
    # Tree
    "Expression",
    "Comparison",
    "Range",
    "And",
    "Or",
    "Not",
    "CompareOp",
    "evaluate",
    # Parsing
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "ExpressionParser",
    "PartialVersion",
    "parse_constraint",
    # Builders
    "eq",
    "neq",
    "gt",
    "gte",
    "lt",
    "lte",
    "between",
]
