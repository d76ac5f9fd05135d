# SPDX-License-Identifier: MIT
"""Constraint trees and their evaluation.

A parsed constraint is an immutable tree of :class:`Comparison`, :class:`Range`,
:class:`And`, :class:`Or` and :class:`Not` nodes. :func:`evaluate` walks the
tree for one candidate version; trees hold no state and can be evaluated
against any number of versions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from ..version import Version


class CompareOp(Enum):
    """Comparison operators and their spelling in constraint text."""

    EQUAL = "="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    def test(self, result: int) -> bool:
        """Apply the operator to the result of ``candidate.compare_to(literal)``."""
        if self is CompareOp.EQUAL:
            return result == 0
        if self is CompareOp.NOT_EQUAL:
            return result != 0
        if self is CompareOp.GREATER:
            return result > 0
        if self is CompareOp.GREATER_EQUAL:
            return result >= 0
        if self is CompareOp.LESS:
            return result < 0
        return result <= 0


class Expression:
    """Base class of constraint tree nodes.

    Nodes compose with ``&``, ``|`` and ``~``::

        >>> from semrange.expr.helpers import gte, lt
        >>> str(gte("1.0.0") & lt("2.0.0"))
        '>=1.0.0 & <2.0.0'
    """

    __slots__ = ()

    def interpret(self, version: "Version") -> bool:
        return evaluate(self, version)

    def __and__(self, other: "Expression") -> "And":
        if not isinstance(other, Expression):
            return NotImplemented
        return And(self, other)

    def __or__(self, other: "Expression") -> "Or":
        if not isinstance(other, Expression):
            return NotImplemented
        return Or(self, other)

    def __invert__(self) -> "Not":
        return Not(self)


@dataclass(frozen=True, slots=True)
class Comparison(Expression):
    op: CompareOp
    version: "Version"

    def __str__(self) -> str:
        return f"{self.op.value}{self.version}"


@dataclass(frozen=True, slots=True)
class Range(Expression):
    """Versions between two bounds.

    Attributes:
        low: Lower bound
        high: Upper bound
        include_low: Whether ``low`` itself is in the range
        include_high: Whether ``high`` itself is in the range
    """

    low: "Version"
    high: "Version"
    include_low: bool = True
    include_high: bool = False

    @property
    def lower(self) -> Comparison:
        op = CompareOp.GREATER_EQUAL if self.include_low else CompareOp.GREATER
        return Comparison(op, self.low)

    @property
    def upper(self) -> Comparison:
        op = CompareOp.LESS_EQUAL if self.include_high else CompareOp.LESS
        return Comparison(op, self.high)

    def __str__(self) -> str:
        return f"{self.lower} & {self.upper}"


@dataclass(frozen=True, slots=True)
class And(Expression):
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{_operand(self.left, Or)} & {_operand(self.right, Or, And)}"


@dataclass(frozen=True, slots=True)
class Or(Expression):
    left: Expression
    right: Expression

    def __str__(self) -> str:
        return f"{self.left} | {_operand(self.right, Or)}"


@dataclass(frozen=True, slots=True)
class Not(Expression):
    child: Expression

    def __str__(self) -> str:
        return f"!({self.child})"


def _operand(node: Expression, *grouped: type) -> str:
    # Parenthesize children that bind looser than their parent.
    if isinstance(node, grouped) or (isinstance(node, Range) and And in grouped):
        return f"({node})"
    return str(node)


Node = Union[Comparison, Range, And, Or, Not]


def evaluate(expression: Expression, version: "Version") -> bool:
    """Evaluate a constraint tree against a candidate version.

    Both operands of ``And`` and ``Or`` are always evaluated; nodes are pure so
    the result is the same as with short-circuiting.
    """
    if isinstance(expression, Comparison):
        return expression.op.test(version.compare_to(expression.version))
    if isinstance(expression, Range):
        lower = evaluate(expression.lower, version)
        upper = evaluate(expression.upper, version)
        return lower and upper
    if isinstance(expression, And):
        left = evaluate(expression.left, version)
        right = evaluate(expression.right, version)
        return left and right
    if isinstance(expression, Or):
        left = evaluate(expression.left, version)
        right = evaluate(expression.right, version)
        return left or right
    if isinstance(expression, Not):
        return not evaluate(expression.child, version)
    raise TypeError(f"Unknown expression node: {type(expression).__name__}")
