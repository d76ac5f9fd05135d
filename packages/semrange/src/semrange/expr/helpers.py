# SPDX-License-Identifier: MIT
"""Build constraint trees from code instead of text.

Example:
    >>> from semrange import Version
    >>> constraint = gte("1.0.0") & lt("2.0.0") & ~eq("1.3.0")
    >>> Version.parse("1.3.0").satisfies(constraint)
    False
"""

from __future__ import annotations

from typing import Union

from ..version import Version
from .nodes import CompareOp, Comparison, Range

VersionLike = Union[str, Version]


def _version(version: VersionLike) -> Version:
    return Version.parse(version) if isinstance(version, str) else version


def eq(version: VersionLike) -> Comparison:
    return Comparison(CompareOp.EQUAL, _version(version))


def neq(version: VersionLike) -> Comparison:
    return Comparison(CompareOp.NOT_EQUAL, _version(version))


def gt(version: VersionLike) -> Comparison:
    return Comparison(CompareOp.GREATER, _version(version))


def gte(version: VersionLike) -> Comparison:
    return Comparison(CompareOp.GREATER_EQUAL, _version(version))


def lt(version: VersionLike) -> Comparison:
    return Comparison(CompareOp.LESS, _version(version))


def lte(version: VersionLike) -> Comparison:
    return Comparison(CompareOp.LESS_EQUAL, _version(version))


def between(
    low: VersionLike,
    high: VersionLike,
    include_low: bool = True,
    include_high: bool = False,
) -> Range:
    """Versions from ``low`` up to ``high``, by default including only ``low``."""
    return Range(_version(low), _version(high), include_low, include_high)
