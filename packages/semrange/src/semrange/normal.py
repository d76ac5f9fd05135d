# SPDX-License-Identifier: MIT
"""The MAJOR.MINOR.PATCH part of a version."""

from __future__ import annotations

from dataclasses import dataclass

# Components are bounded like a signed 64-bit counter.
MAX_COMPONENT = 2**63 - 1
_MAX_DIGITS = len(str(MAX_COMPONENT))


def component_from_digits(digits: str, name: str = "component") -> int:
    """Convert decimal digits to a component, rejecting text too long to be in range.

    Raises:
        OverflowError: If the digits cannot fit below MAX_COMPONENT
    """
    if len(digits) > _MAX_DIGITS:
        raise OverflowError(f"{name} version {digits[:20]}... exceeds {MAX_COMPONENT}")
    return int(digits)


def _increment(value: int, name: str) -> int:
    if value >= MAX_COMPONENT:
        raise OverflowError(f"Incrementing the {name} version {value} overflows")
    return value + 1


@dataclass(frozen=True, slots=True, order=True)
class NormalVersion:
    """Major, minor and patch numbers, ordered component by component.

    Raises:
        ValueError: If a component is negative
        OverflowError: If a component exceeds MAX_COMPONENT
    """

    major: int
    minor: int
    patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} version must be an integer, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} version must be non-negative, got {value}")
            if value > MAX_COMPONENT:
                raise OverflowError(f"{name} version {value} exceeds {MAX_COMPONENT}")

    def compare(self, other: "NormalVersion") -> int:
        """Return -1, 0 or 1 comparing major, then minor, then patch."""
        for attr in ("major", "minor", "patch"):
            mine = getattr(self, attr)
            theirs = getattr(other, attr)
            if mine != theirs:
                return -1 if mine < theirs else 1
        return 0

    def increment_major(self) -> "NormalVersion":
        return NormalVersion(_increment(self.major, "major"), 0, 0)

    def increment_minor(self) -> "NormalVersion":
        return NormalVersion(self.major, _increment(self.minor, "minor"), 0)

    def increment_patch(self) -> "NormalVersion":
        return NormalVersion(self.major, self.minor, _increment(self.patch, "patch"))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
