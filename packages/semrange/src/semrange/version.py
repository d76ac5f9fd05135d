# SPDX-License-Identifier: MIT
"""The Version value type.

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +001

Versions are immutable. Every ``increment_*`` and ``set_*`` method returns a
new instance. Equality and ordering follow SemVer precedence, which ignores
build metadata; :meth:`Version.compare_with_builds_to` gives a total order that
also considers it.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .errors import InvalidOperationError, ParseError
from .identifiers import MetadataVersion
from .normal import NormalVersion
from .parser import parse_build, parse_pre_release, parse_valid_semver

if TYPE_CHECKING:
    from .expr.nodes import Expression

PRE_RELEASE_PREFIX = "-"
BUILD_PREFIX = "+"


def _compare_pre_release(pre1: Optional[MetadataVersion], pre2: Optional[MetadataVersion]) -> int:
    # A release has higher precedence than any of its pre-releases.
    if pre1 is None and pre2 is None:
        return 0
    if pre1 is None:
        return 1
    if pre2 is None:
        return -1
    return pre1.compare(pre2)


def _compare_build(build1: Optional[MetadataVersion], build2: Optional[MetadataVersion]) -> int:
    # Opposite polarity: a version with build metadata sorts after one without.
    if build1 is None and build2 is None:
        return 0
    if build1 is None:
        return -1
    if build2 is None:
        return 1
    return build1.compare(build2)


@functools.total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A parsed semantic version.

    Attributes:
        normal: The major, minor and patch numbers
        pre_release: Pre-release identifiers, or None for a release
        build: Build metadata identifiers, or None when absent
    """

    normal: NormalVersion
    pre_release: Optional[MetadataVersion] = None
    build: Optional[MetadataVersion] = None

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Parse version text.

        Raises:
            UnexpectedCharacterError: If the text does not follow the grammar
            OverflowError: If a normal version component is too large
            TypeError: If the input is not a string
        """
        normal, pre_release, build = parse_valid_semver(text)
        return cls(normal, pre_release, build)

    @classmethod
    def try_parse(cls, text: str) -> Optional["Version"]:
        """Parse version text, returning None instead of raising."""
        try:
            return cls.parse(text)
        except (ParseError, OverflowError, TypeError):
            return None

    @classmethod
    def is_valid(cls, text: str) -> bool:
        return cls.try_parse(text) is not None

    @classmethod
    def of(
        cls,
        major: int,
        minor: int = 0,
        patch: int = 0,
        pre_release: Optional[str] = None,
        build: Optional[str] = None,
    ) -> "Version":
        """Create a version from its components.

        Examples:
            >>> str(Version.of(1, 2, 3, "rc.1", "build.5"))
            '1.2.3-rc.1+build.5'

        Raises:
            ValueError: If a numeric component is negative
            UnexpectedCharacterError: If pre_release or build is malformed
        """
        normal = NormalVersion(major, minor, patch)
        text = str(normal)
        if pre_release is not None:
            text += PRE_RELEASE_PREFIX + pre_release
        if build is not None:
            text += BUILD_PREFIX + build
        return cls.parse(text)

    @property
    def major(self) -> int:
        return self.normal.major

    @property
    def minor(self) -> int:
        return self.normal.minor

    @property
    def patch(self) -> int:
        return self.normal.patch

    @property
    def normal_version(self) -> str:
        return str(self.normal)

    @property
    def pre_release_version(self) -> str:
        """Pre-release text, or an empty string when absent."""
        return "" if self.pre_release is None else str(self.pre_release)

    @property
    def build_metadata(self) -> str:
        """Build metadata text, or an empty string when absent."""
        return "" if self.build is None else str(self.build)

    @property
    def is_prerelease(self) -> bool:
        return self.pre_release is not None

    def increment_major_version(self, pre_release: Optional[str] = None) -> "Version":
        return self._with_normal(self.normal.increment_major(), pre_release)

    def increment_minor_version(self, pre_release: Optional[str] = None) -> "Version":
        return self._with_normal(self.normal.increment_minor(), pre_release)

    def increment_patch_version(self, pre_release: Optional[str] = None) -> "Version":
        return self._with_normal(self.normal.increment_patch(), pre_release)

    def _with_normal(self, normal: NormalVersion, pre_release: Optional[str]) -> "Version":
        if pre_release is None:
            return Version(normal)
        return Version(normal, parse_pre_release(pre_release))

    def increment_pre_release_version(self) -> "Version":
        """Increment the last numeric pre-release identifier, dropping build metadata.

        Raises:
            InvalidOperationError: If there is no pre-release or it has no
                numeric identifier
        """
        if self.pre_release is None:
            raise InvalidOperationError(f"Version {self} has no pre-release to increment")
        return Version(self.normal, self.pre_release.increment())

    def increment_build_metadata(self) -> "Version":
        """Increment the last numeric build identifier.

        Raises:
            InvalidOperationError: If there is no build metadata or it has no
                numeric identifier
        """
        if self.build is None:
            raise InvalidOperationError(f"Version {self} has no build metadata to increment")
        return Version(self.normal, self.pre_release, self.build.increment())

    def set_pre_release_version(self, pre_release: str) -> "Version":
        return Version(self.normal, parse_pre_release(pre_release))

    def set_build_metadata(self, build: str) -> "Version":
        return Version(self.normal, self.pre_release, parse_build(build))

    def compare_to(self, other: "Version") -> int:
        """Compare by precedence, ignoring build metadata.

        Returns:
            -1, 0 or 1 as this version has lower, equal or higher precedence
        """
        result = self.normal.compare(other.normal)
        if result == 0:
            result = _compare_pre_release(self.pre_release, other.pre_release)
        return result

    def compare_with_builds_to(self, other: "Version") -> int:
        """Compare by precedence, then by build metadata.

        A version without build metadata sorts before the same version with
        build metadata.
        """
        result = self.compare_to(other)
        if result == 0:
            result = _compare_build(self.build, other.build)
        return result

    def greater_than(self, other: "Version") -> bool:
        return self.compare_to(other) > 0

    def greater_than_or_equal_to(self, other: "Version") -> bool:
        return self.compare_to(other) >= 0

    def less_than(self, other: "Version") -> bool:
        return self.compare_to(other) < 0

    def less_than_or_equal_to(self, other: "Version") -> bool:
        return self.compare_to(other) <= 0

    def is_major_version_compatible(self, other: "Version") -> bool:
        return self.major == other.major

    def is_minor_version_compatible(self, other: "Version") -> bool:
        return self.major == other.major and self.minor == other.minor

    def satisfies(self, expression: Union[str, "Expression"]) -> bool:
        """Check this version against a constraint expression.

        Examples:
            >>> Version.parse("1.5.0").satisfies(">=1.0.0 & <2.0.0")
            True
        """
        from .expr.nodes import evaluate
        from .expr.parser import parse_constraint

        if isinstance(expression, str):
            expression = parse_constraint(expression)
        return evaluate(expression, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare_to(other) < 0

    def __hash__(self) -> int:
        return hash((self.normal, self.pre_release))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        text = self.normal_version
        if self.pre_release is not None:
            text += PRE_RELEASE_PREFIX + str(self.pre_release)
        if self.build is not None:
            text += BUILD_PREFIX + str(self.build)
        return text

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def __reduce__(self):
        return (parse_version, (str(self),))


class VersionBuilder:
    """Assembles a version from its textual parts and parses the result.

    Example:
        >>> VersionBuilder("1.0.0").set_pre_release_version("rc.1").build()
        Version('1.0.0-rc.1')
    """

    def __init__(self, normal: str = "") -> None:
        self.normal = normal
        self.pre_release = ""
        self.build_metadata = ""

    def set_normal_version(self, normal: str) -> "VersionBuilder":
        self.normal = normal
        return self

    def set_pre_release_version(self, pre_release: str) -> "VersionBuilder":
        self.pre_release = pre_release
        return self

    def set_build_metadata(self, build: str) -> "VersionBuilder":
        self.build_metadata = build
        return self

    def build(self) -> Version:
        text = self.normal or ""
        if self.pre_release:
            text += PRE_RELEASE_PREFIX + self.pre_release
        if self.build_metadata:
            text += BUILD_PREFIX + self.build_metadata
        return Version.parse(text)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        UnexpectedCharacterError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version('1.2.3')

        >>> parse_version("2.0.0-rc.1+build.456").pre_release_version
        'rc.1'
    """
    return Version.parse(version_string)


def try_parse_version(version_string: str) -> Optional[Version]:
    """Parse a version string, returning None if it is invalid."""
    return Version.try_parse(version_string)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_version("1.2.3-rc.1+abcdefg")
        True
        >>> is_valid_version("1.2.3+rc.1+abcdefg")
        False
    """
    return Version.is_valid(version_string)
