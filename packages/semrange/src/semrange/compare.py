# SPDX-License-Identifier: MIT
"""Version comparison and selection helpers.

Precedence follows SemVer 2.0.0: numeric pre-release identifiers sort before
alphanumeric ones, a release sorts after its pre-releases, and build metadata
is ignored unless a build-aware function is used.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .expr.nodes import Expression
from .expr.parser import parse_constraint
from .version import Version, parse_version

VersionLike = Union[str, Version]


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        UnexpectedCharacterError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.beta")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    return _as_version(version1).compare_to(_as_version(version2))


def compare_versions_with_builds(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions by precedence, then by build metadata.

    Examples:
        >>> compare_versions_with_builds("1.0.0", "1.0.0+0.3.7")
        -1
    """
    return _as_version(version1).compare_with_builds_to(_as_version(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key ordering versions by precedence.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _as_version(version)

    # A release sorts after every pre-release of the same normal version.
    if v.pre_release is None:
        pre_release_key: tuple = (1,)
    else:
        pre_release_key = (0, v.pre_release.sort_key())

    return (v.major, v.minor, v.patch, pre_release_key)


def build_aware_key(version: VersionLike) -> tuple:
    """Return a sort key ordering versions by precedence, then build metadata.

    Examples:
        >>> sorted(["1.0.0+build", "1.0.0", "1.0.0-rc.1"], key=build_aware_key)
        ['1.0.0-rc.1', '1.0.0', '1.0.0+build']
    """
    v = _as_version(version)
    build_key: tuple = (0,) if v.build is None else (1, v.build.sort_key())
    return version_key(v) + (build_key,)


def sort_versions(
    versions: Iterable[VersionLike],
    build_aware: bool = False,
    reverse: bool = False,
) -> list[Version]:
    """Parse and sort versions, lowest precedence first unless reversed."""
    key = build_aware_key if build_aware else version_key
    return sorted((_as_version(v) for v in versions), key=key, reverse=reverse)


def filter_satisfying(
    versions: Iterable[VersionLike],
    constraint: Union[str, Expression],
) -> list[Version]:
    """Return the versions satisfying a constraint, in input order."""
    if isinstance(constraint, str):
        constraint = parse_constraint(constraint)
    return [v for v in map(_as_version, versions) if v.satisfies(constraint)]


def max_satisfying(
    versions: Iterable[VersionLike],
    constraint: Union[str, Expression],
) -> Optional[Version]:
    """Return the highest version satisfying a constraint, or None.

    Examples:
        >>> str(max_satisfying(["1.2.0", "1.9.1", "2.0.0"], "^1.2"))
        '1.9.1'
    """
    matching = filter_satisfying(versions, constraint)
    if not matching:
        return None
    return max(matching, key=build_aware_key)


def min_satisfying(
    versions: Iterable[VersionLike],
    constraint: Union[str, Expression],
) -> Optional[Version]:
    """Return the lowest version satisfying a constraint, or None."""
    matching = filter_satisfying(versions, constraint)
    if not matching:
        return None
    return min(matching, key=build_aware_key)
