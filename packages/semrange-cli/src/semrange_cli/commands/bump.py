# SPDX-License-Identifier: MIT
"""Derive the next version."""

from __future__ import annotations

from typing import Optional

import click

from semrange import ParseError, Version, parse_version

from ..main import echo_info, echo_parse_error, fail_on_value_errors, pass_context, Context

PARTS = ("major", "minor", "patch", "pre-release", "build")


def bump_version(version: Version, part: str, pre_release: Optional[str] = None) -> Version:
    """Return the version following ``version`` for the given part."""
    if part == "major":
        return version.increment_major_version(pre_release)
    if part == "minor":
        return version.increment_minor_version(pre_release)
    if part == "patch":
        return version.increment_patch_version(pre_release)
    if part == "pre-release":
        if pre_release is not None:
            return version.set_pre_release_version(pre_release)
        return version.increment_pre_release_version()
    if part == "build":
        return version.increment_build_metadata()
    raise ValueError(f"Unknown version part: {part}")


@click.command()
@click.argument("part", type=click.Choice(PARTS))
@click.argument("version")
@click.option(
    "--pre-release",
    "-p",
    help="Pre-release to attach to the new version.",
)
@pass_context
@fail_on_value_errors
def bump(ctx: Context, part: str, version: str, pre_release: Optional[str]) -> None:
    """Print the next version after incrementing PART.

    Incrementing major, minor or patch drops pre-release and build metadata.
    Incrementing pre-release or build requires a numeric identifier in it.

    \b
    Examples:
        semrange bump major 1.2.3             # 2.0.0
        semrange bump minor 1.2.3 -p alpha.1  # 1.3.0-alpha.1
        semrange bump pre-release 1.0.0-rc.1  # 1.0.0-rc.2
        semrange bump build 1.0.0+build.7     # 1.0.0+build.8
    """
    try:
        current = parse_version(version)
    except ParseError as e:
        echo_parse_error(version, e)
        raise SystemExit(1)

    try:
        echo_info(str(bump_version(current, part, pre_release)))
    except ParseError as e:
        echo_parse_error(pre_release or "", e)
        raise SystemExit(1)
