# SPDX-License-Identifier: MIT
"""Validate version strings."""

from __future__ import annotations

import click

from semrange import ParseError, parse_version

from ..main import echo_error, echo_info, echo_parse_error, echo_success, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Only report invalid versions.",
)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Validate one or more version strings.

    Exits with status 1 if any version does not follow Semantic Versioning
    2.0.0, printing where parsing failed.

    \b
    Examples:
        semrange validate 1.2.3
        semrange validate 1.0.0-rc.1+build.5 2.0.0
    """
    invalid = 0
    for text in versions:
        try:
            version = parse_version(text)
        except ParseError as e:
            echo_parse_error(text, e)
            invalid += 1
            continue
        except OverflowError as e:
            echo_error(f"{text}: {e}")
            invalid += 1
            continue

        if not quiet:
            echo_success(f"{text}: valid")
            if ctx.verbose:
                echo_info(f"  normal: {version.normal_version}")
                echo_info(f"  pre-release: {version.pre_release_version or '-'}")
                echo_info(f"  build: {version.build_metadata or '-'}")

    if invalid:
        raise SystemExit(1)
