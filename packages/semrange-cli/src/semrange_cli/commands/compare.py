# SPDX-License-Identifier: MIT
"""Compare and sort versions."""

from __future__ import annotations

from typing import Optional

import click

from semrange import ParseError, Version, parse_version, sort_versions

from ..main import echo_error, echo_info, echo_parse_error, pass_context, Context


def _parse_all(texts: tuple[str, ...]) -> list[Version]:
    versions = []
    for text in texts:
        try:
            versions.append(parse_version(text))
        except ParseError as e:
            echo_parse_error(text, e)
            raise SystemExit(1)
        except OverflowError as e:
            echo_error(f"{text}: {e}")
            raise SystemExit(1)
    return versions


def _build_aware(ctx: Context, builds: Optional[bool]) -> bool:
    if builds is not None:
        return builds
    config = ctx.try_load_config()
    return config.build_aware if config else False


@click.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--builds/--no-builds",
    default=None,
    help="Also order by build metadata (default from [tool.semrange] build-aware).",
)
@pass_context
def compare(ctx: Context, first: str, second: str, builds: Optional[bool]) -> None:
    """Compare two versions, printing -1, 0 or 1.

    \b
    Examples:
        semrange compare 1.0.0-alpha 1.0.0        # -1
        semrange compare 1.0.0+a 1.0.0+b          # 0
        semrange compare --builds 1.0.0+a 1.0.0+b # -1
    """
    v1, v2 = _parse_all((first, second))
    if _build_aware(ctx, builds):
        result = v1.compare_with_builds_to(v2)
    else:
        result = v1.compare_to(v2)
    echo_info(str(result))


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--builds/--no-builds",
    default=None,
    help="Also order by build metadata (default from [tool.semrange] build-aware).",
)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the highest version first.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], builds: Optional[bool], reverse: bool) -> None:
    """Sort versions by precedence, one per line.

    \b
    Examples:
        semrange sort 1.0.0 1.0.0-rc.1 0.9.0
        semrange sort --reverse 1.0.0 2.0.0
    """
    parsed = _parse_all(versions)
    for version in sort_versions(parsed, build_aware=_build_aware(ctx, builds), reverse=reverse):
        echo_info(str(version))
