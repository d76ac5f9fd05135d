# SPDX-License-Identifier: MIT
"""Check versions against constraint expressions."""

from __future__ import annotations

from typing import Optional

import click

from semrange import ParseError, parse_constraint, parse_version
from semrange.expr import And, Comparison, Expression, Not, Or, Range

from ..config import ConfigError
from ..main import (
    echo_error,
    echo_info,
    echo_parse_error,
    echo_success,
    echo_warning,
    pass_context,
    Context,
)


def _parse_or_exit(version: str, expression: str):
    try:
        candidate = parse_version(version)
    except ParseError as e:
        echo_parse_error(version, e)
        raise SystemExit(1)
    except OverflowError as e:
        echo_error(f"{version}: {e}")
        raise SystemExit(1)
    try:
        tree = parse_constraint(expression)
    except ParseError as e:
        echo_parse_error(expression, e)
        raise SystemExit(1)
    except OverflowError as e:
        echo_error(f"{expression}: {e}")
        raise SystemExit(1)
    return candidate, tree


@click.command()
@click.argument("version")
@click.argument("expression")
def satisfies(version: str, expression: str) -> None:
    """Print whether VERSION satisfies EXPRESSION; exit 1 if it does not.

    \b
    Operators: = != > >= < <= ~ ^ & | ! ( ) and "A - B" ranges.
    Examples:
        semrange satisfies 1.4.0 ">=1.0.0 & <2.0.0"
        semrange satisfies 2.0.0-beta "^1.2 | ~2.0"
    """
    candidate, tree = _parse_or_exit(version, expression)
    result = candidate.satisfies(tree)
    echo_info("true" if result else "false")
    if not result:
        raise SystemExit(1)


@click.command()
@click.argument("version", required=False)
@click.option(
    "--constraint",
    "-c",
    help="Constraint to check (defaults to [tool.semrange] constraint).",
)
@pass_context
def check(ctx: Context, version: Optional[str], constraint: Optional[str]) -> None:
    """Check the project version against its configured constraint.

    VERSION defaults to the [project] version in pyproject.toml.

    \b
    Examples:
        semrange check
        semrange check 2.1.0 -c "^2.0"
    """
    allow_prerelease = False
    if version is None or constraint is None:
        try:
            config = ctx.load_config()
        except (ConfigError, FileNotFoundError) as e:
            echo_error(str(e))
            raise SystemExit(1)
        version = version or config.version
        constraint = constraint or config.constraint
        allow_prerelease = config.allow_prerelease
    else:
        config = ctx.try_load_config()
        allow_prerelease = config.allow_prerelease if config else False

    if not version:
        echo_error("No version given and none found in [project] version")
        raise SystemExit(1)
    if not constraint:
        echo_error("No constraint given and none found in [tool.semrange] constraint")
        raise SystemExit(1)

    candidate, tree = _parse_or_exit(version, constraint)

    if candidate.is_prerelease and not allow_prerelease:
        echo_error(f"{candidate} is a pre-release (set allow-prerelease = true to accept)")
        raise SystemExit(1)

    if candidate.satisfies(tree):
        echo_success(f"{candidate} satisfies {tree}")
    else:
        echo_error(f"{candidate} does not satisfy {tree}")
        raise SystemExit(1)


def _describe(node: Expression, depth: int = 0) -> list[str]:
    indent = "  " * depth
    if isinstance(node, (And, Or)):
        label = "AND" if isinstance(node, And) else "OR"
        return [f"{indent}{label}"] + _describe(node.left, depth + 1) + _describe(node.right, depth + 1)
    if isinstance(node, Not):
        return [f"{indent}NOT"] + _describe(node.child, depth + 1)
    if isinstance(node, Range):
        return [f"{indent}RANGE {node}"]
    if isinstance(node, Comparison):
        return [f"{indent}{node}"]
    echo_warning(f"Unknown node {type(node).__name__}")
    return []


@click.command()
@click.argument("expression")
def explain(expression: str) -> None:
    """Print the parsed tree of a constraint EXPRESSION.

    \b
    Examples:
        semrange explain "^1.2 | 2.0.0 - 2.5.0"
    """
    try:
        tree = parse_constraint(expression)
    except ParseError as e:
        echo_parse_error(expression, e)
        raise SystemExit(1)
    except OverflowError as e:
        echo_error(f"{expression}: {e}")
        raise SystemExit(1)

    echo_info(str(tree))
    for line in _describe(tree):
        echo_info(line)
