# SPDX-License-Identifier: MIT
"""CLI entry point for the semrange command."""

from __future__ import annotations

import functools
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from semrange import InvalidOperationError, ParseError

from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def try_load_config(self) -> Optional[CLIConfig]:
        """Load configuration if a project is found, without failing otherwise."""
        try:
            return self.load_config()
        except (ConfigError, FileNotFoundError):
            return None


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def echo_parse_error(text: str, error: ParseError) -> None:
    """Print a parse error with a marker under the offending position."""
    echo_error(str(error))
    position = getattr(error, "position", None)
    if position is not None:
        click.echo(f"  {text}", err=True)
        click.echo("  " + " " * position + "^", err=True)


def fail_on_value_errors(func):
    """Report library errors raised by a command and exit with status 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (InvalidOperationError, ValueError, OverflowError) as e:
            echo_error(str(e))
            raise SystemExit(1)

    return wrapper


@click.group()
@click.version_option(package_name="semrange")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version tool.

    Validate, compare, sort and bump versions, and check them against
    constraint expressions.

    \b
    Examples:
        semrange validate 1.2.3-rc.1
        semrange compare 1.0.0-alpha 1.0.0
        semrange bump minor 1.2.3
        semrange satisfies 1.4.0 ">=1.0.0 & <2.0.0"
        semrange check
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register commands
from .commands import validate, compare, bump, satisfies

cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(compare.sort)
cli.add_command(bump.bump)
cli.add_command(satisfies.satisfies)
cli.add_command(satisfies.check)
cli.add_command(satisfies.explain)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
