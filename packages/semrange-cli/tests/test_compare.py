# SPDX-License-Identifier: MIT
"""Tests for the semrange compare and sort commands."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from click.testing import CliRunner

from semrange_cli.main import cli


class TestCompareCommand:
    """Tests for semrange compare command."""

    def test_compare_lower(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-alpha", "1.0.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_compare_higher(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.10.0", "1.9.0"])

        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_compare_ignores_builds_by_default(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test that build metadata does not affect precedence."""
        result = cli_runner.invoke(cli, ["-C", str(tmp_path), "compare", "1.0.0+a", "1.0.0+b"])

        assert result.exit_code == 0
        assert result.output.strip() == "0"

    def test_compare_with_builds(self, cli_runner: CliRunner) -> None:
        """Test that --builds orders by build metadata."""
        result = cli_runner.invoke(cli, ["compare", "--builds", "1.0.0", "1.0.0+a"])

        assert result.exit_code == 0
        assert result.output.strip() == "-1"

    def test_compare_build_aware_from_config(
        self, cli_runner: CliRunner, make_project: Callable[..., Path]
    ) -> None:
        """Test that [tool.semrange] build-aware sets the default."""
        project = make_project(tool_table="build-aware = true\n")
        result = cli_runner.invoke(cli, ["-C", str(project), "compare", "1.0.0+b", "1.0.0+a"])

        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_no_builds_overrides_config(
        self, cli_runner: CliRunner, make_project: Callable[..., Path]
    ) -> None:
        project = make_project(tool_table="build-aware = true\n")
        result = cli_runner.invoke(
            cli, ["-C", str(project), "compare", "--no-builds", "1.0.0+b", "1.0.0+a"]
        )

        assert result.exit_code == 0
        assert result.output.strip() == "0"

    def test_compare_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "v2"])

        assert result.exit_code == 1
        assert "Unexpected character 'v' at position 0" in result.output


class TestSortCommand:
    """Tests for semrange sort command."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0.0-rc.1", "0.9.0", "1.0.0-alpha"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["0.9.0", "1.0.0-alpha", "1.0.0-rc.1", "1.0.0"]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "-r", "1.0.0", "2.0.0", "1.5.0"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["2.0.0", "1.5.0", "1.0.0"]

    def test_sort_builds(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "--builds", "1.0.0+b.2", "1.0.0", "1.0.0+b.11"])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["1.0.0", "1.0.0+b.2", "1.0.0+b.11"]

    def test_sort_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "1.0.0", "1.0.0."])

        assert result.exit_code == 1
        assert "Error:" in result.output
