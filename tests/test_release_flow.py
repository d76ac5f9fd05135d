# SPDX-License-Identifier: MIT
"""Integration test: End-to-end release flow.

Tests the complete flow of:
1. Loading a sample project's version and constraint
2. Bumping the version through the CLI
3. Checking each candidate against the configured constraint
4. Selecting the newest published version that satisfies it
"""

import shutil
from pathlib import Path

import pytest
from click.testing import CliRunner

from semrange import Version, max_satisfying, parse_constraint, sort_versions
from semrange_cli.config import load_config
from semrange_cli.main import cli

PUBLISHED = [
    "2.2.9",
    "2.3.0",
    "2.3.1",
    "2.3.4",
    "2.4.0-rc.1",
    "2.4.0",
    "2.4.0+build.2",
    "3.0.0",
]


class TestEndToEndReleaseFlow:
    """Integration tests for the complete release flow."""

    @pytest.fixture
    def sample_project_dir(self, tmp_path: Path) -> Path:
        """Copy the sample project so tests can modify it."""
        source = Path(__file__).parent / "sample_project"
        target = tmp_path / "sample_project"
        shutil.copytree(source, target)
        return target

    @pytest.fixture
    def runner(self) -> CliRunner:
        return CliRunner()

    def _set_version(self, project_dir: Path, version: str) -> None:
        pyproject = project_dir / "pyproject.toml"
        config = load_config(project_dir)
        pyproject.write_text(
            pyproject.read_text().replace(f'version = "{config.version}"', f'version = "{version}"')
        )

    def test_sample_project_config(self, sample_project_dir: Path) -> None:
        config = load_config(sample_project_dir)

        assert config.name == "sample-project"
        assert config.version == "2.3.1"
        assert config.build_aware is True
        assert config.allow_prerelease is False

    def test_bump_and_check(self, runner: CliRunner, sample_project_dir: Path) -> None:
        """Each bump is checked against the project constraint."""
        result = runner.invoke(cli, ["-C", str(sample_project_dir), "check"])
        assert result.exit_code == 0, result.output

        version = load_config(sample_project_dir).version
        expected = [("2.3.2", 0), ("2.3.3", 0), ("2.3.4", 1), ("2.3.5", 0)]
        for bumped, exit_code in expected:
            result = runner.invoke(cli, ["bump", "patch", version])
            assert result.exit_code == 0
            version = result.output.strip()
            assert version == bumped

            self._set_version(sample_project_dir, version)
            result = runner.invoke(cli, ["-C", str(sample_project_dir), "check"])
            assert result.exit_code == exit_code, result.output

    def test_major_bump_leaves_range(self, runner: CliRunner, sample_project_dir: Path) -> None:
        result = runner.invoke(cli, ["bump", "major", "2.3.1"])
        self._set_version(sample_project_dir, result.output.strip())

        result = runner.invoke(cli, ["-C", str(sample_project_dir), "check"])

        assert result.exit_code == 1
        assert "3.0.0 does not satisfy >=2.3.0 & <3.0.0 & !(=2.3.4)" in result.output

    def test_pre_release_candidate_rejected(
        self, runner: CliRunner, sample_project_dir: Path
    ) -> None:
        result = runner.invoke(cli, ["bump", "minor", "2.3.1", "-p", "rc.1"])
        self._set_version(sample_project_dir, result.output.strip())

        result = runner.invoke(cli, ["-C", str(sample_project_dir), "check"])

        assert result.exit_code == 1
        assert "2.4.0-rc.1 is a pre-release" in result.output

    def test_select_newest_published(self, sample_project_dir: Path) -> None:
        config = load_config(sample_project_dir)
        constraint = parse_constraint(config.constraint)

        newest = max_satisfying(PUBLISHED, constraint)

        assert newest is not None
        assert str(newest) == "2.4.0+build.2"
        assert newest.satisfies(constraint)

    def test_sort_uses_project_build_order(
        self, runner: CliRunner, sample_project_dir: Path
    ) -> None:
        """The project enables build-aware ordering for the sort command."""
        result = runner.invoke(
            cli, ["-C", str(sample_project_dir), "sort", "2.4.0+build.2", "2.4.0", "2.4.0-rc.1"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == ["2.4.0-rc.1", "2.4.0", "2.4.0+build.2"]
        assert [str(v) for v in sort_versions(PUBLISHED[-3:], build_aware=True)] == [
            "2.4.0",
            "2.4.0+build.2",
            "3.0.0",
        ]

    def test_published_versions_validate(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", "-q", *PUBLISHED])

        assert result.exit_code == 0
        assert all(Version.is_valid(v) for v in PUBLISHED)
