# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


def _write_project(project_dir: Path, version: str, tool_table: str) -> Path:
    project_dir.mkdir(parents=True, exist_ok=True)
    (project_dir / "pyproject.toml").write_text(
        f"""[build-system]
requires = ["setuptools>=68.0"]
build-backend = "setuptools.build_meta"

[project]
name = "test-library"
version = "{version}"
description = "Test library"

[tool.semrange]
{tool_table}
"""
    )
    return project_dir


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project whose version satisfies its constraint."""
    yield _write_project(
        tmp_path / "test_project",
        "1.4.2",
        'constraint = ">=1.0.0 & <2.0.0"\n',
    )


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory creating projects with a given version and [tool.semrange] body."""
    counter = iter(range(1000))

    def factory(version: str = "1.0.0", tool_table: str = "") -> Path:
        return _write_project(tmp_path / f"project_{next(counter)}", version, tool_table)

    return factory
