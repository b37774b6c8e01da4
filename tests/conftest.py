"""Shared fixtures."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Change into an empty project directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config_project(project_dir: Path) -> Path:
    """Create a project with a buildver.toml using comma conventions."""
    (project_dir / "buildver.toml").write_text(
        """
[buildver]
convention = "comma"
format_convention = "comma_space"
strict = false
"""
    )
    return project_dir
