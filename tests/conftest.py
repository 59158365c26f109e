"""
Shared test fixtures and configuration.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ionkit.adapters.base import ProjectDeps
from ionkit.core.config.loader import PROJECT_FILE


def write_json(path: Path, document: Any) -> Path:
    """Write a JSON document, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2))
    return path


def read_json(path: Path) -> Any:
    return json.loads(path.read_text())


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a project file into tmp_path; returns its path."""

    def _write(document: Any) -> Path:
        return write_json(tmp_path / PROJECT_FILE, document)

    return _write


@pytest.fixture
def outside_deps(tmp_path: Path) -> ProjectDeps:
    """Deps whose exec path is outside every sub-project root."""
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    return ProjectDeps(exec_path=elsewhere)


@pytest.fixture
def angular_app(tmp_path: Path) -> Callable[[Path], None]:
    """Make a directory look like an @ionic/angular app."""

    def _make(directory: Path = tmp_path) -> None:
        write_json(
            directory / "package.json",
            {"name": "app", "dependencies": {"@ionic/angular": "^4.0.0"}},
        )

    return _make
