"""
Project file loader — locate the project file and move JSON on and off disk.

The project file lives at ``<workspace>/ionic.config.json``.  Commands can
run from any subdirectory of a workspace; ``find_project_directory``
walks up to find it.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

from ionkit.core.errors import ConfigError

logger = logging.getLogger(__name__)

# Project file name, relative to the workspace root
PROJECT_FILE = "ionic.config.json"


def find_project_directory(start_dir: Path | None = None) -> Path | None:
    """Search for the project file starting from a directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        The directory containing the project file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        if (current / PROJECT_FILE).is_file():
            return current
        parent = current.parent
        if parent == current:
            return None  # filesystem root
        current = parent


def project_file_path(root_directory: Path) -> Path:
    """Absolute path of the project file inside a workspace."""
    return (root_directory / PROJECT_FILE).resolve()


def read_json_file(path: Path) -> Any:
    """Read and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file cannot be read or is not valid JSON.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not valid UTF-8: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e


def write_json_file(path: Path, document: Any, indent: int = 2) -> None:
    """Write a JSON document (atomic write).

    Uses write-to-temp-then-rename so a crash mid-write never leaves a
    truncated project file behind.

    Raises:
        ConfigError: If the file cannot be written.
    """
    content = json.dumps(document, indent=indent, ensure_ascii=False) + "\n"

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        _fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}_",
            suffix=".tmp",
        )
        tmp = Path(tmp_path)
        try:
            with open(_fd, "w", encoding="utf-8") as f:
                f.write(content)
            tmp.replace(path)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        logger.error("Failed to write %s: %s", path, e)
        raise ConfigError(f"Cannot write {path}: {e}") from e

    logger.debug("Wrote %s", path)
