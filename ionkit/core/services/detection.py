"""
Detection service — recognize a project type from directory contents.

Each project type has a fingerprint (see ``fingerprints.yml``): marker
files and/or dependency names in a manifest such as ``package.json``
or ``bower.json``.  Types are tried in ``PROJECT_TYPES`` order and the
first match wins.

Pure logic: reads the filesystem but never writes to it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ionkit.core.models.fingerprint import Fingerprint
from ionkit.core.models.project import PROJECT_TYPES, ProjectType

if TYPE_CHECKING:
    from ionkit.adapters.base import ProjectDeps

logger = logging.getLogger(__name__)


def read_manifest_dependencies(manifest: Path) -> set[str]:
    """Dependency names declared in a JSON manifest.

    Union of ``dependencies`` and ``devDependencies``.  A missing or
    malformed manifest has no dependencies.
    """
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:  # ValueError: bad JSON or bad UTF-8
        logger.debug("Cannot read manifest %s: %s", manifest, e)
        return set()

    if not isinstance(data, dict):
        return set()

    names: set[str] = set()
    for section in ("dependencies", "devDependencies"):
        deps = data.get(section)
        if isinstance(deps, dict):
            names.update(deps)
    return names


def match_fingerprint(directory: Path, rule: Fingerprint) -> bool:
    """Check a directory against a fingerprint.

    - dependencies_any_of: the manifest must list at least one
    - files_any_of: at least one must exist

    A rule with no criteria never matches.
    """
    if rule.is_empty:
        return False

    if rule.files_any_of and not any(
        (directory / f).exists() for f in rule.files_any_of
    ):
        return False

    if rule.dependencies_any_of:
        deps = read_manifest_dependencies(directory / rule.manifest)
        if not any(d in deps for d in rule.dependencies_any_of):
            return False

    return True


def detect(file_path: Path, project_type: str, deps: ProjectDeps, name: str | None = None) -> bool:
    """Whether the workspace matches one project type's fingerprint.

    Args:
        file_path: Path to the project file.
        project_type: Candidate type.
        deps: ``ProjectDeps`` handed to the project adapter.
        name: Sub-project name, for multi-app workspaces.
    """
    from ionkit.adapters.registry import create_project_from_type

    project = create_project_from_type(file_path, name, deps, project_type)
    return project.detected()


def detect_type(file_path: Path, deps: ProjectDeps, name: str | None = None) -> ProjectType | None:
    """Try every supported type in priority order; first match wins."""
    for project_type in PROJECT_TYPES:
        if detect(file_path, project_type, deps, name):
            return ProjectType(project_type)
    return None
