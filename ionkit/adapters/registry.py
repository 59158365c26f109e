"""
Project registry — central dispatch from project type to adapter.

The resolver guarantees that only supported types reach this point,
so an unknown type here is a programming error and fatal.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ionkit.adapters.base import Project, ProjectDeps
from ionkit.adapters.projects.angular import AngularProject
from ionkit.adapters.projects.custom import CustomProject
from ionkit.adapters.projects.ionic1 import Ionic1Project
from ionkit.adapters.projects.ionic_angular import IonicAngularProject
from ionkit.core.errors import FatalError
from ionkit.core.models.project import ProjectType

logger = logging.getLogger(__name__)

PROJECT_CLASSES: dict[ProjectType, type[Project]] = {
    ProjectType.ANGULAR: AngularProject,
    ProjectType.IONIC_ANGULAR: IonicAngularProject,
    ProjectType.IONIC1: Ionic1Project,
    ProjectType.CUSTOM: CustomProject,
}


def create_project_from_type(
    file_path: Path,
    name: str | None,
    deps: ProjectDeps,
    project_type: str,
) -> Project:
    """Instantiate the adapter for a project type.

    Args:
        file_path: The project file.
        name: Sub-project name for multi-app workspaces, else None.
        deps: Process context handed to the adapter.
        project_type: A ``ProjectType`` value.

    Raises:
        FatalError: If the type is not supported.
    """
    try:
        cls = PROJECT_CLASSES[ProjectType(project_type)]
    except (ValueError, KeyError):
        raise FatalError(f"Bad project type: {project_type}") from None

    project = cls(file_path, name, deps)
    logger.debug("Created %r", project)
    return project
