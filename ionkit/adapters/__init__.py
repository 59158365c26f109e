"""Adapters — one per project type, behind a common contract.

Public re-exports for convenient access.
"""

from ionkit.adapters.base import InfoItem, Project, ProjectDeps
from ionkit.adapters.registry import PROJECT_CLASSES, create_project_from_type
from ionkit.adapters.runners import RUNNER_ACTIONS, Runner

__all__ = [
    "InfoItem",
    "PROJECT_CLASSES",
    "Project",
    "ProjectDeps",
    "RUNNER_ACTIONS",
    "Runner",
    "create_project_from_type",
]
