"""
Detect use case — from a directory to a live project adapter.

Ties together workspace discovery, resolution, diagnostics, and the
project registry.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ionkit.adapters.base import Project, ProjectDeps
from ionkit.adapters.registry import create_project_from_type
from ionkit.core.config.loader import find_project_directory
from ionkit.core.models.details import MultiAppResult, ProjectDetailsResult
from ionkit.core.services.diagnostics import Diagnostic, process_result, report
from ionkit.core.services.resolution import ProjectDetails

logger = logging.getLogger(__name__)


@dataclass
class DetectResult:
    """Result of the detect use case."""

    root_directory: Path
    details: ProjectDetailsResult
    diagnostics: list[Diagnostic] = field(default_factory=list)
    project: Project | None = None

    @property
    def name(self) -> str | None:
        """Active sub-project name (multi-app workspaces only)."""
        if isinstance(self.details, MultiAppResult):
            return self.details.name
        return None

    def to_dict(self) -> dict:
        result = self.details.to_dict()
        result["root_directory"] = str(self.root_directory)
        result["diagnostics"] = [d.to_dict() for d in self.diagnostics]
        result["project"] = (
            [item.model_dump(mode="json") for item in self.project.get_info()]
            if self.project
            else None
        )
        return result


def project_from_result(result: ProjectDetailsResult, deps: ProjectDeps) -> Project | None:
    """Build the adapter for a resolved result (None when no type resolved)."""
    if result.type is None:
        return None

    name = result.name if isinstance(result, MultiAppResult) else None
    return create_project_from_type(result.config_path, name, deps, result.type)


def create_project_from_directory(
    root_directory: Path,
    args: Mapping[str, Any] | None,
    deps: ProjectDeps,
    *,
    log_errors: bool = True,
) -> Project | None:
    """Resolve a workspace and build its project adapter.

    Args:
        root_directory: The workspace root.
        args: Parsed CLI arguments (``project`` selects a sub-project).
        deps: Process context.
        log_errors: Log diagnostics for any resolution problems.

    Returns:
        The project adapter, or None if no type could be determined.
    """
    details = ProjectDetails(root_directory, args=args, deps=deps)
    result = details.result()
    logger.debug(
        "Project details: context=%s type=%s errors=%s",
        result.context,
        result.type,
        [e.code.value for e in result.errors],
    )

    if log_errors:
        process_result(result)

    return project_from_result(result, deps)


def run_detect(
    root_directory: Path | None = None,
    project_name: str | None = None,
    deps: ProjectDeps | None = None,
) -> DetectResult:
    """Resolve the workspace containing the execution path.

    Args:
        root_directory: Explicit workspace root.  If None, searches upward
            from ``deps.exec_path``; falls back to the exec path itself.
        project_name: Value of the ``--project`` option.
        deps: Process context (default: current directory).

    Returns:
        DetectResult with resolution details, diagnostics, and (when a
        type was resolved) the project adapter.
    """
    deps = deps or ProjectDeps()

    if root_directory is None:
        root_directory = find_project_directory(deps.exec_path) or deps.exec_path
    root_directory = Path(root_directory).resolve()

    args = {"project": project_name} if project_name else {}
    details = ProjectDetails(root_directory, args=args, deps=deps).result()

    return DetectResult(
        root_directory=root_directory,
        details=details,
        diagnostics=report(details),
        project=project_from_result(details, deps),
    )
