"""
Resolution service — work out which project a workspace is.

Given a workspace root, ``ProjectDetails.result()`` reads the project
file and answers two questions:

    single-app:  what type is the project?
    multi-app:   which sub-project is active, and what type is it?

Each answer comes from an ordered chain of strategies.  A strategy
returns a value or None, and the chain stops at the first value, so
cheap authoritative sources (explicit config, ``--project``) are tried
before filesystem probing.

Resolution never raises for a problem it knows how to describe.  Every
such problem is recorded as a ``ProjectDetailsError`` on the returned
result; use ``diagnostics.report()`` to turn them into messages.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from ionkit.adapters.base import ProjectDeps
from ionkit.core.config.loader import project_file_path, read_json_file
from ionkit.core.errors import ConfigError
from ionkit.core.models.details import (
    MultiAppResult,
    ProjectDetailsError,
    ProjectDetailsErrorCode,
    ProjectDetailsResult,
    SingleAppResult,
    UnknownResult,
)
from ionkit.core.models.project import (
    PROJECT_TYPES,
    MultiProjectConfig,
    ProjectConfig,
    ProjectType,
    classify_document,
    pretty_project_name,
)
from ionkit.core.services.detection import detect_type

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_set(value: Any) -> bool:
    """JSON truthiness: empty objects and arrays still count as set."""
    return isinstance(value, (dict, list)) or bool(value)


def resolve_value(*strategies: Callable[[], T | None]) -> T | None:
    """Run strategies in order and return the first non-empty value.

    Later strategies are never called once one has produced a value.
    """
    for strategy in strategies:
        value = strategy()
        if value:
            return value
    return None


class ProjectDetails:
    """Resolve project identity for one invocation.

    Args:
        root_directory: The workspace root (holds the project file).
        args: Parsed CLI arguments; ``args["project"]`` selects a
            sub-project in multi-app workspaces.
        deps: Process context; ``deps.exec_path`` drives path matching.
    """

    def __init__(
        self,
        root_directory: Path,
        *,
        args: Mapping[str, Any] | None = None,
        deps: ProjectDeps | None = None,
    ):
        self.root_directory = Path(root_directory).resolve()
        self.args: dict[str, Any] = dict(args or {})
        self.deps = deps or ProjectDeps()

    @property
    def config_path(self) -> Path:
        return project_file_path(self.root_directory)

    # ── Name strategies (multi-app) ─────────────────────────────

    def name_from_args(self) -> str | None:
        value = self.args.get("project")
        if not value:
            return None

        name = str(value)
        logger.debug("Project name from args: %s", name)
        return name

    def name_from_path_match(self, config: MultiProjectConfig) -> str | None:
        """First project (in declaration order) whose ``root`` contains the exec path."""
        exec_path = Path(self.deps.exec_path).resolve()

        for name, project in config.projects.items():
            if not isinstance(project, dict):
                continue
            root = project.get("root")
            if not root or not isinstance(root, str):
                continue

            project_dir = (self.root_directory / root).resolve()
            if exec_path.is_relative_to(project_dir):
                logger.debug("Project name from path match: %s", name)
                return name

        return None

    def name_from_default_project(self, config: MultiProjectConfig) -> str | None:
        name = config.default_project
        if not name:
            return None

        logger.debug("Project name from defaultProject: %s", name)
        return str(name)

    # ── Type strategies ─────────────────────────────────────────

    def type_from_config(self, config: ProjectConfig) -> Any:
        """The ``type`` field as written; it may be any JSON value."""
        project_type = config.type
        if not project_type:
            return None

        logger.debug(
            "Project type from config: %s (%s)",
            pretty_project_name(project_type),
            project_type,
        )
        return project_type

    def type_from_detection(self) -> str | None:
        # Sub-projects are detected from the workspace root too
        project_type = detect_type(self.config_path, self.deps)
        if project_type is None:
            return None

        logger.debug(
            "Project type from detection: %s (%s)",
            pretty_project_name(project_type),
            project_type.value,
        )
        return project_type.value

    # ── Determination ───────────────────────────────────────────

    def determine_single_app(self, config: ProjectConfig) -> SingleAppResult:
        """Resolve the type of one project (a single app or the active sub-project)."""
        errors: list[ProjectDetailsError] = []

        found = resolve_value(
            lambda: self.type_from_config(config),
            self.type_from_detection,
        )

        project_type: ProjectType | None = None
        if not found:
            errors.append(
                ProjectDetailsError(
                    "Could not determine project type.",
                    ProjectDetailsErrorCode.MISSING_TYPE,
                )
            )
        elif found not in PROJECT_TYPES:
            errors.append(
                ProjectDetailsError(
                    f"Invalid project type: {found}",
                    ProjectDetailsErrorCode.INVALID_TYPE,
                )
            )
        else:
            project_type = ProjectType(found)

        return SingleAppResult(
            config_path=self.config_path,
            config=config,
            type=project_type,
            errors=errors,
        )

    def determine_multi_app(self, config: MultiProjectConfig) -> MultiAppResult:
        """Resolve the active sub-project, then its type."""
        errors: list[ProjectDetailsError] = []

        name = resolve_value(
            self.name_from_args,
            lambda: self.name_from_path_match(config),
            lambda: self.name_from_default_project(config),
        )

        project_type: ProjectType | None = None

        if not name:
            errors.append(
                ProjectDetailsError(
                    "Could not determine project name.",
                    ProjectDetailsErrorCode.MULTI_MISSING_NAME,
                )
            )
        elif not _is_set(config.projects.get(name)):
            errors.append(
                ProjectDetailsError(
                    "Could not find project in config.",
                    ProjectDetailsErrorCode.MULTI_MISSING_CONFIG,
                )
            )
        else:
            try:
                app = config.project(name)
            except ValidationError as e:
                errors.append(
                    ProjectDetailsError(
                        f"Invalid config for project {name}.",
                        ProjectDetailsErrorCode.INVALID_FILE,
                        e,
                    )
                )
            else:
                inner = self.determine_single_app(app)
                project_type = inner.type
                errors.extend(inner.errors)

        return MultiAppResult(
            config_path=self.config_path,
            config=config,
            name=name,
            type=project_type,
            errors=errors,
        )

    def result(self) -> ProjectDetailsResult:
        """Gather project details from the project file.

        Always returns a result; problems are listed in ``result.errors``.
        An unreadable project file stops resolution immediately.
        """
        config_path = self.config_path

        try:
            document = read_json_file(config_path)
        except (OSError, ConfigError) as e:
            logger.debug("Cannot load project file %s: %s", config_path, e)
            return UnknownResult(
                config_path=config_path,
                errors=[
                    ProjectDetailsError(
                        "Could not read project file.",
                        ProjectDetailsErrorCode.INVALID_FILE,
                        e,
                    )
                ],
            )

        shape = classify_document(document)
        if shape == "unknown":
            return UnknownResult(config_path=config_path, config=document)

        try:
            if shape == "app":
                single = ProjectConfig.model_validate(document)
            else:
                multi = MultiProjectConfig.model_validate(document)
        except ValidationError as e:
            return UnknownResult(
                config_path=config_path,
                config=document,
                errors=[
                    ProjectDetailsError(
                        "Invalid project file.",
                        ProjectDetailsErrorCode.INVALID_FILE,
                        e,
                    )
                ],
            )

        if shape == "app":
            return self.determine_single_app(single)
        return self.determine_multi_app(multi)

    resolve = result
