"""
Diagnostics — turn resolution errors into user-facing messages.

``report()`` is pure: it reads a result and returns messages, one per
recognized error code.  Codes are not assumed to be exclusive.
``process_result()`` sends those messages through logging; the CLI
renders them itself.
"""

from __future__ import annotations

import logging
import textwrap
from dataclasses import dataclass
from typing import Literal

from ionkit.core.models.details import (
    MultiAppResult,
    ProjectDetailsErrorCode,
    ProjectDetailsResult,
)
from ionkit.core.models.project import PROJECT_TYPES, ProjectType, pretty_project_name

logger = logging.getLogger(__name__)

MULTI_APP_DOCS_URL = "https://ionicframework.com/docs/cli/configuration#multi-app-projects"

_WRAP_WIDTH = 80 - 8 - 3


@dataclass(frozen=True)
class Diagnostic:
    """A rendered message for one resolution problem."""

    level: Literal["error", "warning"]
    code: ProjectDetailsErrorCode
    text: str

    def to_dict(self) -> dict:
        return {"level": self.level, "code": self.code.value, "text": self.text}


def _bullet(text: str) -> str:
    wrapped = textwrap.fill(text, width=_WRAP_WIDTH, subsequent_indent="  ")
    return f"- {wrapped}"


def _type_hints() -> str:
    return "\n".join(
        [
            _bullet(
                f"For {pretty_project_name(ProjectType.ANGULAR)} projects, make sure "
                "@ionic/angular is listed as a dependency in package.json."
            ),
            _bullet(
                f"For {pretty_project_name(ProjectType.IONIC_ANGULAR)} projects, make sure "
                "ionic-angular is listed as a dependency in package.json."
            ),
            _bullet(
                f"For {pretty_project_name(ProjectType.IONIC1)} projects, make sure "
                "ionic is listed as a dependency in bower.json."
            ),
        ]
    )


def report(result: ProjectDetailsResult) -> list[Diagnostic]:
    """Render every recognized error on a result.

    Returns an empty list for a clean result.
    """
    diagnostics: list[Diagnostic] = []
    codes = result.error_codes
    config_path = result.config_path
    type_list = ", ".join(PROJECT_TYPES)

    invalid_file = result.find_error(ProjectDetailsErrorCode.INVALID_FILE)
    if invalid_file:
        cause = str(invalid_file.cause) if invalid_file.cause else invalid_file.code.value
        diagnostics.append(
            Diagnostic(
                level="error",
                code=invalid_file.code,
                text=(
                    "Error while loading project config file.\n"
                    f"Attempted to load project config {config_path} but got error:\n\n"
                    f"{cause}"
                ),
            )
        )

    if isinstance(result, MultiAppResult):
        if ProjectDetailsErrorCode.MULTI_MISSING_NAME in codes:
            diagnostics.append(
                Diagnostic(
                    level="warning",
                    code=ProjectDetailsErrorCode.MULTI_MISSING_NAME,
                    text=(
                        "Multi-app workspace detected, but cannot determine which project to use.\n"
                        f"Please set a defaultProject in {config_path} or specify the project "
                        "using the global --project option. Read the documentation[1] for more "
                        "information.\n\n"
                        f"[1]: {MULTI_APP_DOCS_URL}"
                    ),
                )
            )

        if result.name and ProjectDetailsErrorCode.MULTI_MISSING_CONFIG in codes:
            diagnostics.append(
                Diagnostic(
                    level="warning",
                    code=ProjectDetailsErrorCode.MULTI_MISSING_CONFIG,
                    text=(
                        "Multi-app workspace detected, but project was not found in configuration.\n"
                        f"Project {result.name} could not be found in the workspace. "
                        f"Did you add it to {config_path}?"
                    ),
                )
            )

    if ProjectDetailsErrorCode.MISSING_TYPE in codes:
        diagnostics.append(
            Diagnostic(
                level="warning",
                code=ProjectDetailsErrorCode.MISSING_TYPE,
                text=(
                    f"Could not determine project type (project config: {config_path}).\n"
                    f"{_type_hints()}\n\n"
                    f"Alternatively, set type attribute in {config_path} to one of: {type_list}.\n\n"
                    "If ionkit does not know what type of project this is, build, serve, and "
                    "other commands may not work. You can use the custom project type if "
                    "that's okay."
                ),
            )
        )

    invalid_type = result.find_error(ProjectDetailsErrorCode.INVALID_TYPE)
    if invalid_type:
        diagnostics.append(
            Diagnostic(
                level="error",
                code=invalid_type.code,
                text=(
                    f"{invalid_type.message} (project config: {config_path}).\n"
                    f"Project type must be one of: {type_list}"
                ),
            )
        )

    return diagnostics


def process_result(result: ProjectDetailsResult) -> list[Diagnostic]:
    """Log every diagnostic for a result and return them."""
    diagnostics = report(result)
    for diag in diagnostics:
        if diag.level == "error":
            logger.error(diag.text)
        else:
            logger.warning(diag.text)
    return diagnostics
