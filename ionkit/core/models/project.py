"""
Project file models — the shapes a project file can take.

A project file is either a single-app config (one project) or a
multi-app config (a named mapping of sub-projects, each shaped like a
single-app config).  The shape is tested on the raw document before
validation so that an unrecognized file is reported as such instead of
as a validation failure.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ProjectType(StrEnum):
    """Supported project kinds, in detection priority order."""

    ANGULAR = "angular"
    IONIC_ANGULAR = "ionic-angular"
    IONIC1 = "ionic1"
    CUSTOM = "custom"


# Detection tries these in order, first match wins
PROJECT_TYPES: tuple[str, ...] = tuple(t.value for t in ProjectType)

DocumentShape = Literal["app", "multiapp", "unknown"]


class ProjectIntegration(BaseModel):
    """An integration entry (e.g. ``cordova``) in a project config."""

    model_config = ConfigDict(extra="allow")

    enabled: bool = True
    root: str | None = None


class ProjectConfig(BaseModel):
    """Single-app configuration.

    Also the shape of every entry under ``projects`` in a multi-app file.
    Keys this model does not know about are preserved.
    """

    model_config = ConfigDict(extra="allow")

    name: str = ""
    type: Any = None                 # validated by resolution, not here
    root: str | None = None          # sub-project dir, relative to the workspace root
    integrations: dict[str, ProjectIntegration] = Field(default_factory=dict)
    pro_id: str | None = None


class MultiProjectConfig(BaseModel):
    """Multi-app configuration — a named collection of projects.

    Entries under ``projects`` are kept raw; only the active one is
    validated, with ``project()``, so a broken sibling does not stop
    resolution.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    projects: dict[str, Any] = Field(default_factory=dict)
    default_project: Any = Field(default=None, alias="defaultProject")

    def project(self, name: str) -> ProjectConfig:
        """The named entry validated as a ``ProjectConfig``.

        Raises:
            pydantic.ValidationError: The entry is not a valid project config.
        """
        return ProjectConfig.model_validate(self.projects[name])


def pretty_project_name(project_type: Any) -> str:
    """Human-friendly label for a project type."""
    if not project_type:
        return "Unknown"
    if not isinstance(project_type, str):
        return str(project_type)

    labels = {
        ProjectType.ANGULAR: "@ionic/angular",
        ProjectType.IONIC_ANGULAR: "Ionic 2/3",
        ProjectType.IONIC1: "Ionic 1",
    }
    return labels.get(project_type, str(project_type))


def is_project_config(document: Any) -> bool:
    """Whether a raw document has the single-app shape."""
    if not isinstance(document, dict) or "projects" in document:
        return False
    return isinstance(document.get("name"), str) or isinstance(document.get("type"), str)


def is_multi_project_config(document: Any) -> bool:
    """Whether a raw document has the multi-app shape."""
    if not isinstance(document, dict) or "name" in document:
        return False
    return isinstance(document.get("projects"), dict)


def classify_document(document: Any) -> DocumentShape:
    """Classify a parsed project file as ``app``, ``multiapp`` or ``unknown``."""
    if is_project_config(document):
        return "app"
    if is_multi_project_config(document):
        return "multiapp"
    return "unknown"
