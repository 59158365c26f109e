"""
Project details — the outcome of resolving a workspace.

Resolution never raises for the conditions listed in
``ProjectDetailsErrorCode``.  Each one is recorded as a
``ProjectDetailsError`` value on the result, and the caller decides
whether to present, inspect, or ignore it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar

from ionkit.core.models.project import MultiProjectConfig, ProjectConfig, ProjectType


class ProjectDetailsErrorCode(StrEnum):
    """Unique code for each resolution problem."""

    INVALID_FILE = "ERR_INVALID_PROJECT_FILE"
    INVALID_TYPE = "ERR_INVALID_PROJECT_TYPE"
    MISSING_TYPE = "ERR_MISSING_PROJECT_TYPE"
    MULTI_MISSING_CONFIG = "ERR_MULTI_MISSING_CONFIG"
    MULTI_MISSING_NAME = "ERR_MULTI_MISSING_NAME"


@dataclass(frozen=True)
class ProjectDetailsError:
    """A single resolution problem.

    ``cause`` is the underlying exception, when there is one.  It is left
    out of equality so two resolutions of the same broken file compare
    equal.
    """

    message: str
    code: ProjectDetailsErrorCode
    cause: BaseException | None = field(default=None, compare=False)

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result


@dataclass
class ProjectDetailsResult:
    """Base result — fields every context carries."""

    config_path: Path
    type: ProjectType | None = None
    errors: list[ProjectDetailsError] = field(default_factory=list)

    context: ClassVar[str] = "unknown"

    @property
    def error_codes(self) -> list[ProjectDetailsErrorCode]:
        return [e.code for e in self.errors]

    def find_error(self, code: ProjectDetailsErrorCode) -> ProjectDetailsError | None:
        """First recorded error with the given code, if any."""
        for err in self.errors:
            if err.code == code:
                return err
        return None

    def _config_dict(self) -> Any:
        return None

    def to_dict(self) -> dict:
        return {
            "context": self.context,
            "config_path": str(self.config_path),
            "type": self.type.value if self.type else None,
            "config": self._config_dict(),
            "errors": [e.to_dict() for e in self.errors],
        }


@dataclass
class SingleAppResult(ProjectDetailsResult):
    """Resolution of a single-app project file."""

    config: ProjectConfig = field(default_factory=ProjectConfig)

    context: ClassVar[str] = "app"

    def _config_dict(self) -> Any:
        return self.config.model_dump(mode="json", exclude_none=True)


@dataclass
class MultiAppResult(ProjectDetailsResult):
    """Resolution of a multi-app project file."""

    config: MultiProjectConfig = field(default_factory=MultiProjectConfig)
    name: str | None = None

    context: ClassVar[str] = "multiapp"

    def _config_dict(self) -> Any:
        return self.config.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_dict(self) -> dict:
        result = super().to_dict()
        result["name"] = self.name
        return result


@dataclass
class UnknownResult(ProjectDetailsResult):
    """The project file was unreadable or of no recognized shape."""

    config: Any = None

    def _config_dict(self) -> Any:
        return self.config
