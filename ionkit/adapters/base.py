"""
Project adapter base — the contract between the CLI and a project type.

A project adapter hides everything type-specific: how the type is
detected, where its sources live, and which toolchain runner handles
build / serve / generate.  The CLI only talks to projects through this
interface and only obtains them from the registry.

To add a project type:
    1. Add it to ``ProjectType`` and ``fingerprints.yml``
    2. Subclass Project, implement ``type`` and declare ``runner_commands``
    3. Register the class in ``PROJECT_CLASSES``
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel

from ionkit.adapters.runners import Runner, RunnerAction
from ionkit.core.config.fingerprint_loader import fingerprint_for
from ionkit.core.config.project_file import ProjectConfigFile
from ionkit.core.errors import FatalError, RunnerNotFoundError
from ionkit.core.models.fingerprint import Fingerprint
from ionkit.core.models.project import ProjectIntegration, ProjectType, pretty_project_name
from ionkit.core.services.detection import match_fingerprint

logger = logging.getLogger(__name__)

DEFAULT_DOCS_URL = "https://ionicframework.com/docs"


@dataclass(frozen=True)
class ProjectDeps:
    """What a project adapter needs from the invoking process."""

    exec_path: Path = field(default_factory=Path.cwd)


class InfoItem(BaseModel):
    """One line of ``ionkit info`` output."""

    group: str = "project"
    key: str
    value: str
    path: str | None = None


class Project(ABC):
    """Abstract base class for all project types.

    Args:
        file_path: The project file.
        name: If provided, this is a multi-app workspace and the adapter
            works on the project with this name.  Otherwise single-app.
        deps: Process context (execution path).
    """

    runner_commands: ClassVar[dict[RunnerAction, list[str]]] = {}
    docs_url: ClassVar[str] = DEFAULT_DOCS_URL
    source_dir_name: ClassVar[str] = "src"
    dist_dir_name: ClassVar[str] = "www"

    def __init__(self, file_path: Path, name: str | None, deps: ProjectDeps):
        self.file_path = Path(file_path)
        self.name = name
        self.deps = deps

    @property
    @abstractmethod
    def type(self) -> ProjectType:
        """The project type this adapter handles."""

    # ── Location & config ───────────────────────────────────────

    @property
    def root_directory(self) -> Path:
        """The workspace root (directory holding the project file)."""
        return self.file_path.parent

    @property
    def config(self) -> ProjectConfigFile:
        """This project's config, read fresh from disk on every access."""
        return self._open_config(migrate=True)

    def _open_config(self, migrate: bool) -> ProjectConfigFile:
        prefix = () if self.name is None else ("projects", self.name)
        return ProjectConfigFile(self.file_path, path_prefix=prefix, migrate=migrate)

    @property
    def directory(self) -> Path:
        """The project's own directory (``root`` from config, if set)."""
        # Read-only: detection goes through here and must not write
        root = self._open_config(migrate=False).get("root")
        if not root:
            return self.root_directory
        return (self.root_directory / root).resolve()

    @property
    def package_json_path(self) -> Path:
        return self.directory / "package.json"

    def get_source_dir(self) -> Path:
        return self.directory / self.source_dir_name

    def get_dist_dir(self) -> Path:
        return self.directory / self.dist_dir_name

    def get_docs_url(self) -> str:
        return self.docs_url

    # ── Detection ───────────────────────────────────────────────

    @property
    def fingerprint(self) -> Fingerprint:
        return fingerprint_for(self.type)

    def detected(self) -> bool:
        """Whether the project directory matches this type's fingerprint."""
        return match_fingerprint(self.directory, self.fingerprint)

    # ── Runners ─────────────────────────────────────────────────

    def require_runner(self, action: RunnerAction) -> Runner:
        """The runner for an action.

        Raises:
            RunnerNotFoundError: This project type has no such runner.
        """
        command = self.runner_commands.get(action)
        if not command:
            raise RunnerNotFoundError(
                f"Cannot perform {action}: no runner for "
                f"{pretty_project_name(self.type)} projects."
            )
        return Runner(
            action=action,
            project_type=self.type,
            command=list(command),
            cwd=str(self.directory),
        )

    def get_runner(self, action: RunnerAction) -> Runner | None:
        """The runner for an action, or None if the type has none."""
        try:
            return self.require_runner(action)
        except RunnerNotFoundError as e:
            logger.debug("%s", e)
            return None

    def require_build_runner(self) -> Runner:
        return self.require_runner("build")

    def require_serve_runner(self) -> Runner:
        return self.require_runner("serve")

    def require_generate_runner(self) -> Runner:
        return self.require_runner("generate")

    def get_build_runner(self) -> Runner | None:
        return self.get_runner("build")

    def get_serve_runner(self) -> Runner | None:
        return self.get_runner("serve")

    def get_generate_runner(self) -> Runner | None:
        return self.get_runner("generate")

    # ── Pro link ────────────────────────────────────────────────

    def require_pro_id(self) -> str:
        """The linked app id.

        Raises:
            FatalError: The project file has no ``pro_id``.
        """
        pro_id = self.config.get("pro_id")
        if not pro_id:
            raise FatalError(
                f"Your project file ({self.file_path}) does not contain 'pro_id'. "
                "Run 'ionkit config set pro_id <id>'."
            )
        return pro_id

    # ── Integrations ────────────────────────────────────────────

    def get_integration(self, name: str) -> ProjectIntegration | None:
        """An integration entry with ``root`` resolved to an absolute path."""
        raw = (self.config.get("integrations") or {}).get(name)
        if raw is None:
            return None

        integration = ProjectIntegration.model_validate(raw)
        if integration.root is None:
            root = self.directory
        else:
            root = (self.root_directory / integration.root).resolve()
        return integration.model_copy(update={"root": str(root)})

    def require_integration(self, name: str) -> ProjectIntegration:
        """Like ``get_integration``, but the integration must exist and be enabled.

        Raises:
            FatalError: The integration is missing or disabled.
        """
        integration = self.get_integration(name)
        label = self.name or "default"

        if integration is None:
            raise FatalError(f"Could not find {name} integration in the {label} project.")
        if not integration.enabled:
            raise FatalError(f"{name} integration is disabled in the {label} project.")
        return integration

    def enabled_integrations(self) -> list[str]:
        """Names of integrations that are not explicitly disabled."""
        integrations = self.config.get("integrations") or {}
        return [
            name
            for name, entry in integrations.items()
            if entry is not None and (not isinstance(entry, dict) or entry.get("enabled") is not False)
        ]

    # ── Info ────────────────────────────────────────────────────

    def get_info(self) -> list[InfoItem]:
        """Facts about this project for ``ionkit info``."""
        items = [
            InfoItem(key="type", value=pretty_project_name(self.type)),
            InfoItem(key="directory", value=str(self.directory), path=str(self.directory)),
            InfoItem(key="source", value=str(self.get_source_dir())),
            InfoItem(key="dist", value=str(self.get_dist_dir())),
            InfoItem(key="docs", value=self.get_docs_url()),
        ]
        if self.name is not None:
            items.insert(0, InfoItem(key="name", value=self.name))

        for action in ("build", "serve", "generate"):
            runner = self.get_runner(action)
            items.append(
                InfoItem(
                    group="runners",
                    key=action,
                    value=runner.command_line if runner else "not available",
                )
            )

        for integration in self.enabled_integrations():
            items.append(InfoItem(group="integrations", key=integration, value="enabled"))

        return items

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} type={self.type.value!r} name={self.name!r}>"
