"""
Project file config — the project file seen through the config store.

Adds the project defaults and the pre-4.0 ``app_id`` migration.
"""

from __future__ import annotations

import logging
from typing import Any

from ionkit.core.config.store import JsonConfig
from ionkit.core.models.project import ProjectConfig

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_NAME = "New Ionic App"


class ProjectConfigFile(JsonConfig):
    """One project's config, scoped with ``("projects", name)`` for multi-app files.

    On load, a string ``app_id`` is removed; when it is non-empty its value
    is first copied to ``pro_id``.  An existing ``pro_id`` is overwritten
    in that case.
    """

    def provide_defaults(self) -> dict[str, Any]:
        return {
            "name": DEFAULT_PROJECT_NAME,
            "integrations": {},
        }

    def migrate(self) -> None:
        app_id = self.get("app_id")
        if not isinstance(app_id, str):
            return

        if app_id:
            logger.info("Migrating app_id '%s' to pro_id in %s", app_id, self.path)
            self.set("pro_id", app_id)

        self.unset("app_id")

    def model(self) -> ProjectConfig:
        """The scoped config validated as a ``ProjectConfig``."""
        return ProjectConfig.model_validate(self.c)
