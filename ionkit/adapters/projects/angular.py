"""
Angular adapter — ``@ionic/angular`` apps built with the Angular CLI.
"""

from __future__ import annotations

from ionkit.adapters.base import Project
from ionkit.core.models.project import ProjectType


class AngularProject(Project):
    """An ``@ionic/angular`` app (detected via ``package.json``)."""

    runner_commands = {
        "build": ["ng", "build"],
        "serve": ["ng", "serve"],
        "generate": ["ng", "generate"],
    }

    @property
    def type(self) -> ProjectType:
        return ProjectType.ANGULAR
