"""
Custom adapter — projects ionkit knows nothing about.

Never detected; only used when the project file says
``"type": "custom"``.  No runners, so build / serve / generate are
reported as unavailable.
"""

from __future__ import annotations

from ionkit.adapters.base import Project
from ionkit.core.models.project import ProjectType


class CustomProject(Project):
    def detected(self) -> bool:
        return False

    @property
    def type(self) -> ProjectType:
        return ProjectType.CUSTOM
