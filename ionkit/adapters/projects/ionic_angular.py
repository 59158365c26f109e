"""
Ionic 2/3 adapter — ``ionic-angular`` apps built with app-scripts.
"""

from __future__ import annotations

from ionkit.adapters.base import Project
from ionkit.core.models.project import ProjectType


class IonicAngularProject(Project):
    runner_commands = {
        "build": ["ionic-app-scripts", "build"],
        "serve": ["ionic-app-scripts", "serve"],
        "generate": ["ionic-app-scripts", "generate"],
    }
    docs_url = "https://ionicframework.com/docs/v3/"

    @property
    def type(self) -> ProjectType:
        return ProjectType.IONIC_ANGULAR
