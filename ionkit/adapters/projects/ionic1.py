"""
Ionic 1 adapter — AngularJS apps managed by the v1 toolkit.

Ionic 1 apps keep their sources directly in ``www`` and are detected
through ``bower.json``.  The v1 toolkit has no generators.
"""

from __future__ import annotations

from ionkit.adapters.base import Project
from ionkit.core.models.project import ProjectType


class Ionic1Project(Project):
    runner_commands = {
        "build": ["ionic-v1", "build"],
        "serve": ["ionic-v1", "serve"],
    }
    docs_url = "https://ionicframework.com/docs/v1/"
    source_dir_name = "www"

    @property
    def type(self) -> ProjectType:
        return ProjectType.IONIC1
