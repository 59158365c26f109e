"""
Runner model — the toolchain a project delegates an action to.

A runner says *which* command handles build / serve / generate for a
project and where it runs.  Executing it is the toolchain's business.
"""

from __future__ import annotations

import shlex
from typing import Literal

from pydantic import BaseModel, Field

from ionkit.core.models.project import ProjectType

RunnerAction = Literal["build", "serve", "generate"]

RUNNER_ACTIONS: tuple[RunnerAction, ...] = ("build", "serve", "generate")


class Runner(BaseModel):
    """A resolved runner for one action of one project."""

    action: RunnerAction
    project_type: ProjectType
    command: list[str] = Field(default_factory=list)
    cwd: str = "."

    @property
    def command_line(self) -> str:
        """The command as a shell-quoted string."""
        return shlex.join(self.command)

    def with_args(self, args: list[str]) -> Runner:
        """A copy of this runner with extra arguments appended."""
        return self.model_copy(update={"command": [*self.command, *args]})
