"""
Shared CLI helpers — resolve the workspace from click context, render diagnostics.
"""

from __future__ import annotations

from pathlib import Path

import click

from ionkit.adapters.base import ProjectDeps
from ionkit.core.services.diagnostics import Diagnostic
from ionkit.core.use_cases.detect import DetectResult, run_detect

_LEVEL_STYLE = {
    "error": ("❌", "red"),
    "warning": ("⚠️ ", "yellow"),
}


def detect_from_context(ctx: click.Context) -> DetectResult:
    """Run resolution with the global ``--dir`` and ``--project`` options."""
    return run_detect(
        root_directory=ctx.obj.get("root_directory"),
        project_name=ctx.obj.get("project_name"),
        deps=ProjectDeps(exec_path=Path.cwd()),
    )


def echo_diagnostics(diagnostics: list[Diagnostic]) -> None:
    """Print diagnostics to stderr, errors in red and warnings in yellow."""
    for diag in diagnostics:
        icon, color = _LEVEL_STYLE.get(diag.level, ("•", "white"))
        lines = diag.text.split("\n")
        click.echo(err=True)
        click.secho(f"{icon} {lines[0]}", fg=color, bold=True, err=True)
        for line in lines[1:]:
            click.echo(f"   {line}" if line else "", err=True)
