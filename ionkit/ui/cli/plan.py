"""
CLI command to show which toolchain a build / serve / generate delegates to.

Nothing is executed: ionkit resolves the project and reports the
runner its type provides.
"""

from __future__ import annotations

import json
import sys

import click

from ionkit.adapters.runners import RUNNER_ACTIONS
from ionkit.core.models.project import pretty_project_name
from ionkit.ui.cli.helpers import detect_from_context, echo_diagnostics


@click.command("plan")
@click.argument("action", type=click.Choice(RUNNER_ACTIONS))
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def plan(ctx: click.Context, action: str, extra_args: tuple[str, ...], as_json: bool) -> None:
    """Show the command ACTION would delegate to.

    Examples:

        ionkit plan build

        ionkit --project admin plan serve -- --port 8100
    """
    result = detect_from_context(ctx)
    project = result.project

    if project is None:
        if as_json:
            click.echo(json.dumps({"action": action, "error": "unknown project type"}, indent=2))
            return
        echo_diagnostics(result.diagnostics)
        click.secho("❌ Could not determine project type.", fg="red")
        sys.exit(1)

    runner = project.get_runner(action)
    if runner is not None and extra_args:
        runner = runner.with_args(list(extra_args))

    if as_json:
        click.echo(json.dumps({
            "action": action,
            "project_type": project.type.value,
            "available": runner is not None,
            "runner": runner.model_dump(mode="json") if runner else None,
        }, indent=2))
        return

    label = pretty_project_name(project.type)
    if runner is None:
        click.secho(f"⊘ {action} is not available for {label} projects.", fg="yellow")
        return

    click.secho(f"⚡ {action} — {label}", fg="cyan", bold=True)
    click.echo(f"   Command: {runner.command_line}")
    click.echo(f"   In:      {runner.cwd}")
