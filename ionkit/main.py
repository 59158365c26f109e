"""
ionkit — CLI entrypoint.

Usage:
    python -m ionkit.main --help
    python -m ionkit.main detect
    python -m ionkit.main --project admin info
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from ionkit import __version__
from ionkit.core.models.project import pretty_project_name
from ionkit.core.observability.logging_config import setup_from_environment
from ionkit.ui.cli.helpers import detect_from_context, echo_diagnostics

CONTEXT_LABELS = {
    "app": "single-app",
    "multiapp": "multi-app",
    "unknown": "unknown",
}


@click.group()
@click.version_option(version=__version__, prog_name="ionkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--project",
    "project_name",
    default=None,
    help="Sub-project to use in a multi-app workspace.",
)
@click.option(
    "--dir",
    "root_directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace root (default: search upward from the current directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    project_name: str | None,
    root_directory: Path | None,
) -> None:
    """ionkit — find out which project a workspace is."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["project_name"] = project_name
    ctx.obj["root_directory"] = root_directory

    setup_from_environment(debug=debug, verbose=verbose, quiet=quiet)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def detect(ctx: click.Context, as_json: bool) -> None:
    """Resolve the workspace's project context, name, and type."""
    result = detect_from_context(ctx)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    details = result.details
    quiet = ctx.obj.get("quiet", False)

    if not quiet:
        click.secho(f"\n🔍 Workspace: {result.root_directory}", fg="cyan", bold=True)
        click.echo(f"   Config:  {details.config_path}")
        click.echo(f"   Context: {CONTEXT_LABELS.get(details.context, details.context)}")
        if result.name:
            click.echo(f"   Project: {result.name}")

    if details.type:
        click.secho(f"   Type:    {pretty_project_name(details.type)} ", fg="green", nl=False)
        click.echo(f"({details.type.value})")
    else:
        click.secho("   Type:    unknown", fg="red")

    echo_diagnostics(result.diagnostics)
    click.echo()

    if details.type is None:
        sys.exit(1)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def info(ctx: click.Context, as_json: bool) -> None:
    """Show details about the resolved project."""
    result = detect_from_context(ctx)
    project = result.project

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if project is None:
        echo_diagnostics(result.diagnostics)
        click.secho("❌ Could not determine project type.", fg="red")
        sys.exit(1)

    click.secho(f"\n📋 {project.config.get('name')}", fg="cyan", bold=True)

    current_group = None
    for item in project.get_info():
        if item.group != current_group:
            current_group = item.group
            click.echo()
            click.secho(f"   {current_group.capitalize()}:", fg="white", bold=True)
        click.echo(f"     • {item.key}: {item.value}")

    click.echo()


# ── Register sub-command groups from ionkit/ui/cli/ ────────────────

from ionkit.ui.cli.config import config
from ionkit.ui.cli.docs import docs
from ionkit.ui.cli.plan import plan

cli.add_command(config)
cli.add_command(docs)
cli.add_command(plan)


if __name__ == "__main__":
    cli()
