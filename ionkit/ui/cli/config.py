"""
CLI commands for the project file — get, set, and unset keys.

In a multi-app workspace these operate on the active sub-project
(``projects.<name>``) unless ``--root`` is given.
"""

from __future__ import annotations

import json
import sys

import click

from ionkit.core.config.loader import project_file_path
from ionkit.core.config.project_file import ProjectConfigFile
from ionkit.core.errors import ConfigError
from ionkit.core.models.details import ProjectDetailsErrorCode
from ionkit.ui.cli.helpers import detect_from_context

_root_option = click.option(
    "--root",
    "use_root",
    is_flag=True,
    help="Operate on the whole project file, not the active sub-project.",
)


def _open_config(ctx: click.Context, use_root: bool) -> ProjectConfigFile:
    """Open the project file scoped to the active project; exits on failure."""
    result = detect_from_context(ctx)
    config_path = project_file_path(result.root_directory)

    if not config_path.is_file():
        click.secho(f"❌ No project file found at {config_path}", fg="red")
        sys.exit(1)

    prefix: tuple[str, ...] = ()
    if not use_root and result.name:
        if ProjectDetailsErrorCode.MULTI_MISSING_CONFIG in result.details.error_codes:
            click.secho(f"❌ Project {result.name} is not in {config_path}", fg="red")
            click.echo("   Use --root to edit the whole project file.")
            sys.exit(1)
        prefix = ("projects", result.name)

    try:
        return ProjectConfigFile(config_path, path_prefix=prefix)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group("config")
def config() -> None:
    """Config — read and write the project file."""


@config.command("get")
@click.argument("key", required=False)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@_root_option
@click.pass_context
def get(ctx: click.Context, key: str | None, as_json: bool, use_root: bool) -> None:
    """Print a config value (or the whole config without KEY)."""
    cfg = _open_config(ctx, use_root)
    value = cfg.c if key is None else cfg.get(key)

    if value is None and not as_json:
        click.secho(f"⚠️  {key} is not set", fg="yellow")
        sys.exit(1)

    if isinstance(value, str) and not as_json:
        click.echo(value)
    else:
        click.echo(json.dumps(value, indent=2))


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--json", "as_json", is_flag=True, help="Parse VALUE as JSON.")
@_root_option
@click.pass_context
def set_(ctx: click.Context, key: str, value: str, as_json: bool, use_root: bool) -> None:
    """Set KEY to VALUE."""
    parsed: object = value
    if as_json:
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as e:
            click.secho(f"❌ Invalid JSON value: {e}", fg="red")
            sys.exit(1)

    cfg = _open_config(ctx, use_root)
    try:
        cfg.set(key, parsed)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ {key} set", fg="green")


@config.command("unset")
@click.argument("key")
@_root_option
@click.pass_context
def unset(ctx: click.Context, key: str, use_root: bool) -> None:
    """Remove KEY."""
    cfg = _open_config(ctx, use_root)
    try:
        cfg.unset(key)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ {key} unset", fg="green")
