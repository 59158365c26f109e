"""
CLI command for documentation — print or open the docs for a topic.

The docs site depends on the resolved project type; outside a workspace
the default docs are used.
"""

from __future__ import annotations

import sys

import click

from ionkit.adapters.base import DEFAULT_DOCS_URL
from ionkit.ui.cli.helpers import detect_from_context

DOC_TOPICS: dict[str, str] = {
    "api": "api",
    "cli": "cli",
    "components": "components",
    "layout": "layout/structure",
    "native": "native",
    "theming": "theming/basics",
}


def docs_url(base: str, topic: str | None) -> str:
    """URL of a topic under a docs base URL."""
    base = base.rstrip("/")
    if not topic:
        return base
    return f"{base}/{DOC_TOPICS[topic]}"


@click.command("docs")
@click.argument("topic", required=False)
@click.option("--browser", is_flag=True, help="Open the page in a web browser.")
@click.pass_context
def docs(ctx: click.Context, topic: str | None, browser: bool) -> None:
    """Show the documentation URL for TOPIC (use "ls" to list topics)."""
    if topic == "ls":
        click.secho("📚 Documentation topics:", fg="cyan", bold=True)
        for name in DOC_TOPICS:
            click.echo(f"   • {name}")
        return

    if topic is not None and topic not in DOC_TOPICS:
        click.secho(f"❌ Unknown topic: {topic}", fg="red")
        click.echo("   Run 'ionkit docs ls' to list topics.")
        sys.exit(1)

    project = detect_from_context(ctx).project
    base = project.get_docs_url() if project else DEFAULT_DOCS_URL
    url = docs_url(base, topic)

    click.echo(url)
    if browser:
        click.launch(url)
