"""CLI command: syntaxfinder rules — list the registered heuristics."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from syntaxfinder.checker.engine import registered_rules
from syntaxfinder.checker.models import Language

console = Console()


@click.command()
@click.pass_context
def rules(ctx: click.Context) -> None:
    """List every rule in evaluation order."""
    disabled = set(ctx.obj["config"].disabled_rules)

    table = Table(title="Rules", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Rule", style="cyan")
    table.add_column("Languages")
    table.add_column("Dedup")
    table.add_column("Enabled")

    for position, rule in enumerate(registered_rules(), start=1):
        languages = ", ".join(lang.value for lang in Language if lang in rule.languages)
        table.add_row(
            str(position),
            rule.name,
            languages,
            "no" if rule.allow_duplicate else "yes",
            "[red]no[/red]" if rule.name in disabled else "[green]yes[/green]",
        )

    console.print(table)
