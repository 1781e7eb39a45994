"""CLI command: syntaxfinder check <path>... — heuristic syntax check."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from syntaxfinder.checker.engine import SyntaxChecker
from syntaxfinder.checker.models import CheckRun, FileReport, Language, Severity

console = Console(stderr=True)

_SEVERITY_COLORS = {
    Severity.INFO: "blue",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}

_STDIN = "-"


@click.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, allow_dash=True))
@click.option(
    "--language",
    "-l",
    type=click.Choice([lang.value for lang in Language]),
    default=None,
    help="Check as this language instead of detecting it.",
)
@click.option("--basic", is_flag=True, help="Run only the statement-terminator check.")
@click.option("--json", "as_json", is_flag=True, help="Print diagnostics as JSON.")
@click.option(
    "--exclude",
    "-e",
    multiple=True,
    help="File or directory names to skip.",
)
@click.pass_context
def check(
    ctx: click.Context,
    paths: tuple[str, ...],
    language: str | None,
    basic: bool,
    as_json: bool,
    exclude: tuple[str, ...],
) -> None:
    """Check source files for likely syntax errors. Use - to read stdin."""
    try:
        checker = SyntaxChecker(ctx.obj["config"])
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    forced = Language(language) if language else None
    file_paths = [p for p in paths if p != _STDIN]

    run = checker.check_paths(file_paths, exclude=exclude, language=forced, basic=basic)
    if _STDIN in paths:
        content = click.get_text_stream("stdin").read()
        run.reports.insert(0, checker.check_text(content, "<stdin>", forced, basic))
        run.files_checked += 1

    if as_json:
        click.echo(json.dumps([_report_to_dict(r) for r in run.reports], indent=2))
    else:
        for report in run.reports:
            _print_report(report)
        _print_summary(run)

    if run.error_count > 0:
        sys.exit(1)


def _report_to_dict(report: FileReport) -> dict:
    return {
        "path": report.path,
        "language": report.language.value,
        "errors": [d.to_dict() for d in report.diagnostics],
    }


def _print_report(report: FileReport) -> None:
    table = Table(
        title=escape(f"{report.path} ({report.language.label})"),
        show_lines=False,
    )
    table.add_column("Line", justify="right")
    table.add_column("Severity", style="bold", width=8)
    table.add_column("Problem", style="cyan")
    table.add_column("Detail", max_width=60)

    for diagnostic in report.diagnostics:
        color = _SEVERITY_COLORS.get(diagnostic.severity, "white")
        table.add_row(
            str(diagnostic.line) if diagnostic.line else "-",
            f"[{color}]{diagnostic.severity.value}[/{color}]",
            escape(diagnostic.msg),
            escape(diagnostic.desc),
        )

    console.print(table)


def _print_summary(run: CheckRun) -> None:
    console.print(
        f"\nChecked {run.files_checked} files "
        f"({run.files_skipped} skipped) "
        f"in {run.duration:.2f}s"
    )
    if run.error_count:
        console.print(f"[red]{run.error_count} error(s)[/red]")
    else:
        console.print("[green]No errors.[/green]")
