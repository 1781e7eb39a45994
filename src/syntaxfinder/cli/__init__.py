"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from syntaxfinder import __version__
from syntaxfinder.config import SyntaxFinderConfig


@click.group()
@click.version_option(version=__version__, prog_name="syntaxfinder")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML config file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """SyntaxFinder — heuristic syntax checks for Java, Python, JavaScript and C."""
    ctx.ensure_object(dict)

    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = SyntaxFinderConfig.load(config_path)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    config.verbose = verbose
    ctx.obj["config"] = config


def _register_commands() -> None:
    from syntaxfinder.cli.check import check  # noqa: F811
    from syntaxfinder.cli.rules import rules  # noqa: F811
    from syntaxfinder.cli.server import server  # noqa: F811

    main.add_command(check)
    main.add_command(rules)
    main.add_command(server)


_register_commands()
