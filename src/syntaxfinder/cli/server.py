"""CLI command: syntaxfinder server — serve the HTTP check endpoint."""

from __future__ import annotations

import click
from rich.console import Console

console = Console(stderr=True)


@click.command()
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to listen on (default: 3001).",
)
@click.option(
    "--host",
    default=None,
    help="Interface to bind (default: 127.0.0.1).",
)
@click.pass_context
def server(ctx: click.Context, port: int | None, host: str | None) -> None:
    """Start the SyntaxFinder HTTP API."""
    try:
        import uvicorn
    except ImportError:
        console.print(
            "[red]Web dependencies not installed.[/red]\n"
            "Install with: pip install syntaxfinder[web]"
        )
        raise SystemExit(1)

    config = ctx.obj["config"]
    if port is not None:
        config.web_port = port
    if host is not None:
        config.web_host = host

    console.print(
        f"[bold]SyntaxFinder[/bold] API starting on "
        f"[cyan]http://{config.web_host}:{config.web_port}/api/check[/cyan]\n"
    )

    import asyncio

    from syntaxfinder.web.app import create_app

    async def _run() -> None:
        app = create_app(config)
        server_config = uvicorn.Config(
            app,
            host=config.web_host,
            port=config.web_port,
            log_level="debug" if config.verbose else "info",
        )
        srv = uvicorn.Server(server_config)
        await srv.serve()

    asyncio.run(_run())
