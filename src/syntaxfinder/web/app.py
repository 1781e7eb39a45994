"""FastAPI application factory for the SyntaxFinder HTTP API."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from syntaxfinder import __version__
from syntaxfinder.checker.engine import SyntaxChecker
from syntaxfinder.config import SyntaxFinderConfig


def create_app(
    config: SyntaxFinderConfig | None = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    config = config or SyntaxFinderConfig.load()

    app = FastAPI(
        title="SyntaxFinder",
        version=__version__,
        docs_url="/api/docs",
    )

    # One immutable checker shared by every request
    app.state.config = config
    app.state.checker = SyntaxChecker(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    from syntaxfinder.web.api.check import router as check_router

    app.include_router(check_router, prefix="/api")

    return app
