"""REST API for checking a pasted block of source code."""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from syntaxfinder.checker.basic import analyze_basic
from syntaxfinder.checker.models import Diagnostic, no_code_diagnostic

logger = logging.getLogger(__name__)

router = APIRouter(tags=["check"])


class CheckRequest(BaseModel):
    code: str | None = None


async def _run_check(
    request: Request,
    analyzer: Callable[[str], list[Diagnostic]],
) -> JSONResponse:
    try:
        payload = await request.json()
        body = CheckRequest.model_validate(payload)
    except (ValueError, ValidationError):
        logger.exception("Could not decode check request")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    code = body.code
    if not code or not code.strip():
        return JSONResponse(
            status_code=400,
            content={"errors": [no_code_diagnostic().to_dict()]},
        )

    diagnostics = analyzer(code)
    logger.info(
        "Checked %d lines: %d diagnostic(s)", code.count("\n") + 1, len(diagnostics)
    )
    return JSONResponse(content={"errors": [d.to_dict() for d in diagnostics]})


@router.post("/check")
async def check_code(request: Request):
    checker = request.app.state.checker
    return await _run_check(request, checker.analyze)


@router.post("/check/basic")
async def check_code_basic(request: Request):
    return await _run_check(request, analyze_basic)


@router.api_route("/check", methods=["GET", "PUT", "PATCH", "DELETE"])
@router.api_route("/check/basic", methods=["GET", "PUT", "PATCH", "DELETE"])
async def method_not_allowed():
    return JSONResponse(
        status_code=405,
        content={"error": "Only POST allowed"},
    )
