"""Degraded-mode checker — only the statement-terminator check.

Used where the full rule engine is unavailable. Same contract as
``engine.analyze``, far fewer rules.
"""

from __future__ import annotations

from syntaxfinder.checker.models import (
    NO_SYNTAX_ERROR_BASIC,
    Diagnostic,
    no_code_diagnostic,
    split_lines,
)


def analyze_basic(code: str) -> list[Diagnostic]:
    if not code or not code.strip():
        return [no_code_diagnostic()]

    diagnostics = []
    for number, raw in enumerate(split_lines(code), start=1):
        text = raw.strip()
        if text and not text.endswith((";", "{", "}")):
            diagnostics.append(
                Diagnostic(
                    line=number,
                    msg="Missing semicolon",
                    desc="You forgot to add a semicolon at the end of this statement. "
                    "Many languages require semicolons to separate instructions.",
                    line_content=text,
                )
            )

    if not diagnostics:
        diagnostics.append(
            Diagnostic(
                line=0,
                msg=NO_SYNTAX_ERROR_BASIC,
                desc="Your code passed basic syntax checks.",
            )
        )
    return diagnostics
