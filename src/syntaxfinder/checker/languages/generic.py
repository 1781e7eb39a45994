"""Language-independent rules — applied to every line whatever the tag."""

from __future__ import annotations

import re

from syntaxfinder.checker.models import Diagnostic
from syntaxfinder.checker.rules import ALL_LANGUAGES, LineContext, Rule

_INFINITE_LOOPS = ("while(true)", "while (true)", "for(;;)")
_EQUALS_RUN = re.compile(r"=+")


def _check_multiple_assignment(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if "=" not in text or "==" in text or "!=" in text:
        return []
    if len(text.split("=")) <= 2:
        return []
    return [
        ctx.diagnostic(
            "Multiple assignment operators",
            f'Fix this line: "{_EQUALS_RUN.sub("=", text)}" - You have multiple '
            f"'=' signs. For comparison, use '==' or '===' instead of '='.",
        )
    ]


def _check_infinite_loop(ctx: LineContext) -> list[Diagnostic]:
    if not any(loop in ctx.text for loop in _INFINITE_LOOPS):
        return []
    return [
        ctx.diagnostic(
            "Potential infinite loop",
            f"This loop might run forever. Add a break condition or ensure there's "
            f'a way to exit the loop in: "{ctx.text}"',
        )
    ]


GENERIC_RULES: list[Rule] = [
    Rule("multiple_assignment", _check_multiple_assignment, ALL_LANGUAGES),
    Rule("infinite_loop", _check_infinite_loop, ALL_LANGUAGES),
]
