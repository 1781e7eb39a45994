"""Python-specific rules — indentation and list index heuristics."""

from __future__ import annotations

from syntaxfinder.checker.models import Diagnostic, Language
from syntaxfinder.checker.patterns import ARRAY_ACCESS
from syntaxfinder.checker.rules import LineContext, Rule

_PYTHON = frozenset({Language.PYTHON})


def _check_missing_indentation(ctx: LineContext) -> list[Diagnostic]:
    previous = ctx.previous
    if previous is None or not previous.text.endswith(":"):
        return []
    if ctx.raw.startswith((" ", "\t")):
        return []
    return [
        ctx.diagnostic(
            "Missing indentation",
            f'Add indentation to this line: "    {ctx.text}" - In Python, code '
            f"blocks after a colon (:) must be indented.",
        )
    ]


def _check_mixed_indentation(ctx: LineContext) -> list[Diagnostic]:
    if not ctx.raw.startswith(" ") or "\t" not in ctx.raw:
        return []
    return [
        ctx.diagnostic(
            "Mixed indentation",
            f'Use consistent indentation in: "{ctx.text}" - Choose either spaces '
            f"or tabs and use it consistently throughout your code.",
        )
    ]


def _check_list_bounds(ctx: LineContext) -> list[Diagnostic]:
    threshold = ctx.config.python_list_threshold
    findings = []
    for match in ARRAY_ACCESS.finditer(ctx.text):
        index = int(match.group(2))
        if index > threshold:
            findings.append(
                ctx.diagnostic(
                    "Potential list out of bounds",
                    f"List index {index} might be out of bounds. Check if the list "
                    f"has at least {index + 1} elements. Use len(list) - 1 as the "
                    f"maximum index.",
                )
            )
    return findings


PYTHON_RULES: list[Rule] = [
    Rule("missing_indentation", _check_missing_indentation, _PYTHON),
    Rule("mixed_indentation", _check_mixed_indentation, _PYTHON),
    Rule("list_bounds", _check_list_bounds, _PYTHON),
]
