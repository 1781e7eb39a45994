"""Rule framework — the per-line context handed to every registered rule."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import PurePath

from syntaxfinder.checker.models import Diagnostic, Language, LineRecord
from syntaxfinder.config import SyntaxFinderConfig

BRACE_LANGUAGES = frozenset({Language.JAVA, Language.JAVASCRIPT, Language.C, Language.CPP})
ALL_LANGUAGES = frozenset(Language)

_PUBLIC_CLASS = re.compile(r"public\s+class\s+(\w+)")


@dataclass(frozen=True)
class SourceFacts:
    """Whole-source properties computed once per analysis."""

    has_public_class: bool = False
    has_main: bool = False
    class_name: str | None = None
    filename: str | None = None

    @classmethod
    def from_source(cls, code: str, filename: str | None = None) -> SourceFacts:
        match = _PUBLIC_CLASS.search(code)
        return cls(
            has_public_class="public class" in code,
            has_main="public static void main" in code,
            class_name=match.group(1) if match else None,
            filename=filename,
        )

    @property
    def file_stem(self) -> str | None:
        if not self.filename:
            return None
        return PurePath(self.filename).stem


@dataclass(frozen=True)
class LineContext:
    """Everything a rule may read while checking one line."""

    record: LineRecord
    index: int
    lines: Sequence[str]
    language: Language
    source: SourceFacts
    config: SyntaxFinderConfig
    previous: LineRecord | None = None

    @property
    def text(self) -> str:
        return self.record.text

    @property
    def raw(self) -> str:
        return self.record.raw

    def diagnostic(self, msg: str, desc: str) -> Diagnostic:
        """Build a diagnostic anchored at the current line."""
        return Diagnostic(
            line=self.record.number,
            msg=msg,
            desc=desc,
            line_content=self.record.text,
        )


RuleCheck = Callable[[LineContext], list[Diagnostic]]


@dataclass(frozen=True)
class Rule:
    """A named heuristic evaluated once per non-blank line.

    ``allow_duplicate`` rules append straight to the result and may report
    the same (line, msg) pair more than once.
    """

    name: str
    check: RuleCheck
    languages: frozenset[Language] = ALL_LANGUAGES
    allow_duplicate: bool = False

    def applies_to(self, language: Language) -> bool:
        return language in self.languages
