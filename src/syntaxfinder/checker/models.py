"""Checker data models — languages, diagnostics, line records, check results."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field


class Language(enum.Enum):
    """Closed set of languages the classifier can return."""

    JAVA = "java"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    C = "c"
    CPP = "cpp"

    @property
    def label(self) -> str:
        return _LANGUAGE_LABELS[self]

    @property
    def brace_family(self) -> bool:
        return self is not Language.PYTHON


_LANGUAGE_LABELS = {
    Language.JAVA: "Java",
    Language.PYTHON: "Python",
    Language.JAVASCRIPT: "JavaScript",
    Language.C: "C",
    Language.CPP: "C++",
}


class Severity(enum.Enum):
    """Diagnostic severity level, derived from the category label."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


NO_CODE_DETECTED = "No code detected"
NO_SYNTAX_ERRORS = "No syntax errors found"
NO_SYNTAX_ERROR_BASIC = "No syntax error found"

_INFO_MESSAGES = frozenset({NO_CODE_DETECTED, NO_SYNTAX_ERRORS, NO_SYNTAX_ERROR_BASIC})
_ADVISORY_MESSAGES = frozenset({"File Name Class Name Mismatch", "Missing main method"})


@dataclass(frozen=True)
class Diagnostic:
    """A single reported finding."""

    line: int
    msg: str
    desc: str
    line_content: str = ""

    @property
    def key(self) -> tuple[int, str]:
        """Dedup key: at most one diagnostic per (line, category)."""
        return (self.line, self.msg)

    @property
    def severity(self) -> Severity:
        if self.msg in _INFO_MESSAGES:
            return Severity.INFO
        if self.msg in _ADVISORY_MESSAGES or self.msg.startswith("Potential"):
            return Severity.WARNING
        return Severity.ERROR

    def to_dict(self) -> dict:
        """Serialize with the wire field names; lineContent only when present."""
        data: dict = {"line": self.line}
        if self.line_content:
            data["lineContent"] = self.line_content
        data["msg"] = self.msg
        data["desc"] = self.desc
        return data


def no_code_diagnostic() -> Diagnostic:
    return Diagnostic(
        line=0,
        msg=NO_CODE_DETECTED,
        desc="Please paste your source code before checking for syntax errors.",
    )


def split_lines(code: str) -> list[str]:
    """Split on line feeds, dropping the carriage return of CRLF endings."""
    return [line[:-1] if line.endswith("\r") else line for line in code.split("\n")]


@dataclass(frozen=True)
class LineRecord:
    """One non-blank source line with its delimiter counts."""

    number: int
    raw: str
    text: str
    open_braces: int = 0
    close_braces: int = 0
    open_parens: int = 0
    close_parens: int = 0
    open_brackets: int = 0
    close_brackets: int = 0

    @classmethod
    def from_line(cls, number: int, raw: str) -> LineRecord:
        text = raw.strip()
        return cls(
            number=number,
            raw=raw,
            text=text,
            open_braces=text.count("{"),
            close_braces=text.count("}"),
            open_parens=text.count("("),
            close_parens=text.count(")"),
            open_brackets=text.count("["),
            close_brackets=text.count("]"),
        )


@dataclass
class BalanceCounters:
    """Running delimiter balance across the lines of one analysis."""

    braces: int = 0
    brackets: int = 0
    parens: int = 0

    def update(self, record: LineRecord) -> None:
        self.braces += record.open_braces - record.close_braces
        self.brackets += record.open_brackets - record.close_brackets
        self.parens += record.open_parens - record.close_parens


class DiagnosticCollector:
    """Ordered diagnostic list that suppresses repeated (line, msg) pairs."""

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []
        self._keys: set[tuple[int, str]] = set()

    def add(self, diagnostic: Diagnostic, allow_duplicate: bool = False) -> bool:
        """Append a diagnostic. Returns False if it was suppressed as a duplicate."""
        if not allow_duplicate and diagnostic.key in self._keys:
            return False
        self._keys.add(diagnostic.key)
        self._items.append(diagnostic)
        return True

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def items(self) -> list[Diagnostic]:
        return list(self._items)


@dataclass
class FileReport:
    """Diagnostics produced for one checked file."""

    path: str
    language: Language
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)


@dataclass
class CheckRun:
    """Aggregate result of checking a set of paths."""

    reports: list[FileReport] = field(default_factory=list)
    files_checked: int = 0
    files_skipped: int = 0
    duration: float = 0.0
    timestamp: float = field(default_factory=time.time)

    @property
    def error_count(self) -> int:
        return sum(r.error_count for r in self.reports)
