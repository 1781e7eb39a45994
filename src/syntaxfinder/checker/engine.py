"""Check engine — runs the rule batteries over source text and files."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable, Iterator
from pathlib import Path

from syntaxfinder.checker.basic import analyze_basic
from syntaxfinder.checker.classifier import classify
from syntaxfinder.checker.languages.brace import BRACE_RULES
from syntaxfinder.checker.languages.generic import GENERIC_RULES
from syntaxfinder.checker.languages.python import PYTHON_RULES
from syntaxfinder.checker.models import (
    NO_SYNTAX_ERRORS,
    BalanceCounters,
    CheckRun,
    Diagnostic,
    DiagnosticCollector,
    FileReport,
    Language,
    LineRecord,
    no_code_diagnostic,
    split_lines,
)
from syntaxfinder.checker.rules import LineContext, Rule, SourceFacts
from syntaxfinder.config import SyntaxFinderConfig

logger = logging.getLogger(__name__)

# Extensions picked up when walking a directory
_SOURCE_EXTENSIONS = {
    ".java",
    ".py",
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".ts",
    ".tsx",
    ".c",
    ".h",
    ".cc",
    ".cpp",
    ".cxx",
    ".hpp",
}

# Directories to always skip
_SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "__pycache__",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".venv",
    "venv",
    ".env",
    "env",
    "dist",
    "build",
    ".tox",
    ".eggs",
}

# Max file size to check (1 MB)
_MAX_FILE_SIZE = 1_048_576


def registered_rules() -> list[Rule]:
    """All per-line rules in evaluation order."""
    return [*BRACE_RULES, *PYTHON_RULES, *GENERIC_RULES]


def check_brace_balance(code: str) -> list[Diagnostic]:
    """Whole-source pass over every '{' and '}' in document order."""
    balance = 0
    for char in code:
        if char == "{":
            balance += 1
        elif char == "}":
            balance -= 1
            if balance < 0:
                return [
                    Diagnostic(
                        line=0,
                        msg="Extra closing bracket",
                        desc="Remove the extra '}' or add a matching '{' at the beginning.",
                    )
                ]
    if balance > 0:
        return [
            Diagnostic(
                line=0,
                msg="Unclosed brackets",
                desc=f"Add {balance} closing bracket(s) '}}' at the end of your code.",
            )
        ]
    return []


class SyntaxChecker:
    """Runs the registered rules against source text. Safe to share."""

    def __init__(self, config: SyntaxFinderConfig | None = None) -> None:
        self.config = config or SyntaxFinderConfig()
        rules = registered_rules()
        known = {rule.name for rule in rules}
        unknown = sorted(set(self.config.disabled_rules) - known)
        if unknown:
            raise ValueError(f"Unknown rule(s): {', '.join(unknown)}")
        disabled = set(self.config.disabled_rules)
        self._rules = tuple(rule for rule in rules if rule.name not in disabled)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def analyze(
        self,
        code: str,
        filename: str | None = None,
        language: Language | None = None,
    ) -> list[Diagnostic]:
        """Return the diagnostics for one block of source text."""
        if not code or not code.strip():
            return [no_code_diagnostic()]

        language = language or classify(code)
        lines = split_lines(code)
        source = SourceFacts.from_source(code, filename)
        active = [rule for rule in self._rules if rule.applies_to(language)]
        logger.debug(
            "Checking %d lines as %s with %d rules", len(lines), language.value, len(active)
        )

        collector = DiagnosticCollector()
        balance = BalanceCounters()
        previous: LineRecord | None = None

        for index, raw in enumerate(lines):
            record = LineRecord.from_line(index + 1, raw)
            if not record.text:
                continue
            balance.update(record)

            ctx = LineContext(
                record=record,
                index=index,
                lines=lines,
                language=language,
                source=source,
                config=self.config,
                previous=previous,
            )
            for rule in active:
                for diagnostic in rule.check(ctx):
                    collector.add(diagnostic, allow_duplicate=rule.allow_duplicate)
            previous = record

        logger.debug(
            "Running balance: braces=%d brackets=%d parens=%d",
            balance.braces,
            balance.brackets,
            balance.parens,
        )

        for diagnostic in check_brace_balance(code):
            collector.add(diagnostic, allow_duplicate=True)

        if not collector:
            collector.add(
                Diagnostic(
                    line=0,
                    msg=NO_SYNTAX_ERRORS,
                    desc="Great! Your code passed basic syntax checks. However, there "
                    "might still be logical errors that require deeper analysis.",
                )
            )

        logger.debug("Found %d diagnostics", len(collector))
        return collector.items

    def check_paths(
        self,
        paths: Iterable[str | Path],
        exclude: Iterable[str] = (),
        language: Language | None = None,
        basic: bool = False,
    ) -> CheckRun:
        """Check files and directories, returning one report per file."""
        start = time.time()
        excluded = set(exclude)
        run = CheckRun()

        for file_path in self._walk(paths, excluded):
            try:
                content = file_path.read_text(encoding="utf-8", errors="ignore")
            except OSError as e:
                logger.debug("Skipping %s: %s", file_path, e)
                run.files_skipped += 1
                continue

            run.files_checked += 1
            run.reports.append(self.check_text(content, str(file_path), language, basic))

        run.duration = time.time() - start
        return run

    def check_text(
        self,
        content: str,
        file_path: str,
        language: Language | None = None,
        basic: bool = False,
    ) -> FileReport:
        """Check already-loaded text attributed to ``file_path``."""
        detected = language or classify(content)
        # Pseudo-paths like "<stdin>" carry no file name
        filename = None if file_path.startswith("<") else Path(file_path).name
        if basic:
            diagnostics = analyze_basic(content)
        else:
            diagnostics = self.analyze(content, filename=filename, language=detected)
        return FileReport(path=file_path, language=detected, diagnostics=diagnostics)

    def _walk(self, paths: Iterable[str | Path], excluded: set[str]) -> Iterator[Path]:
        """Yield checkable files. Explicit file arguments are always checked."""
        for entry in paths:
            path = Path(entry)
            if path.is_file():
                yield path
                continue
            for root, dirs, files in os.walk(path):
                # Prune skipped directories in-place
                dirs[:] = [
                    d
                    for d in sorted(dirs)
                    if d not in _SKIP_DIRS and not d.endswith(".egg-info") and d not in excluded
                ]
                for name in sorted(files):
                    candidate = Path(root) / name
                    if candidate.suffix.lower() not in _SOURCE_EXTENSIONS:
                        continue
                    if name in excluded:
                        continue
                    try:
                        if candidate.stat().st_size > _MAX_FILE_SIZE:
                            continue
                    except OSError:
                        continue
                    yield candidate


def analyze(code: str) -> list[Diagnostic]:
    """Check ``code`` with the default configuration."""
    return SyntaxChecker().analyze(code)
