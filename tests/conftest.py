"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from syntaxfinder.checker.engine import SyntaxChecker
from syntaxfinder.config import SyntaxFinderConfig


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user config files and SYNTAXFINDER_* variables out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in (
        "SYNTAXFINDER_LOOKBACK_WINDOW",
        "SYNTAXFINDER_DEFAULT_ARRAY_CAPACITY",
        "SYNTAXFINDER_PYTHON_LIST_THRESHOLD",
        "SYNTAXFINDER_DISABLED_RULES",
        "SYNTAXFINDER_WEB_HOST",
        "SYNTAXFINDER_WEB_PORT",
        "SYNTAXFINDER_CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def java_source_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "Test.java"


@pytest.fixture
def java_source(java_source_path: Path) -> str:
    return java_source_path.read_text(encoding="utf-8")


@pytest.fixture
def strict_config_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "strict.yaml"


@pytest.fixture
def checker() -> SyntaxChecker:
    return SyntaxChecker(SyntaxFinderConfig())
