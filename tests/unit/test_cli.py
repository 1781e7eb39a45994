"""Tests for CLI commands using Click's CliRunner."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from syntaxfinder.cli import main


def test_main_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "SyntaxFinder" in result.output
    assert "check" in result.output
    assert "rules" in result.output
    assert "server" in result.output


def test_main_version():
    runner = CliRunner()
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_check_help():
    runner = CliRunner()
    result = runner.invoke(main, ["check", "--help"])
    assert result.exit_code == 0
    assert "PATHS" in result.output
    assert "--basic" in result.output


def test_server_help():
    runner = CliRunner()
    result = runner.invoke(main, ["server", "--help"])
    assert result.exit_code == 0
    assert "--port" in result.output


def test_check_clean_file(tmp_path: Path):
    target = tmp_path / "ok.js"
    target.write_text("let x = 5;\n")
    runner = CliRunner()
    result = runner.invoke(main, ["check", str(target)])
    assert result.exit_code == 0
    assert "No errors." in result.output


def test_check_reports_errors(java_source_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["check", str(java_source_path)])
    assert result.exit_code == 1
    assert "1 error(s)" in result.output


def test_check_json(java_source_path: Path):
    runner = CliRunner()
    result = runner.invoke(main, ["check", "--json", str(java_source_path)])
    assert result.exit_code == 1
    reports = json.loads(result.output)
    assert len(reports) == 1
    assert reports[0]["language"] == "java"
    assert reports[0]["errors"] == [
        {
            "line": 4,
            "lineContent": "System.out.println(a[5]);",
            "msg": "Array Index Out Of Bounds",
            "desc": reports[0]["errors"][0]["desc"],
        }
    ]


def test_check_stdin():
    runner = CliRunner()
    result = runner.invoke(main, ["check", "--json", "-"], input="let x = 5\n")
    assert result.exit_code == 1
    reports = json.loads(result.output)
    assert reports[0]["path"] == "<stdin>"
    assert [e["msg"] for e in reports[0]["errors"]] == ["Missing semicolon"]


def test_check_basic(tmp_path: Path):
    target = tmp_path / "a.c"
    target.write_text("int main() {\n  return 0\n}\n")
    runner = CliRunner()
    result = runner.invoke(main, ["check", "--basic", "--json", str(target)])
    assert result.exit_code == 1
    errors = json.loads(result.output)[0]["errors"]
    assert [(e["line"], e["msg"]) for e in errors] == [(2, "Missing semicolon")]


def test_check_language_override(tmp_path: Path):
    target = tmp_path / "snippet.js"
    target.write_text("if x:\nprint(x)\n")
    runner = CliRunner()
    result = runner.invoke(main, ["check", "--json", "-l", "javascript", str(target)])
    report = json.loads(result.output)[0]
    assert report["language"] == "javascript"
    assert "Missing indentation" not in {e["msg"] for e in report["errors"]}


def test_check_directory(tmp_path: Path):
    (tmp_path / "ok.js").write_text("let x = 5;\n")
    (tmp_path / "bad.js").write_text("let x = 5\n")
    (tmp_path / "README.txt").write_text("let x = 5\n")
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("let x = 5\n")
    runner = CliRunner()
    result = runner.invoke(main, ["check", "--json", str(tmp_path)])
    assert result.exit_code == 1
    paths = sorted(Path(r["path"]).name for r in json.loads(result.output))
    assert paths == ["bad.js", "ok.js"]


def test_check_exclude(tmp_path: Path):
    (tmp_path / "ok.js").write_text("let x = 5;\n")
    (tmp_path / "bad.js").write_text("let x = 5\n")
    runner = CliRunner()
    result = runner.invoke(main, ["check", "-e", "bad.js", str(tmp_path)])
    assert result.exit_code == 0


def test_check_missing_path():
    runner = CliRunner()
    result = runner.invoke(main, ["check", "/nonexistent/file.java"])
    assert result.exit_code != 0


def test_config_disables_rule(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("disabled_rules: [missing_semicolon]\n")
    target = tmp_path / "a.js"
    target.write_text("let x = 5\n")
    runner = CliRunner()
    result = runner.invoke(main, ["--config", str(config_file), "check", str(target)])
    assert result.exit_code == 0


def test_config_unknown_rule(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("disabled_rules: [no_such_rule]\n")
    target = tmp_path / "a.js"
    target.write_text("let x = 5;\n")
    runner = CliRunner()
    result = runner.invoke(main, ["--config", str(config_file), "check", str(target)])
    assert result.exit_code == 1
    assert "Unknown rule" in result.output


def test_invalid_config(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("lookback_window: -3\n")
    runner = CliRunner()
    result = runner.invoke(main, ["--config", str(config_file), "rules"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_rules_lists_registry():
    runner = CliRunner()
    result = runner.invoke(main, ["rules"])
    assert result.exit_code == 0
    assert "Rules" in result.output
    assert "missing_semicolon" in result.output
    assert "quote_balance" in result.output


def test_non_numeric_config_value(tmp_path: Path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("lookback_window: ten\n")
    runner = CliRunner()
    result = runner.invoke(main, ["--config", str(config_file), "rules"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
