"""Tests for the brace-family line rules."""

from __future__ import annotations

import pytest

from syntaxfinder.checker.engine import SyntaxChecker
from syntaxfinder.checker.languages.brace import strip_literals
from syntaxfinder.checker.models import Diagnostic, Language
from syntaxfinder.config import SyntaxFinderConfig


def _run(code: str, language: Language = Language.JAVASCRIPT) -> list[Diagnostic]:
    return SyntaxChecker().analyze(code, language=language)


def _found(code: str, language: Language = Language.JAVASCRIPT) -> set[tuple[int, str]]:
    return {(d.line, d.msg) for d in _run(code, language)}


def _msgs(code: str, language: Language = Language.JAVASCRIPT) -> set[str]:
    return {d.msg for d in _run(code, language)}


def test_strip_literals():
    assert strip_literals('x = "a§b"; // §') == "x =  ; "
    assert strip_literals("c = 'q") == "c = "


def test_unclosed_parenthesis():
    assert (1, "Unclosed parenthesis") in _found("foo(1, 2;")


def test_extra_closing_parenthesis():
    assert (1, "Extra closing parenthesis") in _found("foo(1));")


@pytest.mark.parametrize("code", ["return x", "console.log(1)", "count = 3", "const a = 1"])
def test_missing_semicolon_statements(code):
    assert (1, "Missing semicolon") in _found(code)


@pytest.mark.parametrize("code", ["// let x = 5", "if (x > 1)", "x++", "else", "case 1"])
def test_missing_semicolon_skips(code):
    assert "Missing semicolon" not in _msgs(code)


def test_missing_declaration():
    diagnostics = [d for d in _run("count = 5;") if d.msg == "Missing variable declaration"]
    assert len(diagnostics) == 1
    assert "int count" in diagnostics[0].desc


def test_declared_assignment_is_fine():
    assert "Missing variable declaration" not in _msgs("let count = 5;")


def test_invalid_variable_name():
    assert (1, "Invalid variable name") in _found("int 2x = 5;")


def test_missing_call_parentheses():
    assert (1, "Missing Function Parentheses") in _found("doSomething")


@pytest.mark.parametrize("code", ["x", "i", "else", "do"])
def test_bare_word_allowed(code):
    assert "Missing Function Parentheses" not in _msgs(code)


class TestArrayBounds:
    def test_declared_size(self):
        diagnostics = _run("int arr[3];\narr[3] = 1;")
        lines = {d.line for d in diagnostics if d.msg == "Array Index Out Of Bounds"}
        assert lines == {2}

    def test_within_bounds(self):
        assert "Array Index Out Of Bounds" not in _msgs("int arr[3];\narr[2] = 1;")

    def test_java_new_array(self):
        diagnostics = _run("int[] nums = new int[2];\nnums[2] = 7;", Language.JAVA)
        bounds = [d for d in diagnostics if d.msg == "Array Index Out Of Bounds"]
        assert [d.line for d in bounds] == [2]
        assert "only has 2 elements" in bounds[0].desc

    def test_javascript_literal(self):
        diagnostics = _run("const xs = [1, 2, 3, 4];\nlet y = xs[4];")
        bounds = [d for d in diagnostics if d.msg == "Array Index Out Of Bounds"]
        assert len(bounds) == 1
        assert "only has 4 elements" in bounds[0].desc

    def test_fallback_capacity_from_config(self):
        checker = SyntaxChecker(SyntaxFinderConfig(default_array_capacity=8))
        msgs = {d.msg for d in checker.analyze("x = b[5];", language=Language.JAVASCRIPT)}
        assert "Array Index Out Of Bounds" not in msgs


def test_trailing_comma():
    diagnostics = [d for d in _run("foo(1, 2,);") if d.msg == "Trailing Comma Error"]
    assert len(diagnostics) == 1
    assert diagnostics[0].desc == "Remove the trailing comma before )."


def test_misspelled_keyword():
    diagnostics = [d for d in _run("int lenght = 1;") if d.msg == "Misspelled Keyword"]
    assert len(diagnostics) == 1
    assert '"length"' in diagnostics[0].desc


def test_strict_equality():
    assert (1, "Invalid Assignment Operator") in _found("if (a === b) {")


@pytest.mark.parametrize("code", ["case 1", "let y = a ? b"])
def test_missing_colon(code):
    assert (1, "Missing Colon") in _found(code)


@pytest.mark.parametrize("code", ["let y = a?.b;", "let y = a ?? b;", "let y = a ? b : c;"])
def test_colon_not_required(code):
    assert "Missing Colon" not in _msgs(code)


def test_java_import_needs_semicolon():
    assert (1, "Invalid Import Statement") in _found("import java.util.List", Language.JAVA)


def test_import_rule_is_java_only():
    assert "Invalid Import Statement" not in _msgs("import java.util.List", Language.C)


def test_method_declaration_without_body():
    assert (1, "Invalid Method Declaration") in _found("void run()")


def test_method_declaration_with_body():
    assert "Invalid Method Declaration" not in _msgs("void run() {")


def test_reserved_keyword_as_identifier():
    assert (1, "Reserved Keyword Used as Identifier") in _found("static count = 5;")


def test_unexpected_token():
    diagnostics = [d for d in _run("let a = 1 § 2;") if d.msg == "Unexpected Token"]
    assert len(diagnostics) == 1
    assert "§" in diagnostics[0].desc


def test_unexpected_token_inside_string():
    assert "Unexpected Token" not in _msgs('let s = "§";')


def test_missing_return_type():
    assert (1, "Missing Return Type") in _found("foo bar() {")


@pytest.mark.parametrize("code", ["function foo() {", "static void main() {", "if (x) {"])
def test_return_type_present(code):
    assert "Missing Return Type" not in _msgs(code)


def test_constructor_has_no_return_type():
    code = "public class Widget {\n  public Widget() {\n  }\n}"
    assert "Missing Return Type" not in _msgs(code, Language.JAVA)


def test_loop_syntax():
    assert (1, "Invalid Loop Syntax") in _found("for (x in y) {")
    assert "Invalid Loop Syntax" not in _msgs("for (int i = 0; i < n; i++) {")


def test_conditional_syntax():
    assert (1, "Invalid Conditional Syntax") in _found("if x > 1 {")
    assert "Invalid Conditional Syntax" not in _msgs("int diff = 3;")


def test_logical_operator_spacing():
    assert (1, "Invalid Logical Operator") in _found("if (a&&b) {")
    assert "Invalid Logical Operator" not in _msgs("if (a && b) {")


def test_function_call():
    assert (1, "Invalid Function Call") in _found("process(data);")
    assert "Invalid Function Call" not in _msgs("console.log(data);")


def test_parameter_list():
    assert (1, "Incorrect Parameter List") in _found("foo(a,,b);")


def test_extra_argument():
    assert (1, "Extra Argument") in _found("foo(), 3;")


def test_type_mismatch():
    diagnostics = [d for d in _run('int count = "five";') if d.msg == "Type Mismatch Error"]
    assert len(diagnostics) == 1
    assert "'count'" in diagnostics[0].desc


def test_string_assignment_is_not_mismatch():
    assert "Type Mismatch Error" not in _msgs('String name = "five";')


def test_cast_syntax():
    assert (1, "Invalid Casting Syntax") in _found("let w = (Widget) x;")


@pytest.mark.parametrize("code", ["let n = (int) y;", "if (x) return;"])
def test_cast_not_flagged(code):
    assert "Invalid Casting Syntax" not in _msgs(code)


def test_null_dereference():
    found = _found("let n = null.length;")
    assert (1, "Potential null pointer exception") in found


def test_unclosed_single_quote():
    assert (1, "Unclosed single quote") in _found("let c = 'a;")


def test_one_quote_finding_per_line():
    msgs = [d.msg for d in _run("let c = 'a + \"b;")]
    assert "Unclosed single quote" in msgs
    assert "Unclosed string literal" not in msgs


def test_balanced_quotes():
    msgs = _msgs('let s = "ok";')
    assert "Unclosed string literal" not in msgs
    assert "Unclosed single quote" not in msgs


def test_brace_rules_skip_python():
    assert _found("count = 5", Language.PYTHON) == {(0, "No syntax errors found")}
