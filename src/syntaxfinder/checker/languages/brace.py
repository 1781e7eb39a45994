"""Brace-family rules — Java, JavaScript, C and C++ line heuristics."""

from __future__ import annotations

from syntaxfinder.checker import patterns as p
from syntaxfinder.checker.bounds import find_declared_size
from syntaxfinder.checker.models import Diagnostic, Language
from syntaxfinder.checker.rules import BRACE_LANGUAGES, LineContext, Rule

_JAVA = frozenset({Language.JAVA})


def strip_literals(text: str) -> str:
    """Blank out string literals and // comments.

    An unterminated literal is taken to run to the end of the line.
    """
    stripped = p.STRING_LITERAL.sub(" ", text)
    stripped = p.LINE_COMMENT.sub("", stripped)
    cuts = [i for i in (stripped.find('"'), stripped.find("'")) if i >= 0]
    if cuts:
        stripped = stripped[: min(cuts)]
    return stripped


def _check_parenthesis_balance(ctx: LineContext) -> list[Diagnostic]:
    record = ctx.record
    if record.open_parens > record.close_parens:
        missing = record.open_parens - record.close_parens
        return [
            ctx.diagnostic(
                "Unclosed parenthesis",
                f"This line has {missing} more opening parenthesis '(' than "
                f"closing ')'. Add the missing closing parenthesis to complete "
                f'the expression. Fix: "{ctx.text})" - Add the closing parenthesis.',
            )
        ]
    if record.close_parens > record.open_parens:
        extra = record.close_parens - record.open_parens
        return [
            ctx.diagnostic(
                "Extra closing parenthesis",
                f"Remove {extra} closing parenthesis or add matching opening parenthesis.",
            )
        ]
    return []


def _check_missing_semicolon(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if text.endswith((";", "{", "}")):
        return []
    if any(pattern.search(text) for pattern in p.SEMICOLON_SKIP):
        return []
    if not any(pattern.search(text) for pattern in p.STATEMENT_SHAPES):
        return []
    return [
        ctx.diagnostic(
            "Missing semicolon",
            f"This line is missing a semicolon at the end. {ctx.language.label} "
            f'statements must end with a semicolon. Fix: "{text};" - Add the '
            f"semicolon to complete the statement.",
        )
    ]


def _check_missing_declaration(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if "=" not in text or p.TYPED_ASSIGNMENT.search(text):
        return []
    match = p.BARE_ASSIGNMENT.search(text)
    if not match or match.group(1) in p.NON_VARIABLE_WORDS:
        return []
    name = match.group(1)
    value = text[text.index("=") + 1 :].strip()
    return [
        ctx.diagnostic(
            "Missing variable declaration",
            f"Variable '{name}' is being used without being declared first. In "
            f"{ctx.language.label}, you must declare variables before using them. "
            f'Fix: "int {name} = {value}" - Add the variable type before the '
            f"variable name.",
        )
    ]


def _check_invalid_variable_name(ctx: LineContext) -> list[Diagnostic]:
    match = p.DIGIT_LEADING_NAME.search(ctx.text)
    if not match:
        return []
    name = match.group(1)
    return [
        ctx.diagnostic(
            "Invalid variable name",
            f"Variable names cannot start with numbers in {ctx.language.label}. "
            f"The name '{name}' starts with a digit which is invalid. Fix: Use a "
            f"name starting with a letter, like 'var{name}' or 'number{name}'.",
        )
    ]


def _check_missing_call_parentheses(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if not p.BARE_IDENTIFIER.match(text):
        return []
    if any(word in text for word in p.BARE_WORD_EXCLUDED_SUBSTRINGS):
        return []
    if text in p.BARE_WORD_ALLOWLIST:
        return []
    # A lone lowercase letter is more likely a stray variable
    if len(text) == 1 and "a" <= text <= "z":
        return []
    return [
        ctx.diagnostic(
            "Missing Function Parentheses",
            f"This looks like a function call but is missing parentheses. If "
            f"'{text}' is a function, add parentheses: \"{text}()\". If it's a "
            f"variable, this error should not appear.",
        )
    ]


def _check_missing_main(ctx: LineContext) -> list[Diagnostic]:
    if not ctx.source.has_public_class or ctx.source.has_main:
        return []
    return [
        Diagnostic(
            line=0,
            msg="Missing main method",
            desc='Java programs need a main method: "public static void '
            'main(String[] args)" to run.',
        )
    ]


def _array_accesses(ctx: LineContext) -> list[tuple[str, int, int | None]]:
    """(name, index, declared size or None) for every literal-index access."""
    text = ctx.text
    if "[" not in text or "]" not in text:
        return []
    accesses = []
    for match in p.ARRAY_ACCESS.finditer(text):
        if p.DECLARATOR_PREFIX.search(text[: match.start()]):
            continue
        name, index = match.group(1), int(match.group(2))
        size = find_declared_size(ctx.lines, ctx.index, name, ctx.config.lookback_window)
        accesses.append((name, index, size))
    return accesses


def _bounds_diagnostic(ctx: LineContext, name: str, index: int, size: int) -> Diagnostic:
    return ctx.diagnostic(
        "Array Index Out Of Bounds",
        f"You're trying to access index {index} of array '{name}', but the array "
        f"only has {size} elements (indices 0 to {size - 1}). Fix: Use a valid "
        f"index like {min(index, size - 1)} or check the array size before accessing.",
    )


def _check_array_bounds(ctx: LineContext) -> list[Diagnostic]:
    return [
        _bounds_diagnostic(ctx, name, index, size)
        for name, index, size in _array_accesses(ctx)
        if size is not None and index >= size
    ]


def _check_array_bounds_fallback(ctx: LineContext) -> list[Diagnostic]:
    capacity = ctx.config.default_array_capacity
    return [
        _bounds_diagnostic(ctx, name, index, capacity)
        for name, index, size in _array_accesses(ctx)
        if size is None and index >= capacity
    ]


def _check_trailing_comma(ctx: LineContext) -> list[Diagnostic]:
    for token in (",}", ",]", ",)"):
        if token in ctx.text:
            return [
                ctx.diagnostic(
                    "Trailing Comma Error",
                    f"Remove the trailing comma before {token[1]}.",
                )
            ]
    return []


def _check_misspelled_keyword(ctx: LineContext) -> list[Diagnostic]:
    return [
        ctx.diagnostic(
            "Misspelled Keyword",
            f'Keyword "{typo}" appears to be misspelled. Did you mean "{correct}"?',
        )
        for typo, correct, pattern in p.MISSPELLING_PATTERNS
        if pattern.search(ctx.text)
    ]


def _check_strict_equality(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if "===" not in text and "!==" not in text:
        return []
    operator = "===" if "===" in text else "!=="
    return [
        ctx.diagnostic(
            "Invalid Assignment Operator",
            f"Use '==' for comparison or '=' for assignment. '{operator}' is not "
            f"a valid assignment operator.",
        )
    ]


def _check_missing_colon(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if ":" in text:
        return []
    if p.CASE_LABEL.search(text) or p.TERNARY.search(text):
        return [ctx.diagnostic("Missing Colon", "This statement requires a colon (:).")]
    return []


def _check_import_statement(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if not p.IMPORT_LINE.search(text) or text.endswith(";"):
        return []
    return [
        ctx.diagnostic(
            "Invalid Import Statement",
            f'Import statements must end with semicolon: "{text};"',
        )
    ]


def _is_call_line(text: str) -> bool:
    return "System." in text or "console." in text or bool(p.QUALIFIED_CALL.search(text))


def _check_method_declaration(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if not p.METHOD_SHAPE.search(text) or "{" in text or text.endswith(";"):
        return []
    if p.CONTROL_HEAD.search(text) or _is_call_line(text):
        return []
    return [
        ctx.diagnostic(
            "Invalid Method Declaration",
            "Method declarations must end with ';' or have a body with '{'.",
        )
    ]


def _check_reserved_identifier(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if p.VALID_TYPED_ASSIGNMENT.search(text):
        return []
    for keyword, pattern in p.RESERVED_AS_IDENTIFIER:
        if pattern.search(text):
            return [
                ctx.diagnostic(
                    "Reserved Keyword Used as Identifier",
                    f'"{keyword}" is a reserved keyword and cannot be used as a '
                    f"variable name.",
                )
            ]
    return []


def _check_unexpected_token(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if text.startswith(("//", "/*", "*")):
        return []
    found = p.DISALLOWED_CHAR.findall(strip_literals(text))
    if not found:
        return []
    unique = list(dict.fromkeys(found))
    return [
        ctx.diagnostic(
            "Unexpected Token",
            f"Invalid character(s) found: {', '.join(unique)}. Remove these special "
            f"characters.",
        )
    ]


def _check_missing_return_type(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    match = p.METHOD_WITH_BODY.search(text)
    if not match or p.TYPED_METHOD_HEAD.search(text):
        return []
    if p.CONTROL_HEAD.search(text) or _is_call_line(text) or "main" in text:
        return []
    # Constructors are named after their class and have no return type
    class_name = ctx.source.class_name
    if class_name and f"{class_name}(" in text.replace(" ", ""):
        return []
    return [
        ctx.diagnostic(
            "Missing Return Type",
            "Method declarations must specify a return type.",
        )
    ]


def _check_loop_syntax(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if not p.FOR_KEYWORD.search(text) or p.FOR_THREE_CLAUSE.search(text):
        return []
    return [
        ctx.diagnostic(
            "Invalid Loop Syntax",
            'For loop syntax: "for (initialization; condition; increment)"',
        )
    ]


def _check_conditional_syntax(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if not p.IF_KEYWORD.search(text) or p.IF_CONDITION.search(text):
        return []
    return [
        ctx.diagnostic(
            "Invalid Conditional Syntax",
            'If statements require conditions in parentheses: "if (condition)"',
        )
    ]


def _check_class_file_name(ctx: LineContext) -> list[Diagnostic]:
    class_name = ctx.source.class_name
    stem = ctx.source.file_stem
    if not class_name or not stem or stem == class_name:
        return []
    return [
        Diagnostic(
            line=0,
            msg="File Name Class Name Mismatch",
            desc=f'Java file should be named "{class_name}.java" to match the '
            f"public class name.",
        )
    ]


def _check_logical_operator_spacing(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if not p.LOGICAL_OPERATOR.search(text):
        return []
    if not p.UNSPACED_LOGICAL_OPERATOR.search(strip_literals(text)):
        return []
    return [
        ctx.diagnostic(
            "Invalid Logical Operator",
            "Logical operators require spaces around them.",
        )
    ]


def _check_function_call(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if any(call in text for call in p.SAFE_CALLS):
        return []
    for match in p.SINGLE_ARGUMENT_CALL.finditer(text):
        if match.group(1) in p.CALL_SKIP_WORDS:
            continue
        return [
            ctx.diagnostic(
                "Invalid Function Call",
                "Function calls should have proper parameter syntax.",
            )
        ]
    return []


def _check_parameter_list(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if "," not in text or not p.CALL_WITH_ARGS.search(text):
        return []
    params = p.FIRST_ARGUMENT_LIST.search(text)
    if not params or not p.DOUBLE_COMMA.search(params.group(1)):
        return []
    return [
        ctx.diagnostic(
            "Incorrect Parameter List",
            "Double commas found in parameter list. Remove extra comma.",
        )
    ]


def _check_extra_argument(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if "," not in text or not p.EMPTY_CALL.search(text):
        return []
    if p.DECLARATION_HEAD.search(text):
        return []
    return [
        ctx.diagnostic(
            "Extra Argument",
            "Function call has empty parentheses but arguments are provided.",
        )
    ]


def _check_type_mismatch(ctx: LineContext) -> list[Diagnostic]:
    match = p.NUMERIC_STRING_ASSIGNMENT.search(ctx.text)
    if not match:
        return []
    var_type, name, value = match.groups()
    return [
        ctx.diagnostic(
            "Type Mismatch Error",
            f'You cannot assign a string value "{value}" to a {var_type} variable '
            f"'{name}'. In {ctx.language.label}, {var_type} can only hold numeric "
            f"values, not text. Fix: Change the variable type to 'String': "
            f'"String {name} = \\"{value}\\"" or use a numeric value: '
            f'"{var_type} {name} = 0"',
        )
    ]


def _check_cast_syntax(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if _is_call_line(text):
        return []
    for match in p.CAST_SHAPE.finditer(text):
        if match.group(1) in p.PRIMITIVE_CASTS:
            continue
        # "foo(x) y" or "if (x) return": the parentheses belong to a call
        prefix = text[: match.start()].rstrip()
        if prefix and (prefix[-1].isalnum() or prefix[-1] in "_)]"):
            continue
        if p.CAST_FOLLOWED_BY_CALL.match(text, match.start()):
            continue
        return [
            ctx.diagnostic(
                "Invalid Casting Syntax",
                "Invalid casting syntax. Use valid types: (int), (String), etc.",
            )
        ]
    return []


def _check_null_dereference(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if "null." not in text and "NULL." not in text:
        return []
    return [
        ctx.diagnostic(
            "Potential null pointer exception",
            "You're accessing a property on a null value. This will cause a null "
            "pointer exception. Check if the object is null before accessing its "
            "properties.",
        )
    ]


def _check_quote_balance(ctx: LineContext) -> list[Diagnostic]:
    text = ctx.text
    if text.count("'") % 2:
        return [
            ctx.diagnostic(
                "Unclosed single quote",
                f"Add a closing single quote: \"{text}'\" - Make sure every ' has "
                f"a matching '.",
            )
        ]
    if text.count('"') % 2:
        return [
            ctx.diagnostic(
                "Unclosed string literal",
                f"This string literal is missing a closing quote. The string "
                f"starts with a quote but doesn't end with one. Fix: "
                f'"{text}"" - Add the missing closing quote to complete the string.',
            )
        ]
    return []


BRACE_RULES: list[Rule] = [
    Rule("parenthesis_balance", _check_parenthesis_balance, BRACE_LANGUAGES),
    Rule("missing_semicolon", _check_missing_semicolon, BRACE_LANGUAGES),
    Rule("missing_declaration", _check_missing_declaration, BRACE_LANGUAGES),
    Rule("invalid_variable_name", _check_invalid_variable_name, BRACE_LANGUAGES),
    Rule("missing_call_parentheses", _check_missing_call_parentheses, BRACE_LANGUAGES),
    Rule("missing_main", _check_missing_main, _JAVA),
    Rule("array_bounds", _check_array_bounds, BRACE_LANGUAGES),
    Rule(
        "array_bounds_fallback",
        _check_array_bounds_fallback,
        BRACE_LANGUAGES,
        allow_duplicate=True,
    ),
    Rule("trailing_comma", _check_trailing_comma, BRACE_LANGUAGES, allow_duplicate=True),
    Rule(
        "misspelled_keyword",
        _check_misspelled_keyword,
        BRACE_LANGUAGES,
        allow_duplicate=True,
    ),
    Rule("strict_equality", _check_strict_equality, BRACE_LANGUAGES, allow_duplicate=True),
    Rule("missing_colon", _check_missing_colon, BRACE_LANGUAGES),
    Rule("import_statement", _check_import_statement, _JAVA),
    Rule("method_declaration", _check_method_declaration, BRACE_LANGUAGES),
    Rule("reserved_identifier", _check_reserved_identifier, BRACE_LANGUAGES),
    Rule("unexpected_token", _check_unexpected_token, BRACE_LANGUAGES),
    Rule("missing_return_type", _check_missing_return_type, BRACE_LANGUAGES),
    Rule("loop_syntax", _check_loop_syntax, BRACE_LANGUAGES, allow_duplicate=True),
    Rule(
        "conditional_syntax",
        _check_conditional_syntax,
        BRACE_LANGUAGES,
        allow_duplicate=True,
    ),
    Rule("class_file_name", _check_class_file_name, _JAVA),
    Rule("logical_operator_spacing", _check_logical_operator_spacing, BRACE_LANGUAGES),
    Rule("function_call", _check_function_call, BRACE_LANGUAGES),
    Rule("parameter_list", _check_parameter_list, BRACE_LANGUAGES),
    Rule("extra_argument", _check_extra_argument, BRACE_LANGUAGES),
    Rule("type_mismatch", _check_type_mismatch, BRACE_LANGUAGES),
    Rule("cast_syntax", _check_cast_syntax, BRACE_LANGUAGES),
    Rule("null_dereference", _check_null_dereference, BRACE_LANGUAGES),
    Rule("quote_balance", _check_quote_balance, BRACE_LANGUAGES),
]
