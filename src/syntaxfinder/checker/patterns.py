"""Regexes and keyword tables shared by the rule batteries."""

from __future__ import annotations

import re

DECLARATION_TYPES = (
    "int",
    "float",
    "double",
    "String",
    "char",
    "boolean",
    "long",
    "short",
    "byte",
    "let",
    "const",
    "var",
)
_DECL = "|".join(DECLARATION_TYPES)

# "int x", "let total", ...
DECLARATION = re.compile(rf"^\s*(?:{_DECL})\s+\w+")
# "int x =", "const y ="
TYPED_ASSIGNMENT = re.compile(rf"^\s*(?:{_DECL})\s+\w+\s*=")
# "int 2x = ..."
DIGIT_LEADING_NAME = re.compile(rf"^\s*(?:{_DECL})\s+(\d\w*)\s*=")
# "x = ..." with the left-hand identifier captured
BARE_ASSIGNMENT = re.compile(r"^\s*(\w+)\s*=")
BARE_IDENTIFIER = re.compile(r"^\s*[a-zA-Z_]\w*\s*$")

# Lines that never need a trailing semicolon
SEMICOLON_SKIP = [
    re.compile(r"^\s*//"),
    re.compile(r"^\s*/\*"),
    re.compile(r"^\s*\*"),
    re.compile(r"^\s*(?:public|private|protected)\s+class"),
    re.compile(r"^\s*(?:if|while|for|else|try|catch|finally|switch)\s*\("),
    re.compile(r"^\s*(?:else|try|finally)\s*$"),
    re.compile(r"^\s*case\s+"),
    re.compile(r"^\s*default\s*:"),
    re.compile(r"^\s*(?:import|package)\b"),
]

# Shapes of statements that do need one
STATEMENT_SHAPES = [
    DECLARATION,
    re.compile(r"^\w+\s*="),
    re.compile(r"^\w+\s*\("),
    re.compile(r"^System\."),
    re.compile(r"^console\."),
    re.compile(r"^printf\s*\("),
    re.compile(r"^return\s"),
    re.compile(r"^break\s*$"),
    re.compile(r"^continue\s*$"),
    re.compile(r"^\w+\s*\[.*\]\s*$"),
    re.compile(r"^\w+\s*\.\s*\w+"),
]

# Words a bare identifier line may legitimately be
BARE_WORD_ALLOWLIST = frozenset(
    {
        "if",
        "else",
        "while",
        "for",
        "do",
        "try",
        "finally",
        "switch",
        "return",
        "break",
        "continue",
        "main",
        "Test",
        "x",
        "a",
        "hello",
        "test",
        "System",
        "out",
        "println",
    }
)
BARE_WORD_EXCLUDED_SUBSTRINGS = ("class", "public", "private", "static")

# Left-hand sides that are not variables being assigned
NON_VARIABLE_WORDS = frozenset({"if", "while", "for", "switch", "return", "System", "console"})

ARRAY_ACCESS = re.compile(r"(\w+)\[(\d+)\]")
# Text ending just before "a[5]" in "int a[5]" or "int[5]" in "new int[5]"
DECLARATOR_PREFIX = re.compile(
    r"(?:\b(?:int|float|double|char|long|short|byte|boolean|String|auto|unsigned)|\bnew)\s+$"
)

MISSPELLINGS = {
    "publc": "public",
    "privat": "private",
    "statc": "static",
    "voi": "void",
    "systm": "system",
    "otput": "output",
    "prntln": "println",
    "lenght": "length",
    "lengh": "length",
}
MISSPELLING_PATTERNS = [
    (typo, correct, re.compile(rf"\b{typo}\b")) for typo, correct in MISSPELLINGS.items()
]

CASE_LABEL = re.compile(r"\bcase\b")
# A ternary "?", not "?.", "??" or a generic wildcard "<?>"
TERNARY = re.compile(r"(?<![?<])\?(?![.?>])")

IMPORT_LINE = re.compile(r"^\s*import\b")

# Lines headed by a control keyword are neither declarations nor calls
CONTROL_HEAD = re.compile(
    r"^\s*(?:\}\s*)?(?:else\s+if|else|if|for|while|switch|catch|return|new|throw|do)\b"
)
QUALIFIED_CALL = re.compile(r"^\s*\w+\s*\.\s*\w+\s*\(")

METHOD_SHAPE = re.compile(r"\w+\s+\w+\s*\([^)]*\)")
METHOD_WITH_BODY = re.compile(r"\w+\s+\w+\s*\([^)]*\)\s*\{")
_MODIFIER = r"(?:public|private|protected|static|final|abstract|synchronized|native|inline|extern|async)"
_RETURN_TYPE = r"(?:int|float|double|String|char|boolean|void|long|short|byte|bool|auto|unsigned|function)"
TYPED_METHOD_HEAD = re.compile(rf"^\s*(?:{_MODIFIER}\s+)*{_RETURN_TYPE}\b")

RESERVED_KEYWORDS = (
    "class",
    "public",
    "private",
    "static",
    "void",
    "String",
    "if",
    "else",
    "for",
    "while",
    "return",
)
RESERVED_AS_IDENTIFIER = [
    (kw, re.compile(rf"^\s*{kw}\s+\w+\s*=(?!=)")) for kw in RESERVED_KEYWORDS
]
VALID_TYPED_ASSIGNMENT = re.compile(r"^\s*(?:int|float|double|String|char|boolean)\s+\w+\s*=")

DISALLOWED_CHAR = re.compile(r"[^\w\s{}\[\]().;,+\-*/=!<>?@#%&|\\`~:$^]", re.ASCII)

# Closed string or char literal, honouring backslash escapes
STRING_LITERAL = re.compile(r"\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'")
LINE_COMMENT = re.compile(r"//.*$")

FOR_KEYWORD = re.compile(r"\bfor\b")
FOR_THREE_CLAUSE = re.compile(r"\bfor\s*\([^)]*;[^)]*;[^)]*\)")
IF_KEYWORD = re.compile(r"\bif\b")
IF_CONDITION = re.compile(r"\bif\s*\([^)]+\)")

LOGICAL_OPERATOR = re.compile(r"&&|\|\|")
UNSPACED_LOGICAL_OPERATOR = re.compile(r"(?<!\s)(?:&&|\|\|)|(?:&&|\|\|)(?!\s)")

SINGLE_ARGUMENT_CALL = re.compile(r"(\w+)\s*\(\s*\w+\s*\)")
SAFE_CALLS = ("System.out.print", "console.log", "console.error", "printf", "puts")
CALL_SKIP_WORDS = frozenset({"if", "while", "for", "switch", "catch", "return", "sizeof", "main"})

CALL_WITH_ARGS = re.compile(r"\w+\s*\([^)]*\)")
FIRST_ARGUMENT_LIST = re.compile(r"\(([^)]*)\)")
DOUBLE_COMMA = re.compile(r",\s*,")
EMPTY_CALL = re.compile(r"\w+\s*\(\s*\)")
DECLARATION_HEAD = re.compile(
    r"^\s*(?:int|float|double|String|char|boolean|public|private|protected|static)\s+"
)

NUMERIC_STRING_ASSIGNMENT = re.compile(
    r'^\s*(int|float|double|char|boolean)\s+(\w+)\s*=\s*"([^"]*)"'
)

CAST_SHAPE = re.compile(r"\(\s*(\w+)\s*\)\s*\w+")
CAST_FOLLOWED_BY_CALL = re.compile(r"\(\s*\w+\s*\)\s*\w+\s*\(")
PRIMITIVE_CASTS = frozenset(
    {"int", "float", "double", "String", "char", "long", "short", "byte", "boolean", "bool", "unsigned"}
)
