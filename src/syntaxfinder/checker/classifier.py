"""Language classifier — first-match-wins signature testing."""

from __future__ import annotations

import re

from syntaxfinder.checker.models import Language

_JAVA_SIGNATURES = ("public class", "public static void main", "System.out.println")
_PYTHON_SIGNATURES = ("def ", "import ", "from ")
_JAVASCRIPT_SIGNATURES = ("function ", "const ", "let ", "var ")
_C_SIGNATURES = ("#include", "main(")

# A line like "if x:" or "for i in range(3):" opening a Python block
_PYTHON_BLOCK_HEADER = re.compile(
    r"^[ \t]*(?:if|elif|else|for|while|def|class|try|except|finally|with)\b[^;{}\n]*:[ \t\r]*$",
    re.MULTILINE,
)


def classify(code: str) -> Language:
    """Guess the language of a source string.

    Signatures are tested as a priority list, not a vote. Java goes first
    because its keywords are the most distinctive; javascript is the
    default because the downstream rules treat it most permissively.
    """
    if any(sig in code for sig in _JAVA_SIGNATURES):
        return Language.JAVA
    if any(sig in code for sig in _PYTHON_SIGNATURES) or _PYTHON_BLOCK_HEADER.search(code):
        return Language.PYTHON
    if any(sig in code for sig in _JAVASCRIPT_SIGNATURES):
        return Language.JAVASCRIPT
    if any(sig in code for sig in _C_SIGNATURES):
        return Language.C
    # Never reached in practice: "#include" already matched the C branch.
    if "#include" in code and "using namespace" in code:
        return Language.CPP
    return Language.JAVASCRIPT
