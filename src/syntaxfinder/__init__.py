"""SyntaxFinder: heuristic syntax checking for pasted source code."""

__version__ = "0.1.0"
