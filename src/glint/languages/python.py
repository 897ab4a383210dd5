"""Python language definition."""

from __future__ import annotations

import regex

from glint.lexer import StaticLexer
from glint.matchers import TokenGenerator, classify, keywords, pattern
from glint.tokens import TokenKind

KEYWORDS = (
    "False", "None", "True", "and", "as", "assert", "async", "await",
    "break", "class", "continue", "def", "del", "elif", "else", "except",
    "finally", "for", "from", "global", "if", "import", "in", "is",
    "lambda", "nonlocal", "not", "or", "pass", "raise", "return", "try",
    "while", "with", "yield",
)  # fmt: skip

BUILTINS = (
    "abs", "all", "any", "bool", "bytes", "callable", "chr", "dict", "dir",
    "enumerate", "filter", "float", "format", "frozenset", "getattr",
    "hasattr", "hash", "id", "input", "int", "isinstance", "issubclass",
    "iter", "len", "list", "map", "max", "min", "next", "object", "open",
    "ord", "print", "range", "repr", "reversed", "round", "set", "setattr",
    "sorted", "str", "sum", "super", "tuple", "type", "zip",
)  # fmt: skip

_QUOTED = (
    r"(?:\"\"\"[\s\S]*?\"\"\"|'''[\s\S]*?'''"
    r"|\"(?:\\.|[^\"\\\n])*\"|'(?:\\.|[^'\\\n])*')"
)

# Optional prefix: r"", b'', rb"", f"", ...
_STRING = r"(?:\b[rRbBuUfF]{1,2})?" + _QUOTED

_NUMBER = (
    r"\b(?:0[xX][0-9a-fA-F_]+|0[bB][01_]+|0[oO][0-7_]+"
    r"|\d[\d_]*(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?[jJ]?)"
)


def python_generators() -> tuple[TokenGenerator, ...]:
    """Build the Python generators, keywords first."""
    return (
        keywords(KEYWORDS, classify(TokenKind.KEYWORD)),
        keywords(BUILTINS, classify(TokenKind.BUILTIN)),
        pattern(r"(?<=\bdef\s+)[A-Za-z_]\w*", classify(TokenKind.FUNCTION)),
        pattern(r"(?<=\bclass\s+)[A-Za-z_]\w*", classify(TokenKind.TYPE)),
        # Zero-width: the call target is captured by the lookahead
        pattern(r"\b(?=([A-Za-z_]\w*)\s*\()", classify(TokenKind.FUNCTION)),
        pattern(r"(?<=^[ \t]*)@[A-Za-z_][\w.]*", classify(TokenKind.DECORATOR), regex.MULTILINE),
        pattern(_NUMBER, classify(TokenKind.NUMBER)),
        pattern(_STRING, classify(TokenKind.STRING)),
        pattern(r"#[^\n]*", classify(TokenKind.COMMENT)),
    )


def make_lexer() -> StaticLexer:
    return StaticLexer(python_generators(), name="python")
