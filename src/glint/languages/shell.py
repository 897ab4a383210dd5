"""POSIX shell language definition."""

from __future__ import annotations

from glint.lexer import StaticLexer
from glint.matchers import TokenGenerator, classify, keywords, pattern
from glint.tokens import TokenKind

KEYWORDS = (
    "if", "then", "else", "elif", "fi", "case", "esac", "for", "select",
    "while", "until", "do", "done", "in", "function", "time", "return",
    "break", "continue", "local", "export", "readonly", "declare", "unset",
)  # fmt: skip

BUILTINS = (
    "alias", "cd", "echo", "eval", "exec", "exit", "printf", "pwd", "read",
    "set", "shift", "source", "test", "trap", "wait",
)  # fmt: skip


def shell_generators() -> tuple[TokenGenerator, ...]:
    return (
        keywords(KEYWORDS, classify(TokenKind.KEYWORD)),
        keywords(BUILTINS, classify(TokenKind.BUILTIN)),
        pattern(r"\b(?=([A-Za-z_][\w-]*)\s*\(\s*\))", classify(TokenKind.FUNCTION)),
        pattern(r"\$(?:\{[^}\n]*\}|[A-Za-z_]\w*|[0-9@#?$!*-])", classify(TokenKind.VARIABLE)),
        pattern(r"\b\d+\b", classify(TokenKind.NUMBER)),
        pattern(r"\"(?:\\.|[^\"\\])*\"|'[^']*'", classify(TokenKind.STRING)),
        # A comment starts a word; "$#" and "a#b" are not comments
        pattern(r"(?<![^\s;&|()])#[^\n]*", classify(TokenKind.COMMENT)),
    )


def make_lexer() -> StaticLexer:
    return StaticLexer(shell_generators(), name="shell")
