"""JSON language definition."""

from __future__ import annotations

from glint.lexer import StaticLexer
from glint.matchers import TokenGenerator, classify, keywords, pattern
from glint.tokens import TokenKind

_STRING = r'"(?:\\.|[^"\\\n])*"'


def json_generators() -> tuple[TokenGenerator, ...]:
    return (
        keywords(("true", "false", "null"), classify(TokenKind.CONSTANT)),
        # Object keys: after "{" or ",", before ":"
        pattern(r"(?<=[{,]\s*)" + _STRING + r"(?=\s*:)", classify(TokenKind.PROPERTY)),
        pattern(_STRING, classify(TokenKind.STRING)),
        pattern(r"-?\b(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?\b", classify(TokenKind.NUMBER)),
        pattern(r"[{}\[\],:]", classify(TokenKind.PUNCTUATION)),
    )


def make_lexer() -> StaticLexer:
    return StaticLexer(json_generators(), name="json")
