"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from glint.lexer import RegexLexer, StaticLexer
from glint.matchers import classify, keywords, pattern
from glint.text import substring
from glint.tokens import Token, TokenKind


@pytest.fixture
def simple_lexer() -> StaticLexer:
    """Keywords ``if``/``else`` followed by a ``\\d+`` number pattern."""
    return StaticLexer(
        [
            keywords(["if", "else"], classify(TokenKind.KEYWORD)),
            pattern(r"\d+", classify(TokenKind.NUMBER)),
        ],
        name="simple",
    )


@pytest.fixture
def lex(simple_lexer):
    """Return a helper that tokenizes source with the simple lexer."""

    def _lex(source: str, lexer: RegexLexer | None = None) -> list[Token]:
        return (lexer or simple_lexer).tokenize(source)

    return _lex


def summarize(tokens: list[Token], source: str) -> list[tuple[object, str, int, int]]:
    """Return ``(kind, text, start, end)`` for each token."""
    return [(t.kind, substring(source, t.span), t.start, t.end) for t in tokens]


def assert_kinds(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], source: str, expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [substring(source, t.span) for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def find_tokens(tokens: list[Token], kind: object) -> list[Token]:
    """Return all tokens of the given kind."""
    return [t for t in tokens if t.kind == kind]
