"""Keyword and pattern driven tokenization for syntax highlighting."""

from __future__ import annotations

from glint.errors import GlintError, PatternError, SpanError, UnknownLanguageError
from glint.lexer import RegexLexer, StaticLexer, keyword_vocabulary, sort_tokens, tokenize
from glint.matchers import (
    KeywordMatcher,
    PatternMatcher,
    TokenGenerator,
    classify,
    keywords,
    pattern,
)
from glint.tokens import Span, Token, TokenKind

__version__ = "0.1.0"

__all__ = [
    "GlintError",
    "KeywordMatcher",
    "PatternError",
    "PatternMatcher",
    "RegexLexer",
    "Span",
    "SpanError",
    "StaticLexer",
    "Token",
    "TokenGenerator",
    "TokenKind",
    "UnknownLanguageError",
    "classify",
    "keyword_vocabulary",
    "keywords",
    "pattern",
    "sort_tokens",
    "tokenize",
]
