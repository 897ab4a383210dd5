"""Keyword and pattern matchers, and the token generators built from them.

A token generator is one of two matcher kinds paired with a transform that
turns each matched span into a :class:`~glint.tokens.Token`:

- :class:`KeywordMatcher` finds whole-word occurrences of a fixed keyword list.
- :class:`PatternMatcher` finds regular expression matches.

Use :func:`keywords` and :func:`pattern` to build them; :func:`pattern`
compiles eagerly so a bad expression fails while the language is defined,
not while a document is being highlighted.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field

import regex

from glint.errors import PatternError
from glint.text import Utf16Index, segment_words
from glint.tokens import Span, Token

Transform = Callable[[Span], Token]


@dataclass(frozen=True, slots=True)
class KeywordMatcher:
    """Whole-word, case-sensitive keyword lookup."""

    keywords: tuple[str, ...]
    transform: Transform
    _members: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_members", frozenset(self.keywords))

    def match(self, source: str, index: Utf16Index | None = None) -> list[Span]:
        """Return the span of every keyword occurrence, left to right."""
        if index is None:
            index = Utf16Index(source)
        members = self._members
        return [
            index.span(start, end)
            for word, start, end in segment_words(source)
            if word in members
        ]


@dataclass(frozen=True, slots=True)
class PatternMatcher:
    """Regular expression matching over the whole source."""

    pattern: regex.Pattern
    transform: Transform

    def match(self, source: str, index: Utf16Index | None = None) -> list[Span]:
        """Return non-overlapping match spans, left to right.

        A zero-width match of a pattern with capturing groups reports the
        span of group 1, so lookahead patterns can isolate their payload.
        """
        if index is None:
            index = Utf16Index(source)
        has_groups = self.pattern.groups > 0
        spans: list[Span] = []
        for m in self.pattern.finditer(source):
            start, end = m.span()
            if start == end and has_groups:
                group_start, group_end = m.span(1)
                # Group 1 may not have taken part in the match
                if group_start >= 0:
                    start, end = group_start, group_end
            spans.append(index.span(start, end))
        return spans


TokenGenerator = KeywordMatcher | PatternMatcher


def classify(kind: Hashable) -> Transform:
    """Return a transform that tags every span with *kind*."""

    def _transform(span: Span) -> Token:
        return Token(span, kind)

    _transform.__qualname__ = f"classify({kind!r})"
    return _transform


def keywords(words: Iterable[str], transform: Transform) -> KeywordMatcher:
    """Build a keyword generator; the word order is kept for vocabulary queries."""
    return KeywordMatcher(tuple(words), transform)


def pattern(text: str, transform: Transform, flags: int = 0) -> PatternMatcher:
    """Compile *text* into a pattern generator.

    Raises:
        PatternError: if the expression does not compile.
    """
    try:
        compiled = regex.compile(text, flags)
    except regex.error as exc:
        raise PatternError(exc.msg, text, exc.pos) from exc
    return PatternMatcher(compiled, transform)
