"""Lexers: run an ordered list of token generators over source text."""

from __future__ import annotations

from collections.abc import Iterable

from glint.errors import SpanError
from glint.logger import get_logger
from glint.matchers import KeywordMatcher, PatternMatcher, TokenGenerator
from glint.text import Utf16Index
from glint.tokens import Span, Token

logger = get_logger(__name__)


class RegexLexer:
    """A language definition built from keyword and pattern generators.

    Subclasses implement :meth:`generators`. The returned list may depend on
    the source text (a shebang, an embedded sub-language), but must be the
    same for the same source. Lexers hold no mutable state and can be shared
    between threads.
    """

    name: str = ""

    def generators(self, source: str) -> list[TokenGenerator]:
        """Return the generators to run over *source*, in priority order."""
        raise NotImplementedError

    def tokenize(self, source: str) -> list[Token]:
        """Tokenize *source*.

        Tokens are grouped by generator, in list order, and each group is in
        match order. The result is not sorted by position; use
        :func:`sort_tokens` when position order is needed.
        """
        generators = self.generators(source)
        index = Utf16Index(source)
        tokens: list[Token] = []

        for generator in generators:
            match generator:
                case KeywordMatcher() | PatternMatcher():
                    spans = generator.match(source, index)
                case _:
                    raise TypeError(f"not a token generator: {generator!r}")

            for span in spans:
                _check_span(span, index.length)
                tokens.append(generator.transform(span))

        logger.debug(
            "%s: %d generators produced %d tokens",
            self.name or type(self).__name__,
            len(generators),
            len(tokens),
        )
        return tokens

    @property
    def keywords(self) -> list[str]:
        """The keyword vocabulary; see :func:`keyword_vocabulary`."""
        return keyword_vocabulary(self)


class StaticLexer(RegexLexer):
    """A lexer whose generators do not depend on the source."""

    def __init__(self, generators: Iterable[TokenGenerator], name: str = "") -> None:
        self._generators = tuple(generators)
        self.name = name

    def generators(self, source: str) -> list[TokenGenerator]:
        return list(self._generators)


def _check_span(span: Span, length: int) -> None:
    if span.end > length:
        raise SpanError(span, length)


def tokenize(source: str, lexer: RegexLexer) -> list[Token]:
    """Tokenize *source* with *lexer*."""
    return lexer.tokenize(source)


def keyword_vocabulary(lexer: RegexLexer) -> list[str]:
    """Return every keyword the lexer recognizes.

    Keyword lists of the generators for an empty source are concatenated in
    generator order; duplicates are kept.
    """
    vocabulary: list[str] = []
    for generator in lexer.generators(""):
        if isinstance(generator, KeywordMatcher):
            vocabulary.extend(generator.keywords)
    return vocabulary


def sort_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Return *tokens* in position order, keeping generator order for ties."""
    return sorted(tokens, key=lambda t: t.span.start)
