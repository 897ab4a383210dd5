"""Text position helpers.

Python strings index by code point, while token spans are reported in UTF-16
code units so that they line up with editor and LSP positions. Every matcher
converts through :class:`Utf16Index` so both matching strategies agree on the
unit.
"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator

import regex

from glint.tokens import Span

# Unicode default word boundaries (UAX #29) instead of the \w/\W transition.
_BOUNDARY = regex.compile(r"\b", flags=regex.WORD)
_WORD_CHAR = regex.compile(r"\w", flags=regex.WORD)

_BMP_MAX = "\uffff"


def utf16_length(text: str) -> int:
    """Return the length of *text* in UTF-16 code units."""
    if text.isascii() or max(text) <= _BMP_MAX:
        return len(text)
    return len(text) + sum(1 for ch in text if ch > _BMP_MAX)


class Utf16Index:
    """Map code point indices of a source string to UTF-16 offsets."""

    __slots__ = ("_offsets", "length")

    def __init__(self, source: str) -> None:
        self._offsets: list[int] | None = None
        if source and not source.isascii() and max(source) > _BMP_MAX:
            offsets = [0]
            total = 0
            for ch in source:
                total += 2 if ch > _BMP_MAX else 1
                offsets.append(total)
            self._offsets = offsets
            self.length = total
        else:
            self.length = len(source)

    def offset(self, index: int) -> int:
        """UTF-16 offset of code point *index* (0 <= index <= len(source))."""
        if self._offsets is None:
            return index
        return self._offsets[index]

    def index(self, offset: int) -> int:
        """Code point index of UTF-16 *offset*, rounding down inside a pair."""
        if self._offsets is None:
            return offset
        return bisect_right(self._offsets, offset) - 1

    def span(self, start: int, end: int) -> Span:
        """Span for the code point range [start, end)."""
        return Span(self.offset(start), self.offset(end))


def substring(source: str, span: Span) -> str:
    """Return the text covered by a UTF-16 *span* of *source*."""
    index = Utf16Index(source)
    return source[index.index(span.start) : index.index(span.end)]


def segment_words(text: str) -> Iterator[tuple[str, int, int]]:
    """Yield ``(word, start, end)`` for each word unit of *text*, in order.

    Offsets are code point indices. Units made only of whitespace or
    punctuation are skipped.
    """
    prev = 0
    for m in _BOUNDARY.finditer(text):
        pos = m.start()
        if pos > prev:
            word = text[prev:pos]
            if _WORD_CHAR.search(word):
                yield word, prev, pos
        prev = pos
    if prev < len(text):
        word = text[prev:]
        if _WORD_CHAR.search(word):
            yield word, prev, len(text)
