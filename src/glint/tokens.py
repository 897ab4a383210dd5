"""Token data structures: spans, tokens, and the built-in classifications."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Classifications used by the built-in languages.

    The engine treats a token's kind as opaque; any hashable tag works.
    """

    KEYWORD = "keyword"
    BUILTIN = "builtin"
    NUMBER = "number"
    STRING = "string"
    COMMENT = "comment"
    FUNCTION = "function"
    DECORATOR = "decorator"
    OPERATOR = "operator"
    VARIABLE = "variable"
    PROPERTY = "property"
    TYPE = "type"
    CONSTANT = "constant"
    PUNCTUATION = "punctuation"


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open source range [start, end) in UTF-16 code units."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of source text."""

    span: Span
    kind: Hashable

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end
