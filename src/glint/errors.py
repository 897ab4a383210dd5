"""Error types with formatted pattern context."""

from __future__ import annotations

from glint.tokens import Span


class GlintError(Exception):
    """Base class for all glint errors."""


class PatternError(GlintError):
    """Raised when a language definition supplies a pattern that does not compile."""

    def __init__(self, message: str, pattern: str, position: int | None = None) -> None:
        self.message = message
        self.pattern = pattern
        self.position = position
        super().__init__(self.format())

    def format(self, name: str = "pattern") -> str:
        if self.position is None:
            return f"error: invalid {name}: {self.message}\n  | {self.pattern}"

        # Point at the offending character, or one past the end for EOF errors
        col = max(0, min(self.position, len(self.pattern)))
        pad = " " * col

        return (
            f"error: invalid {name}: {self.message}\n"
            f"  --> {name}:{col + 1}\n"
            f"  |\n"
            f"  | {self.pattern}\n"
            f"  | {pad}^"
        )


class SpanError(GlintError, AssertionError):
    """Raised when a matcher produces a span outside the source bounds."""

    def __init__(self, span: Span, length: int) -> None:
        self.span = span
        self.length = length
        super().__init__(
            f"span [{span.start}, {span.end}) is outside source of length {length}"
        )


class UnknownLanguageError(GlintError, LookupError):
    """Raised when no registered language matches a name or file extension."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown language: {name!r}")
