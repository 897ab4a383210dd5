"""Test spans and tokens."""

import pytest

from glint.tokens import Span, Token, TokenKind


class TestSpan:
    def test_length(self):
        assert Span(3, 7).length == 4

    def test_zero_width_allowed(self):
        span = Span(5, 5)
        assert span.length == 0

    def test_end_before_start_rejected(self):
        with pytest.raises(ValueError):
            Span(4, 2)

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            Span(-1, 2)

    def test_frozen(self):
        span = Span(0, 1)
        with pytest.raises(AttributeError):
            span.start = 2  # type: ignore[misc]

    def test_equality(self):
        assert Span(1, 2) == Span(1, 2)
        assert Span(1, 2) != Span(1, 3)


class TestToken:
    def test_start_end(self):
        tok = Token(Span(2, 6), TokenKind.KEYWORD)
        assert tok.start == 2
        assert tok.end == 6

    def test_kind_is_opaque(self):
        tok = Token(Span(0, 1), "my-tag")
        assert tok.kind == "my-tag"

    def test_hashable(self):
        a = Token(Span(0, 1), TokenKind.NUMBER)
        b = Token(Span(0, 1), TokenKind.NUMBER)
        assert {a, b} == {a}
