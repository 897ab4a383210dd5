"""Test error messages and pattern context snippets."""

import pytest

from glint.errors import GlintError, PatternError, SpanError, UnknownLanguageError
from glint.matchers import classify, pattern
from glint.tokens import Span


class TestPatternErrorFromCompile:
    def test_raised_for_unbalanced_group(self):
        with pytest.raises(PatternError) as exc_info:
            pattern("(abc", classify("x"))
        err = exc_info.value
        assert err.pattern == "(abc"
        assert err.message

    def test_is_glint_error(self):
        with pytest.raises(GlintError):
            pattern("[", classify("x"))

    def test_message_in_str(self):
        with pytest.raises(PatternError) as exc_info:
            pattern("[a-", classify("x"))
        assert str(exc_info.value).startswith("error: invalid pattern:")


class TestPatternErrorFormatting:
    def test_format_contains_pattern(self):
        err = PatternError("nothing to repeat", r"\d+**", 4)
        assert r"\d+**" in err.format()

    def test_format_carets_under_position(self):
        err = PatternError("nothing to repeat", "ab*+", 3)
        lines = err.format().splitlines()
        assert lines[-2] == "  | ab*+"
        assert lines[-1] == "  |    ^"

    def test_format_contains_column(self):
        err = PatternError("bad", "abc", 0)
        assert "pattern:1" in err.format()

    def test_format_custom_name(self):
        err = PatternError("bad", "abc", 1)
        formatted = err.format("python.STRING")
        assert "invalid python.STRING: bad" in formatted
        assert "python.STRING:2" in formatted

    def test_position_past_end(self):
        err = PatternError("missing )", "(ab", 3)
        assert err.format().splitlines()[-1] == "  |    ^"

    def test_no_position(self):
        err = PatternError("bad", "abc")
        assert err.format() == "error: invalid pattern: bad\n  | abc"


class TestSpanError:
    def test_message(self):
        err = SpanError(Span(2, 10), 5)
        assert "[2, 10)" in str(err)
        assert "length 5" in str(err)


class TestUnknownLanguageError:
    def test_message(self):
        assert str(UnknownLanguageError("cobol")) == "unknown language: 'cobol'"
