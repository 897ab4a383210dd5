"""Test UTF-16 position helpers and word segmentation."""

from glint.text import Utf16Index, segment_words, substring, utf16_length
from glint.tokens import Span


class TestUtf16Length:
    def test_ascii(self):
        assert utf16_length("hello") == 5

    def test_empty(self):
        assert utf16_length("") == 0

    def test_bmp(self):
        assert utf16_length("café") == 4

    def test_astral(self):
        # U+1F600 needs a surrogate pair
        assert utf16_length("a\U0001f600b") == 4


class TestUtf16Index:
    def test_ascii_identity(self):
        index = Utf16Index("abc")
        assert index.length == 3
        assert [index.offset(i) for i in range(4)] == [0, 1, 2, 3]

    def test_astral_offsets(self):
        index = Utf16Index("\U0001f600x\U0001f600")
        assert index.length == 5
        assert [index.offset(i) for i in range(4)] == [0, 2, 3, 5]

    def test_index_roundtrip(self):
        source = "a\U0001f600bc"
        index = Utf16Index(source)
        for i in range(len(source) + 1):
            assert index.index(index.offset(i)) == i

    def test_index_inside_pair_rounds_down(self):
        index = Utf16Index("\U0001f600x")
        assert index.index(1) == 0

    def test_span(self):
        index = Utf16Index("\U0001f600 if")
        assert index.span(2, 4) == Span(3, 5)


class TestSubstring:
    def test_ascii(self):
        assert substring("if 12 else", Span(3, 5)) == "12"

    def test_after_astral(self):
        assert substring("\U0001f600 if", Span(3, 5)) == "if"

    def test_empty_span(self):
        assert substring("abc", Span(1, 1)) == ""


class TestSegmentWords:
    def test_spaces(self):
        words = list(segment_words("if 12 else 7"))
        assert words == [("if", 0, 2), ("12", 3, 5), ("else", 6, 10), ("7", 11, 12)]

    def test_punctuation_delimits(self):
        words = [w for w, _, _ in segment_words("if(x){return;}")]
        assert words == ["if", "x", "return"]

    def test_underscore_joins(self):
        words = [w for w, _, _ in segment_words("my_if if")]
        assert words == ["my_if", "if"]

    def test_letters_and_digits_join(self):
        words = [w for w, _, _ in segment_words("if2 if")]
        assert words == ["if2", "if"]

    def test_empty(self):
        assert list(segment_words("")) == []

    def test_only_punctuation(self):
        assert list(segment_words(" ;; () ")) == []

    def test_non_ascii_word(self):
        words = [w for w, _, _ in segment_words("é if")]
        assert words == ["é", "if"]
