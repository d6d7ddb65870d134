# tests/unit/core/test_formatter.py
# Unit tests for rendering numbered documents into aligned strings

import pytest

from linum.core.classifier import classify
from linum.core.constants import PadMode
from linum.core.exceptions import PaddingError
from linum.core.formatter import column_width, render
from linum.core.policy import NUMBER_ALL, NUMBER_NON_EMPTY
from linum.core.types import NumberedLine


class TestColumnWidth:

    # * Width is the longest text length
    def test_longest_text(self):
        assert column_width(["a", "hello", "bb"]) == 5

    # * No lines means width 0
    def test_empty(self):
        assert column_width([]) == 0


class TestRender:

    # * Skip-empty w/ default padding: blank line renders as padding + separator
    def test_skip_empty_right_aligned(self):
        doc = classify(["hello", "", "world"], NUMBER_NON_EMPTY)

        assert render(PadMode.PAD_LEFT, doc) == [
            "    1 hello",
            "      ",
            "    2 world",
        ]

    # * Left-aligned numbers are padded on the right
    def test_left_aligned(self):
        doc = classify(["a", "bb", "ccc"], NUMBER_ALL)

        assert render(PadMode.PAD_RIGHT, doc) == ["1   a", "2   bb", "3   ccc"]

    # * Centered numbers
    def test_centered(self):
        doc = [NumberedLine(7, "abcd")]
        assert render(PadMode.PAD_CENTER, doc) == [" 7   abcd"]

    # * Single line: width equals its length & ordinal is "1"
    def test_single_line(self):
        doc = classify(["single"], NUMBER_ALL)
        assert render(PadMode.PAD_LEFT, doc) == ["     1 single"]

    # * Empty document renders to an empty list
    def test_empty_document(self):
        assert render(PadMode.PAD_LEFT, []) == []

    # * Output length matches document length
    def test_length_preserved(self, sample_lines):
        doc = classify(sample_lines, NUMBER_NON_EMPTY)
        assert len(render(PadMode.PAD_LEFT, doc)) == len(sample_lines)

    # * Rendering is deterministic
    def test_deterministic(self, sample_lines):
        doc = classify(sample_lines, NUMBER_ALL)
        assert render(PadMode.PAD_LEFT, doc) == render(PadMode.PAD_LEFT, doc)


class TestNumberWiderThanColumn:

    # * Number longer than every line raises PaddingError by default
    def test_raises_padding_error(self):
        doc = classify(["", ""], NUMBER_ALL)

        with pytest.raises(PaddingError) as exc_info:
            render(PadMode.PAD_LEFT, doc)

        assert exc_info.value.value == "1"
        assert exc_info.value.width == 0

    # * Ten one-character lines overflow at ordinal 10
    def test_two_digit_overflow(self):
        doc = classify(list("abcdefghij"), NUMBER_ALL)

        with pytest.raises(PaddingError) as exc_info:
            render(PadMode.PAD_LEFT, doc)
        assert exc_info.value.value == "10"

    # * fit_numbers widens the column to the longest number
    def test_fit_numbers(self):
        doc = classify(list("abcdefghij"), NUMBER_ALL)
        rendered = render(PadMode.PAD_LEFT, doc, fit_numbers=True)

        assert rendered[0] == " 1 a"
        assert rendered[-1] == "10 j"

    # * fit_numbers keeps the text width when it is already larger
    def test_fit_numbers_keeps_text_width(self):
        doc = classify(["hello", "world"], NUMBER_ALL)
        assert render(PadMode.PAD_LEFT, doc, fit_numbers=True) == [
            "    1 hello",
            "    2 world",
        ]
