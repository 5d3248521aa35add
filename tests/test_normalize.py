"""Tests for text normalization."""
import pytest

from textstatistics.text.normalize import normalize


SAMPLES = [
    "This is a simple test. It has two sentences.",
    "<p>First</p><p>Second</p>",
    "Hello, world!  How are you?",
    "Wait... what?!",
    "Line one\nLine two\r\n\tLine three",
    "There were 42 apples on 3/4/2020.",
    "Hello. 42. World.",
    "Page 5",
    "42",
    '<h1 class="title">Heading</h1><p>Body (with aside) - text; more: "quoted"</p>',
    "   ",
    "no terminator at all",
    "x<y",
    "2 > 1 is true",
    "a <> b < c",
]


class TestNormalizeRules:
    """Each rewrite step produces the expected canonical form."""

    def test_closing_block_tags_end_sentences(self):
        """Closing paragraph tags become sentence terminators."""
        assert normalize("<p>First</p><p>Second</p>") == "First. Second."

    def test_tags_with_attributes_are_stripped(self):
        text = '<h1 class="title">Heading</h1><div><b>Body</b> text</div>'
        assert normalize(text) == "Heading. Body text."

    def test_closing_tag_after_punctuation_is_merged(self):
        """A full stop before a closing tag does not produce a doubled terminator."""
        assert normalize("<li>Done.</li><li>Next!</li>") == "Done. Next."

    def test_soft_punctuation_becomes_spaces(self):
        assert normalize('One, two: three; (four) five-six "seven"') == "One two three four five six seven."

    def test_terminators_are_unified(self):
        assert normalize("Hello, world!  How are you?") == "Hello world. How are you."

    def test_repeated_terminators_collapse(self):
        assert normalize("Wait... what?!") == "Wait. what."

    def test_final_terminator_is_added(self):
        assert normalize("no terminator at all") == "no terminator at all."

    def test_newlines_and_tabs_collapse(self):
        assert normalize("Line one\nLine two\r\n\tLine three") == "Line one Line two Line three."

    def test_digit_runs_are_removed(self):
        assert normalize("There were 42 apples.") == "There were apples."

    def test_digit_only_sentence_leaves_no_orphan_terminator(self):
        assert normalize("Hello. 42. World.") == "Hello. World."
        assert normalize("Page 5") == "Page."

    def test_stray_brackets_become_spaces(self):
        """Angle brackets outside a tag do not survive."""
        assert normalize("x<y") == "x y."
        assert normalize("2 > 1 is true") == "is true."

    def test_whitespace_only_input(self):
        assert normalize("   ") == "."


class TestNormalizeGuards:
    """Empty input passes through unchanged."""

    def test_empty_string(self):
        assert normalize("") == ""

    def test_none(self):
        assert normalize(None) is None


class TestNormalizeInvariants:
    """Output shape holds for a range of inputs."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    @pytest.mark.parametrize("text", SAMPLES)
    def test_canonical_form(self, text):
        result = normalize(text)
        assert result.endswith(".")
        assert "<" not in result and ">" not in result
        assert "!" not in result and "?" not in result
        assert "  " not in result
        assert ".." not in result
        assert not any(char.isdigit() for char in result)
        assert result == result.strip()
