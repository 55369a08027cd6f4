"""Tests for sentence segmentation and window combination."""

import re

import pytest

from semantic_splitter.services.splitting.sentences import combine_sentences, split_sentences


class TestSplitSentences:
    """Tests for split_sentences."""

    def test_default_boundaries(self) -> None:
        """Split after . ? and ! followed by whitespace."""
        assert split_sentences("A cat sat. A dog ran? Yes! ok") == ["A cat sat.", "A dog ran?", "Yes!", "ok"]

    def test_trims_and_drops_blank_units(self) -> None:
        """Leading/trailing whitespace is trimmed and blank units are discarded."""
        assert split_sentences("  Hello there.   General Kenobi.  ") == ["Hello there.", "General Kenobi."]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t "])
    def test_blank_text(self, text: str) -> None:
        """Blank text has no sentences."""
        assert split_sentences(text) == []

    def test_punctuation_without_whitespace_is_not_a_boundary(self) -> None:
        """A period inside a token does not split."""
        assert split_sentences("Version 1.2 is out.") == ["Version 1.2 is out."]

    def test_custom_pattern(self) -> None:
        """A custom boundary pattern replaces the default."""
        assert split_sentences("one\n\ntwo\n \nthree", r"\n+") == ["one", "two", "three"]

    def test_compiled_pattern(self) -> None:
        """Compiled patterns are accepted."""
        assert split_sentences("a;b; c", re.compile(r";\s*")) == ["a", "b", "c"]


class TestCombineSentences:
    """Tests for combine_sentences."""

    def test_buffer_one(self) -> None:
        """Each window holds one neighbour on each side, clamped at the ends."""
        assert combine_sentences(["a", "b", "c", "d"], 1) == ["a b", "a b c", "b c d", "c d"]

    def test_buffer_zero(self) -> None:
        """Buffer zero windows are the sentences themselves."""
        assert combine_sentences(["a", "b", "c"], 0) == ["a", "b", "c"]

    def test_buffer_larger_than_sequence(self) -> None:
        """A buffer beyond the sequence length covers everything."""
        assert combine_sentences(["a", "b", "c"], 10) == ["a b c"] * 3

    def test_one_window_per_sentence(self) -> None:
        """Window count always equals sentence count."""
        sentences = [f"s{i}" for i in range(7)]
        assert len(combine_sentences(sentences, 2)) == 7

    def test_empty(self) -> None:
        """No sentences, no windows."""
        assert combine_sentences([], 1) == []
