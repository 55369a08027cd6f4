"""Tests for size constraint enforcement."""

import pytest

from semantic_splitter.services.splitting.constraints import apply_size_constraints, pack_sentences


class TestPackSentences:
    """Tests for pack_sentences."""

    def test_greedy_packing_counts_joiner(self) -> None:
        """Pieces stay within max, counting one joiner per sentence."""
        sentences = ["Alpha one.", "Beta two.", "Gamma three."]
        assert pack_sentences(sentences, 20) == ["Alpha one. Beta two.", "Gamma three."]

    def test_long_sentence_is_not_cut(self) -> None:
        """A sentence longer than max is its own piece."""
        assert pack_sentences(["x" * 30, "short."], 10) == ["x" * 30, "short."]


class TestApplySizeConstraints:
    """Tests for apply_size_constraints."""

    def test_noop_without_bounds(self) -> None:
        """No bounds, no changes."""
        chunks = ["a", "b" * 5000]
        assert apply_size_constraints(chunks) == chunks

    def test_min_accumulates_trailing_small_chunks(self) -> None:
        """Chunks of 10 and 45 characters become one chunk of at least 50."""
        chunks = ["a" * 10, "b" * 45]
        result = apply_size_constraints(chunks, min_size=50)
        assert result == ["a" * 10 + " " + "b" * 45]
        assert len(result[0]) >= 50

    def test_accumulator_emits_when_reaching_min(self) -> None:
        """The accumulator is emitted as soon as it reaches min; leftovers flush at the end."""
        assert apply_size_constraints(["aaaa", "bbbb", "cccc"], min_size=9) == ["aaaa bbbb", "cccc"]

    def test_normal_chunk_flushes_pending(self) -> None:
        """A normal chunk flushes pending content even if it is still under min."""
        assert apply_size_constraints(["aa", "normal chunk"], min_size=5) == ["aa", "normal chunk"]

    def test_max_splits_on_sentences(self) -> None:
        """Oversized chunks are split along sentence boundaries within max."""
        result = apply_size_constraints(["Alpha one. Beta two. Gamma three."], max_size=20)
        assert result == ["Alpha one. Beta two.", "Gamma three."]
        assert all(len(c) <= 20 for c in result)

    def test_single_long_sentence_stays_whole(self) -> None:
        """A sentence is never cut, even when it alone exceeds max."""
        assert apply_size_constraints(["x" * 30], max_size=10) == ["x" * 30]

    def test_small_remainder_joins_next_pieces(self) -> None:
        """An undersized remainder of a split chunk is flushed by the next normal chunk."""
        chunks = ["Alpha one. Beta two. Gamma three.", "Delta four is here."]
        result = apply_size_constraints(chunks, min_size=15, max_size=20)
        assert result == ["Alpha one. Beta two.", "Gamma three.", "Delta four is here."]

    def test_small_sub_chunk_is_kept(self) -> None:
        """A short piece cut from an oversized chunk is accumulated, not lost."""
        chunks = ["Short one. A much longer sentence here."]
        result = apply_size_constraints(chunks, min_size=15, max_size=20)
        assert result == ["Short one.", "A much longer sentence here."]

    def test_pending_content_keeps_its_position(self) -> None:
        """Pending small content is emitted before the pieces of a following oversized chunk."""
        chunks = ["Tiny.", "Alpha one. Beta two. Gamma three."]
        result = apply_size_constraints(chunks, min_size=8, max_size=20)
        assert result == ["Tiny.", "Alpha one. Beta two.", "Gamma three."]

    def test_accumulated_chunk_may_exceed_max(self) -> None:
        """Accumulated chunks are not re-checked against max."""
        result = apply_size_constraints(["a" * 8, "b" * 8], min_size=10, max_size=12)
        assert result == ["a" * 8 + " " + "b" * 8]
        assert len(result[0]) > 12

    @pytest.mark.parametrize(
        ("min_size", "max_size"),
        [(None, 25), (10, None), (10, 25), (30, 40)],
    )
    def test_never_drops_or_reorders(self, min_size: int | None, max_size: int | None) -> None:
        """Re-joined output equals the re-joined input."""
        chunks = ["One. Two.", "Three is longer than the rest.", "Four.", "Five six seven. Eight nine ten eleven."]
        result = apply_size_constraints(chunks, min_size=min_size, max_size=max_size)
        assert " ".join(result) == " ".join(chunks)

    def test_custom_pattern_for_resplitting(self) -> None:
        """Oversized chunks are re-segmented with the configured pattern."""
        result = apply_size_constraints(["aaa;bbb;ccc"], max_size=8, pattern=r"(?<=;)")
        assert result == ["aaa;", "bbb; ccc"]
