"""Tests for the recursive text splitter."""

import pytest

from tokensplit.chunking.domain.entities.text_chunk import TextChunk
from tokensplit.chunking.domain.exceptions import InvalidConfigurationError, OverlapConfigurationError
from tokensplit.chunking.domain.services.separators import get_separators
from tokensplit.chunking.domain.value_objects.splitter_config import TextSplitterConfig
from tokensplit.chunking.text_splitter import TextSplitter


def reconstruct(chunks: list[TextChunk], original: str, separators: list[str]) -> str:
    """Join chunk texts, re-inserting the separator removed between neighbours."""
    pieces: list[str] = []
    position = 0
    for chunk in chunks:
        gap = original[position : chunk.start_pos]
        assert gap == "" or gap in separators
        pieces.append(gap)
        pieces.append(chunk.text)
        position = chunk.end_pos + 1
    pieces.append(original[position:])
    return "".join(pieces)


SAMPLE = (
    "# Title\n\nThe quick brown fox jumps over the lazy dog.\n"
    "Second line of the first paragraph.\n\n\n"
    "Another paragraph with a verylongwordthatcannotbesplitbywhitespace in it.\n"
    "  indented line\n\n"
)


class TestScenarios:
    def test_paragraph_split_without_keeping_separators(self, char_tokenizer) -> None:
        splitter = TextSplitter(separators=["\n\n"], chunk_size=10, chunk_overlap=0, tokenizer=char_tokenizer)

        chunks = splitter.split("AAAA\n\nBBBB")

        assert [c.text for c in chunks] == ["AAAA", "BBBB"]
        assert [(c.start_pos, c.end_pos) for c in chunks] == [(0, 3), (6, 9)]

    def test_paragraph_split_keeping_separators(self, char_tokenizer) -> None:
        splitter = TextSplitter(
            separators=["\n\n"],
            keep_separators=True,
            chunk_size=10,
            chunk_overlap=0,
            tokenizer=char_tokenizer,
        )

        chunks = splitter.split("AAAA\n\nBBBB")

        assert chunks[0].text == "AAAA\n\n"
        assert (chunks[0].start_pos, chunks[0].end_pos) == (0, 5)
        assert chunks[1].text == "BBBB"
        assert (chunks[1].start_pos, chunks[1].end_pos) == (6, 9)

    def test_long_word_cascades_down_to_characters(self, char_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=3, chunk_overlap=0, tokenizer=char_tokenizer)
        word = "abcdefghij"

        chunks = splitter.split(word)

        assert [c.text for c in chunks] == list(word)
        assert all(len(c.tokens) == 1 for c in chunks)
        assert [(c.start_pos, c.end_pos) for c in chunks] == [(i, i) for i in range(len(word))]

    def test_overlap_borrowed_from_both_neighbours(self, char_tokenizer) -> None:
        splitter = TextSplitter(separators=[" "], chunk_size=4, chunk_overlap=2, tokenizer=char_tokenizer)

        first, middle, last = splitter.split("aaa bbb ccc")

        assert middle.start_overlap == [ord("a"), ord("a")]
        assert middle.end_overlap == [ord("c"), ord("c")]
        assert first.start_overlap == []
        assert first.end_overlap == []
        assert last.end_overlap == []
        assert middle.render(char_tokenizer) == "aabbbcc"


class TestRecursiveSplit:
    def test_empty_text_returns_no_chunks(self, char_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=5, chunk_overlap=1, tokenizer=char_tokenizer)

        assert splitter.split("") == []

    def test_text_within_budget_is_one_chunk(self, char_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=100, chunk_overlap=0, tokenizer=char_tokenizer)

        chunks = splitter.split("short text")

        assert len(chunks) == 1
        assert chunks[0].text == "short text"
        assert (chunks[0].start_pos, chunks[0].end_pos) == (0, 9)
        assert chunks[0].tokens == char_tokenizer.encode("short text")

    def test_coarsest_fitting_separator_wins(self, char_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=5, chunk_overlap=0, tokenizer=char_tokenizer)

        chunks = splitter.split("aa bb\n\ncc dd")

        # Each paragraph fits, so neither is split on spaces
        assert [c.text for c in chunks] == ["aa bb", "cc dd"]

    def test_only_over_budget_parts_are_subdivided(self, char_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=5, chunk_overlap=0, tokenizer=char_tokenizer)
        text = "ab\n\nccc ddd"

        chunks = splitter.split(text)

        assert [c.text for c in chunks] == ["ab", "ccc", "ddd"]
        assert [(c.start_pos, c.end_pos) for c in chunks] == [(0, 1), (4, 6), (8, 10)]

    def test_empty_parts_are_kept(self, char_tokenizer) -> None:
        splitter = TextSplitter(separators=["\n\n"], chunk_size=10, chunk_overlap=0, tokenizer=char_tokenizer)

        chunks = splitter.split("A\n\n\n\nB")

        assert [c.text for c in chunks] == ["A", "", "B"]
        assert (chunks[1].start_pos, chunks[1].end_pos) == (3, 2)
        assert chunks[1].is_empty
        assert (chunks[2].start_pos, chunks[2].end_pos) == (5, 5)

    def test_kept_separator_is_trailing_content(self, char_tokenizer) -> None:
        splitter = TextSplitter(
            separators=[" "], keep_separators=True, chunk_size=4, chunk_overlap=0, tokenizer=char_tokenizer
        )

        chunks = splitter.split("aaa bbb ccc")

        assert [c.text for c in chunks] == ["aaa ", "bbb ", "ccc"]
        assert "".join(c.text for c in chunks) == "aaa bbb ccc"

    def test_offsets_slice_original_text(self, char_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=12, chunk_overlap=0, tokenizer=char_tokenizer)

        for chunk in splitter.split(SAMPLE):
            assert SAMPLE[chunk.start_pos : chunk.end_pos + 1] == chunk.text

    @pytest.mark.parametrize("chunk_size", [1, 3, 8, 20, 200])
    @pytest.mark.parametrize("keep_separators", [False, True])
    def test_reconstruction(self, char_tokenizer, chunk_size: int, keep_separators: bool) -> None:
        splitter = TextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=0,
            keep_separators=keep_separators,
            tokenizer=char_tokenizer,
        )

        chunks = splitter.split(SAMPLE)

        if keep_separators:
            assert "".join(c.text for c in chunks) == SAMPLE
        assert reconstruct(chunks, SAMPLE, get_separators()) == SAMPLE

    @pytest.mark.parametrize("chunk_size", [1, 4, 16])
    def test_budget_respected(self, char_tokenizer, chunk_size: int) -> None:
        splitter = TextSplitter(chunk_size=chunk_size, chunk_overlap=0, tokenizer=char_tokenizer)

        assert all(len(c.tokens) <= chunk_size for c in splitter.split(SAMPLE))

    def test_doc_type_preset_is_used(self, char_tokenizer) -> None:
        source = "import os\n\nclass A:\n    pass\n\ndef f():\n    return 1\n"
        splitter = TextSplitter(doc_type="python", chunk_size=25, chunk_overlap=0, tokenizer=char_tokenizer)

        chunks = splitter.split(source)

        assert [c.text for c in chunks] == ["import os\n", "A:\n    pass\n", "f():\n    return 1\n"]
        assert reconstruct(chunks, source, get_separators("python")) == source

    def test_deterministic(self, char_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=7, chunk_overlap=3, tokenizer=char_tokenizer)

        assert splitter.split(SAMPLE) == splitter.split(SAMPLE)


class TestExhaustedSeparators:
    def test_text_without_empty_separator_falls_back_to_characters(self, char_tokenizer) -> None:
        splitter = TextSplitter(separators=["|"], chunk_size=2, chunk_overlap=0, tokenizer=char_tokenizer)

        chunks = splitter.split("ab|cdefg")

        assert [c.text for c in chunks] == ["ab", "c", "d", "e", "f", "g"]
        assert [c.start_pos for c in chunks] == [0, 3, 4, 5, 6, 7]

    def test_indivisible_character_is_emitted_over_budget(self, wide_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=2, chunk_overlap=0, tokenizer=wide_tokenizer)

        chunks = splitter.split("ab")

        assert [c.text for c in chunks] == ["a", "b"]
        assert all(len(c.tokens) == 3 for c in chunks)


class TestConstruction:
    @pytest.mark.parametrize(
        ("kwargs", "error"),
        [
            ({"chunk_size": 0}, InvalidConfigurationError),
            ({"chunk_overlap": -1}, InvalidConfigurationError),
            ({"chunk_size": 10, "chunk_overlap": 11}, OverlapConfigurationError),
        ],
    )
    def test_invalid_configuration_fails_fast(self, char_tokenizer, kwargs, error) -> None:
        with pytest.raises(error):
            TextSplitter(tokenizer=char_tokenizer, **kwargs)

    def test_overrides_apply_on_top_of_config(self, char_tokenizer) -> None:
        config = TextSplitterConfig(chunk_size=50, chunk_overlap=5, tokenizer=char_tokenizer)

        splitter = TextSplitter(config, chunk_size=10)

        assert splitter.config.chunk_size == 10
        assert splitter.config.chunk_overlap == 5
        assert splitter.tokenizer is char_tokenizer

    def test_tokenizer_failure_propagates(self, failing_tokenizer) -> None:
        splitter = TextSplitter(chunk_size=10, chunk_overlap=0, tokenizer=failing_tokenizer)

        with pytest.raises(RuntimeError, match="tokenizer unavailable"):
            splitter.split("some text")


class TestMonitoring:
    def test_split_records_metrics(self, char_tokenizer, monitor) -> None:
        splitter = TextSplitter(chunk_size=4, chunk_overlap=0, tokenizer=char_tokenizer, monitor=monitor)

        chunks = splitter.split("aaa bbb ccc")

        (metrics,) = monitor.metrics_history
        assert metrics.output_chunks == len(chunks) == 3
        assert metrics.output_tokens == 9
        assert metrics.over_budget_chunks == 0
        assert metrics.input_chars == 11

    def test_over_budget_chunks_are_counted(self, wide_tokenizer, monitor) -> None:
        splitter = TextSplitter(chunk_size=2, chunk_overlap=0, tokenizer=wide_tokenizer, monitor=monitor)

        splitter.split("ab")

        assert monitor.metrics_history[-1].over_budget_chunks == 2


@pytest.mark.asyncio()
async def test_split_async_matches_sync(char_tokenizer) -> None:
    splitter = TextSplitter(chunk_size=6, chunk_overlap=2, tokenizer=char_tokenizer)

    result = await splitter.split_async(SAMPLE)

    assert result == splitter.split(SAMPLE)


@pytest.mark.asyncio()
async def test_split_async_empty_text(char_tokenizer) -> None:
    splitter = TextSplitter(chunk_size=6, chunk_overlap=2, tokenizer=char_tokenizer)

    assert await splitter.split_async("") == []
