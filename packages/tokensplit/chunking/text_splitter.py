#!/usr/bin/env python3
"""
Recursive, token-budget-aware text splitter.

Text is split on the coarsest separator first. Only parts that still exceed
the token budget are split again with the next, finer separator, so the
coarsest separator that satisfies the budget wins. Character offsets are
tracked exactly through every level of the cascade.
"""

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from tokensplit.chunking.domain.entities.text_chunk import TextChunk
from tokensplit.chunking.domain.services.overlap import attach_overlap
from tokensplit.chunking.domain.value_objects.splitter_config import TextSplitterConfig
from tokensplit.text_processing.chunking_metrics import ChunkingPerformanceMonitor
from tokensplit.text_processing.tokenizers import Tokenizer

logger = logging.getLogger(__name__)

# Shared monitor used when the caller does not supply one
performance_monitor = ChunkingPerformanceMonitor()


class TextSplitter:
    """
    Split text into position-tagged chunks that fit a token budget.

    Construction validates the configuration and fails fast with
    InvalidConfigurationError; once built, ``split`` accepts any string.
    """

    def __init__(
        self,
        config: TextSplitterConfig | None = None,
        monitor: ChunkingPerformanceMonitor | None = None,
        **overrides: Any,
    ) -> None:
        """
        Initialize the splitter.

        Args:
            config: Splitter configuration; built from ``overrides`` when omitted
            monitor: Performance monitor receiving one measurement per split
            **overrides: TextSplitterConfig fields applied on top of ``config``
        """
        if config is None:
            config = TextSplitterConfig(**overrides)
        elif overrides:
            config = config.with_overrides(**overrides)

        self._config = config
        self._tokenizer: Tokenizer = config.tokenizer  # type: ignore[assignment]
        self._monitor = monitor or performance_monitor

    @property
    def config(self) -> TextSplitterConfig:
        return self._config

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    def split(self, text: str) -> list[TextChunk]:
        """
        Split text into chunks and attach overlap tokens.

        Args:
            text: Document text

        Returns:
            Chunks in document order. Empty input gives an empty list.
        """
        with self._monitor.measure_split(self._config.doc_type, len(text)) as metrics:
            chunks = self._recursive_split(text, self._config.separators, 0)

            if self._config.chunk_overlap > 0:
                attach_overlap(chunks, self._config.chunk_overlap)

            metrics.output_chunks = len(chunks)
            metrics.output_tokens = sum(len(chunk.tokens) for chunk in chunks)
            metrics.over_budget_chunks = sum(1 for chunk in chunks if len(chunk.tokens) > self._config.chunk_size)

        return chunks

    async def split_async(self, text: str) -> list[TextChunk]:
        """
        Asynchronous splitting.

        Runs ``split`` in the default executor so tokenization does not block
        the event loop.
        """
        if not text:
            return []

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.split, text)

    def _recursive_split(self, text: str, separators: Sequence[str], start_pos: int) -> list[TextChunk]:
        """
        Split ``text`` on the first separator, recursing into over-budget parts.

        Args:
            text: Text to split
            separators: Remaining separators, coarsest first
            start_pos: Offset of ``text`` within the original document

        Returns:
            Chunks covering ``text`` in order
        """
        chunks: list[TextChunk] = []
        if not text or not separators:
            return chunks

        separator = separators[0]
        next_separators = separators[1:]
        parts = self._split_on(text, separator)
        last_index = len(parts) - 1

        for i, part in enumerate(parts):
            is_last = i == last_index

            chunk_text = part
            if self._config.keep_separators and not is_last:
                chunk_text += separator

            tokens = self._tokenizer.encode(chunk_text)
            if len(tokens) > self._config.chunk_size:
                chunks.extend(self._split_over_budget(chunk_text, tokens, next_separators, start_pos))
            else:
                chunks.append(
                    TextChunk(
                        text=chunk_text,
                        tokens=tokens,
                        start_pos=start_pos,
                        end_pos=start_pos + len(chunk_text) - 1,
                    )
                )

            start_pos += len(part) if is_last else len(part) + len(separator)

        return chunks

    def _split_over_budget(
        self,
        text: str,
        tokens: list[int],
        next_separators: Sequence[str],
        start_pos: int,
    ) -> list[TextChunk]:
        if next_separators:
            logger.debug(
                f"Part at {start_pos} has {len(tokens)} tokens (> {self._config.chunk_size}), "
                f"retrying with separator {next_separators[0]!r}"
            )
            return self._recursive_split(text, next_separators, start_pos)

        # Separators are exhausted. Fall back to single characters rather
        # than dropping the text; a single character is emitted as is.
        if len(text) > 1:
            logger.warning(
                f"Separators exhausted for {len(text)} characters at {start_pos}, splitting into characters"
            )
            return self._recursive_split(text, ("",), start_pos)

        logger.warning(
            f"Character at {start_pos} encodes to {len(tokens)} tokens, exceeding chunk_size "
            f"{self._config.chunk_size}; emitting it as its own chunk"
        )
        return [TextChunk(text=text, tokens=tokens, start_pos=start_pos, end_pos=start_pos + len(text) - 1)]

    @staticmethod
    def _split_on(text: str, separator: str) -> list[str]:
        # str.split rejects an empty separator
        if separator == "":
            return list(text)
        return text.split(separator)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(chunk_size={self._config.chunk_size}, "
            f"chunk_overlap={self._config.chunk_overlap}, doc_type={self._config.doc_type!r})"
        )
