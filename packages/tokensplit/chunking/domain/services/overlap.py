#!/usr/bin/env python3
"""
Overlap stitching over a flat chunk sequence.

Each chunk after the first borrows the trailing tokens of its predecessor
and the leading tokens of its successor. Overlap is metadata only: the
chunk's own text, tokens and offsets are left untouched.
"""

import logging

from tokensplit.chunking.domain.entities.text_chunk import TextChunk

logger = logging.getLogger(__name__)


def attach_overlap(chunks: list[TextChunk], chunk_overlap: int) -> list[TextChunk]:
    """
    Populate ``start_overlap``/``end_overlap`` in place.

    Args:
        chunks: Chunks in document order, as produced by the splitter
        chunk_overlap: Maximum number of tokens borrowed from each neighbour

    Returns:
        The same list, for chaining
    """
    if chunk_overlap <= 0 or len(chunks) < 2:
        return chunks

    for i in range(1, len(chunks)):
        previous_chunk = chunks[i - 1]
        chunk = chunks[i]
        next_chunk = chunks[i + 1] if i < len(chunks) - 1 else None

        n = min(chunk_overlap, len(previous_chunk.tokens))
        chunk.start_overlap = list(previous_chunk.tokens[len(previous_chunk.tokens) - n :])
        chunk.end_overlap = list(next_chunk.tokens[: min(chunk_overlap, len(next_chunk.tokens))]) if next_chunk else []

    logger.debug(f"Attached up to {chunk_overlap} overlap tokens across {len(chunks)} chunks")
    return chunks
