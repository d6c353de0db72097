#!/usr/bin/env python3
"""
Chunk entity representing a single position-tagged text chunk.

A chunk is created by the splitter with empty overlap lists. The overlap
stitcher fills those lists once, in place; nothing else changes afterwards.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tokensplit.text_processing.tokenizers import Tokenizer


@dataclass
class TextChunk:
    """
    A contiguous segment of the original text.

    ``start_pos`` and ``end_pos`` are inclusive character offsets, so
    ``original[start_pos : end_pos + 1] == text``. An empty chunk has
    ``end_pos == start_pos - 1``.
    """

    text: str
    tokens: list[int]
    start_pos: int
    end_pos: int
    start_overlap: list[int] = field(default_factory=list)
    end_overlap: list[int] = field(default_factory=list)

    @property
    def token_count(self) -> int:
        """Number of tokens encoding ``text`` (overlap excluded)."""
        return len(self.tokens)

    @property
    def is_empty(self) -> bool:
        return not self.text

    @property
    def has_overlap(self) -> bool:
        return bool(self.start_overlap or self.end_overlap)

    def render(self, tokenizer: "Tokenizer") -> str:
        """
        Build display/embedding text with decoded overlap around the chunk.

        Args:
            tokenizer: Tokenizer able to decode the overlap token ids

        Returns:
            Decoded start overlap + chunk text + decoded end overlap
        """
        prefix = tokenizer.decode(self.start_overlap) if self.start_overlap else ""
        suffix = tokenizer.decode(self.end_overlap) if self.end_overlap else ""
        return f"{prefix}{self.text}{suffix}"

    def to_dict(self) -> dict[str, Any]:
        """Convert the chunk to a plain dictionary for indexing."""
        return {
            "text": self.text,
            "tokens": list(self.tokens),
            "start_pos": self.start_pos,
            "end_pos": self.end_pos,
            "start_overlap": list(self.start_overlap),
            "end_overlap": list(self.end_overlap),
        }

    def __repr__(self) -> str:
        preview = self.text[:50] + "..." if len(self.text) > 50 else self.text
        return (
            f"TextChunk(start_pos={self.start_pos}, end_pos={self.end_pos}, "
            f"tokens={len(self.tokens)}, text={preview!r})"
        )
