#!/usr/bin/env python3
"""
Immutable splitter configuration value object.

This module defines the configuration for recursive text splitting with
built-in validation and business rule enforcement.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from tokensplit.chunking.domain.exceptions import (
    InvalidConfigurationError,
    OverlapConfigurationError,
)
from tokensplit.chunking.domain.services.separators import get_separators
from tokensplit.text_processing.tokenizers import DEFAULT_ENCODING, TiktokenTokenizer, Tokenizer

if TYPE_CHECKING:
    from tokensplit.config.base import ChunkingSettings

DEFAULT_CHUNK_SIZE = 400
DEFAULT_CHUNK_OVERLAP = 40


@dataclass(frozen=True)
class TextSplitterConfig:
    """
    Immutable configuration for the recursive text splitter.

    When ``separators`` is empty the list is taken from the preset for
    ``doc_type`` (or the default cascade). When ``tokenizer`` is omitted a
    lazily loaded GPT-3 tiktoken encoding is used.
    """

    separators: Sequence[str] = ()
    keep_separators: bool = False
    chunk_size: int = DEFAULT_CHUNK_SIZE
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP
    tokenizer: Tokenizer | None = field(default=None, compare=False)
    doc_type: str | None = None

    def __post_init__(self) -> None:
        """Resolve defaults and validate configuration."""
        if isinstance(self.separators, str):
            raise InvalidConfigurationError(
                "separators must be a sequence of strings, not a single string",
                {"separators": self.separators},
            )

        separators = tuple(self.separators) if self.separators else tuple(get_separators(self.doc_type))
        object.__setattr__(self, "separators", separators)

        if self.tokenizer is None:
            object.__setattr__(self, "tokenizer", TiktokenTokenizer(DEFAULT_ENCODING))

        self._validate()

    def _validate(self) -> None:
        if not all(isinstance(separator, str) for separator in self.separators):
            raise InvalidConfigurationError(
                "separators must all be strings",
                {"separators": list(self.separators)},
            )

        if self.chunk_size < 1:
            raise InvalidConfigurationError(
                "chunk_size must be >= 1",
                {"chunk_size": self.chunk_size},
            )

        if self.chunk_overlap < 0:
            raise InvalidConfigurationError(
                "chunk_overlap must be >= 0",
                {"chunk_overlap": self.chunk_overlap},
            )

        if self.chunk_overlap > self.chunk_size:
            raise OverlapConfigurationError(self.chunk_overlap, self.chunk_size)

    @classmethod
    def from_settings(cls, settings: "ChunkingSettings", **overrides: Any) -> "TextSplitterConfig":
        """
        Build a configuration from environment-backed settings.

        Args:
            settings: Loaded ChunkingSettings
            **overrides: Field values that take precedence over the settings

        Returns:
            Validated configuration
        """
        values: dict[str, Any] = {
            "separators": tuple(settings.SEPARATORS or ()),
            "keep_separators": settings.KEEP_SEPARATORS,
            "chunk_size": settings.CHUNK_SIZE,
            "chunk_overlap": settings.CHUNK_OVERLAP,
            "doc_type": settings.DOC_TYPE,
        }
        if "tokenizer" not in overrides:
            values["tokenizer"] = TiktokenTokenizer(settings.TOKENIZER_ENCODING)
        values.update(overrides)
        return cls(**values)

    def with_overrides(self, **changes: Any) -> "TextSplitterConfig":
        """Return a copy with the given fields replaced (re-validated).

        Changing ``doc_type`` without passing ``separators`` re-resolves the
        separators from the new preset.
        """
        if "doc_type" in changes and "separators" not in changes:
            changes["separators"] = ()
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary (the tokenizer is omitted)."""
        return {
            "separators": list(self.separators),
            "keep_separators": self.keep_separators,
            "chunk_size": self.chunk_size,
            "chunk_overlap": self.chunk_overlap,
            "doc_type": self.doc_type,
        }
