#!/usr/bin/env python3
"""
Pure domain layer for chunking operations.

This module provides the core business logic for text chunking,
independent of any tokenizer or configuration source.
"""

from tokensplit.chunking.domain.exceptions import (
    ChunkingDomainError,
    InvalidConfigurationError,
    OverlapConfigurationError,
    TokenizerLoadError,
)
from tokensplit.chunking.domain.entities.text_chunk import TextChunk
from tokensplit.chunking.domain.services.overlap import attach_overlap
from tokensplit.chunking.domain.services.separators import get_separators

__all__ = [
    # Entities
    "TextChunk",
    # Services
    "attach_overlap",
    "get_separators",
    # Exceptions
    "ChunkingDomainError",
    "InvalidConfigurationError",
    "OverlapConfigurationError",
    "TokenizerLoadError",
]
