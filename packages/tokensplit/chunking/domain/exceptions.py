#!/usr/bin/env python3
"""
Domain-specific exceptions for chunking operations.

These exceptions represent business rule violations and domain errors,
not technical infrastructure failures.
"""

from typing import Any


class ChunkingDomainError(Exception):
    """Base exception for all chunking domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidConfigurationError(ChunkingDomainError, ValueError):
    """Raised when chunking configuration violates business rules."""


class OverlapConfigurationError(InvalidConfigurationError):
    """Raised when overlap configuration is invalid."""

    def __init__(self, overlap: int, chunk_size: int) -> None:
        """Initialize with overlap information."""
        super().__init__(
            f"chunk_overlap {overlap} must be <= chunk_size {chunk_size}",
            {"chunk_overlap": overlap, "chunk_size": chunk_size},
        )
        self.overlap = overlap
        self.chunk_size = chunk_size


class TokenizerLoadError(ChunkingDomainError):
    """Raised when a tokenizer encoding cannot be loaded."""

    def __init__(self, encoding_name: str, reason: str) -> None:
        """Initialize with the encoding that failed to load."""
        super().__init__(
            f"Failed to load tokenizer encoding '{encoding_name}': {reason}",
            {"encoding_name": encoding_name},
        )
        self.encoding_name = encoding_name
