"""
tokensplit: recursive, token-budget-aware text chunking.
"""

from tokensplit.chunking.domain.entities.text_chunk import TextChunk
from tokensplit.chunking.domain.exceptions import (
    ChunkingDomainError,
    InvalidConfigurationError,
    OverlapConfigurationError,
    TokenizerLoadError,
)
from tokensplit.chunking.domain.services.overlap import attach_overlap
from tokensplit.chunking.domain.services.separators import get_separators, supported_doc_types
from tokensplit.chunking.domain.value_objects.splitter_config import TextSplitterConfig
from tokensplit.chunking.text_splitter import TextSplitter
from tokensplit.text_processing.tokenizers import TiktokenTokenizer, Tokenizer

__all__ = [
    "TextSplitter",
    "TextSplitterConfig",
    "TextChunk",
    "attach_overlap",
    "get_separators",
    "supported_doc_types",
    "Tokenizer",
    "TiktokenTokenizer",
    "ChunkingDomainError",
    "InvalidConfigurationError",
    "OverlapConfigurationError",
    "TokenizerLoadError",
]
