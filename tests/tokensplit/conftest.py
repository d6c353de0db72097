"""Shared fixtures for tokensplit tests."""

from collections.abc import Sequence

import pytest

from tokensplit.text_processing.chunking_metrics import ChunkingPerformanceMonitor


class CharTokenizer:
    """One token per character; token id is the code point."""

    def encode(self, text: str) -> list[int]:
        return [ord(c) for c in text]

    def decode(self, tokens: Sequence[int]) -> str:
        return "".join(chr(t) for t in tokens)


class WideCharTokenizer(CharTokenizer):
    """Three tokens per character, for inputs that can never fit a tiny budget."""

    def encode(self, text: str) -> list[int]:
        return [t for c in text for t in (ord(c), ord(c), ord(c))]


class FailingTokenizer(CharTokenizer):
    def encode(self, text: str) -> list[int]:
        raise RuntimeError("tokenizer unavailable")


@pytest.fixture()
def char_tokenizer() -> CharTokenizer:
    return CharTokenizer()


@pytest.fixture()
def wide_tokenizer() -> WideCharTokenizer:
    return WideCharTokenizer()


@pytest.fixture()
def failing_tokenizer() -> FailingTokenizer:
    return FailingTokenizer()


@pytest.fixture()
def monitor() -> ChunkingPerformanceMonitor:
    return ChunkingPerformanceMonitor()
