"""
Tokenizer capability consumed by the chunker.

The chunker only needs ``encode``; ``decode`` is used by renderers that turn
overlap tokens back into text. Uses tiktoken for accurate token counting.
"""

import logging
import threading
from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

import tiktoken

from tokensplit.chunking.domain.exceptions import TokenizerLoadError

logger = logging.getLogger(__name__)

# GPT-3 byte-pair encoding
DEFAULT_ENCODING = "r50k_base"


@runtime_checkable
class Tokenizer(Protocol):
    """Deterministic, side-effect free text <-> token id conversion."""

    def encode(self, text: str) -> list[int]: ...

    def decode(self, tokens: Sequence[int]) -> str: ...


class TiktokenTokenizer:
    """Tokenizer backed by a tiktoken encoding.

    The encoding is loaded on first use so that building a configuration
    never touches the BPE cache. Loading is guarded by a lock, after which
    the instance can be shared across threads.
    """

    def __init__(self, encoding_name: str = DEFAULT_ENCODING) -> None:
        self.encoding_name = encoding_name
        self._encoding: Any = None
        self._lock = threading.Lock()

    @property
    def encoding(self) -> Any:
        if self._encoding is None:
            with self._lock:
                if self._encoding is None:
                    self._encoding = self._load()
        return self._encoding

    def _load(self) -> Any:
        try:
            encoding = tiktoken.get_encoding(self.encoding_name)
        except (KeyError, ValueError) as e:
            raise TokenizerLoadError(self.encoding_name, str(e)) from e
        logger.info(f"Initialized tokenizer: {self.encoding_name}")
        return encoding

    def encode(self, text: str) -> list[int]:
        # Special-token text is encoded as ordinary text
        return list(self.encoding.encode(text, disallowed_special=()))

    def decode(self, tokens: Sequence[int]) -> str:
        return str(self.encoding.decode(list(tokens)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(encoding_name='{self.encoding_name}')"
