"""Performance monitoring for split operations.

Records duration, chunk counts and budget overruns for each ``split`` call
and logs a one-line summary per document.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

# Splits below this throughput are logged as warnings
SLOW_CHUNKS_PER_SECOND = 50


@dataclass
class SplitMetrics:
    """Container for the metrics of one split call."""

    doc_type: str
    input_chars: int
    output_chunks: int = 0
    output_tokens: int = 0
    over_budget_chunks: int = 0
    duration_seconds: float = 0.0
    chunks_per_second: float = 0.0
    chars_per_chunk: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)
    error: str | None = None


class ChunkingPerformanceMonitor:
    """Keep a bounded history of split metrics and log each measurement."""

    def __init__(self, history_size: int = 1000) -> None:
        self.metrics_history: deque[SplitMetrics] = deque(maxlen=history_size)

    @contextmanager
    def measure_split(
        self,
        doc_type: str | None,
        text_length: int,
        metadata: dict[str, Any] | None = None,
    ) -> Iterator[SplitMetrics]:
        """Context manager to measure a split call.

        Args:
            doc_type: Document type tag used for separator selection
            text_length: Length of input text in characters
            metadata: Additional metadata to track

        Yields:
            metrics: SplitMetrics object to be filled in by the caller

        Example:
            with monitor.measure_split("markdown", len(text)) as metrics:
                chunks = splitter.split(text)
                metrics.output_chunks = len(chunks)
        """
        start_time = time.perf_counter()
        metrics = SplitMetrics(
            doc_type=doc_type or "default",
            input_chars=text_length,
            metadata=metadata or {},
        )

        try:
            yield metrics
        except Exception as e:
            metrics.error = str(e)
            raise
        finally:
            metrics.duration_seconds = time.perf_counter() - start_time

            if metrics.output_chunks > 0:
                metrics.chunks_per_second = metrics.output_chunks / max(metrics.duration_seconds, 0.001)
                metrics.chars_per_chunk = metrics.input_chars / metrics.output_chunks

            self._log_metrics(metrics)
            self.metrics_history.append(metrics)

    def _log_metrics(self, metrics: SplitMetrics) -> None:
        if metrics.error:
            logger.error(f"Split failed - Doc type: {metrics.doc_type}, Error: {metrics.error}")
            return

        log_level = logging.DEBUG
        if metrics.output_chunks and metrics.chunks_per_second < SLOW_CHUNKS_PER_SECOND:
            log_level = logging.WARNING

        logger.log(
            log_level,
            f"Split performance - Doc type: {metrics.doc_type}, "
            f"Chunks: {metrics.output_chunks}, "
            f"Tokens: {metrics.output_tokens}, "
            f"Over budget: {metrics.over_budget_chunks}, "
            f"Duration: {metrics.duration_seconds:.3f}s",
        )

    def get_summary(self, doc_type: str | None = None) -> dict[str, Any]:
        """Summarize successful measurements, optionally for one doc type.

        Args:
            doc_type: Restrict the summary to this doc type tag

        Returns:
            Summary statistics, or ``{"no_data": True}`` when nothing matched
        """
        selected = [
            m for m in self.metrics_history if not m.error and (doc_type is None or m.doc_type == doc_type)
        ]
        if not selected:
            return {"doc_type": doc_type, "no_data": True}

        total_chunks = sum(m.output_chunks for m in selected)
        total_time = sum(m.duration_seconds for m in selected)

        return {
            "doc_type": doc_type,
            "total_documents": len(selected),
            "total_chunks": total_chunks,
            "total_tokens": sum(m.output_tokens for m in selected),
            "over_budget_chunks": sum(m.over_budget_chunks for m in selected),
            "total_time": total_time,
            "avg_chunks_per_second": total_chunks / max(total_time, 0.001),
        }

    def reset(self) -> None:
        self.metrics_history.clear()
