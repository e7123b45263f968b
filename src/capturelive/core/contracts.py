from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BufferConfiguration:
    # Trigger policy (seconds)
    min_generation_interval_seconds: float = 30.0
    max_generation_interval_seconds: float = 60.0

    # Context window (trailing complete sentences carried across firings)
    context_window_sentences: int = 3

    # Spillover ceiling; only enforced when an archive path is configured
    max_in_memory_segments: int = 100

    def __post_init__(self) -> None:
        if self.min_generation_interval_seconds < 0 or self.max_generation_interval_seconds < 0:
            raise ValueError("generation intervals must be non-negative")
        if self.context_window_sentences < 0:
            raise ValueError("context_window_sentences must be >= 0")
        # each spillover must move at least one segment (ceiling // 2 >= 1)
        if self.max_in_memory_segments < 2:
            raise ValueError("max_in_memory_segments must be >= 2")

    @property
    def spill_count(self) -> int:
        """Number of oldest segments moved to the archive per spillover."""
        return self.max_in_memory_segments // 2


__all__ = ["BufferConfiguration"]
