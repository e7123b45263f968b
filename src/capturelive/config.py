from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from capturelive.core.contracts import BufferConfiguration


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass(frozen=True)
class BufferSettings:
    """
    Runtime settings (env-driven). Read once at construction; there is no
    runtime reconfiguration of a live buffer.

    Empty CAPTURELIVE_ARCHIVE_PATH disables spillover entirely.
    """

    # Trigger policy
    min_interval_sec: float = field(default_factory=lambda: _env_float("CAPTURELIVE_MIN_INTERVAL_SEC", 30.0))
    max_interval_sec: float = field(default_factory=lambda: _env_float("CAPTURELIVE_MAX_INTERVAL_SEC", 60.0))
    context_sentences: int = field(default_factory=lambda: _env_int("CAPTURELIVE_CONTEXT_SENTENCES", 3))

    # Memory ceiling / archive
    max_in_memory_segments: int = field(
        default_factory=lambda: _env_int("CAPTURELIVE_MAX_IN_MEMORY_SEGMENTS", 100)
    )
    archive_path: str = field(default_factory=lambda: os.getenv("CAPTURELIVE_ARCHIVE_PATH", "").strip())

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("CAPTURELIVE_LOG_LEVEL", "INFO"))
    log_path: str = field(default_factory=lambda: os.getenv("CAPTURELIVE_LOG_PATH", ""))

    def to_configuration(self) -> BufferConfiguration:
        return BufferConfiguration(
            min_generation_interval_seconds=self.min_interval_sec,
            max_generation_interval_seconds=self.max_interval_sec,
            context_window_sentences=self.context_sentences,
            max_in_memory_segments=self.max_in_memory_segments,
        )

    def archive_path_or_none(self) -> Optional[Path]:
        return Path(self.archive_path) if self.archive_path else None


def load_settings() -> BufferSettings:
    return BufferSettings()
