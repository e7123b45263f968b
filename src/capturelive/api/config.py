from __future__ import annotations

import os
from dataclasses import dataclass, field

from capturelive.config import BufferSettings, load_settings


@dataclass(frozen=True)
class ApiConfig:
    """
    API runtime config (env-driven).
    Buffer policy knobs live in BufferSettings; this adds the HTTP surface.
    """

    host: str = field(default_factory=lambda: os.getenv("CAPTURELIVE_API_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("CAPTURELIVE_API_PORT", "8000")))
    buffer: BufferSettings = field(default_factory=load_settings)


def load_config() -> ApiConfig:
    return ApiConfig()
