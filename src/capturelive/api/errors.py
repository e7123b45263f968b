from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class CaptureLiveApiError(Exception):
    """
    Typed API error carrying a stable machine-readable code.
    """

    code: str
    message: str
    status_code: int = 400
    details: Optional[Dict[str, Any]] = None


class BufferUnavailableError(CaptureLiveApiError):
    def __init__(self, message: str = "buffer not initialized", *, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code="buffer_unavailable", message=message, status_code=503, details=details)
