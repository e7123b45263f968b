from __future__ import annotations

from fastapi import APIRouter, Depends

from capturelive.api import __version__
from capturelive.api.routes.buffer import get_buffer
from capturelive.core.buffer import LiveTranscriptBuffer

router = APIRouter(tags=["health"])


@router.get("/health")
def health(buffer: LiveTranscriptBuffer = Depends(get_buffer)) -> dict:
    """
    Human/debug-friendly health: includes the buffer policy, which is safe to expose.
    """
    cfg = buffer.configuration
    return {
        "ok": True,
        "service": "capturelive-api",
        "version": __version__,
        "archive_enabled": buffer.archive is not None,
        "min_generation_interval_seconds": cfg.min_generation_interval_seconds,
        "max_generation_interval_seconds": cfg.max_generation_interval_seconds,
        "context_window_sentences": cfg.context_window_sentences,
        "max_in_memory_segments": cfg.max_in_memory_segments,
    }


@router.get("/healthz")
def healthz() -> dict:
    """
    Liveness: must be fast and never touch the buffer lock.
    """
    return {"ok": True}


@router.get("/readyz")
def readyz() -> dict:
    return {"ok": True}
