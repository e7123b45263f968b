# src/capturelive/api/main.py
from __future__ import annotations

from capturelive.api.app import app  # noqa: F401
from capturelive.api.config import load_config


def run() -> None:
    """
    Optional programmatic runner:
    python -m capturelive.api.main
    """
    import uvicorn  # local import to keep import graph light

    cfg = load_config()
    # One worker: the buffer is process-local state.
    uvicorn.run("capturelive.api.main:app", host=cfg.host, port=cfg.port, reload=False, workers=1)


if __name__ == "__main__":
    run()
