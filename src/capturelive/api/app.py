# src/capturelive/api/app.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from capturelive.api import __version__
from capturelive.api.config import ApiConfig, load_config
from capturelive.api.middlewares.error_handler import install_error_handlers
from capturelive.api.middlewares.request_context import RequestContextMiddleware
from capturelive.api.routes import api_router
from capturelive.core.buffer import LiveTranscriptBuffer
from capturelive.utils.logger import configure_logging, get_logger, parse_level

logger = get_logger("capturelive.api")


def create_app(cfg: Optional[ApiConfig] = None, buffer: Optional[LiveTranscriptBuffer] = None) -> FastAPI:
    cfg = cfg or load_config()

    app = FastAPI(
        title="CaptureLive API",
        version=__version__,
    )

    # One buffer per process; routes reach it through app.state.
    app.state.buffer = buffer or LiveTranscriptBuffer(
        cfg.buffer.to_configuration(),
        archive_path=cfg.buffer.archive_path_or_none(),
    )

    # Request context first (request_id, trace_id)
    app.add_middleware(RequestContextMiddleware, header_name="X-Request-Id")

    # Error handlers (stable error JSON, includes request_id)
    install_error_handlers(app)

    app.include_router(api_router)

    @app.on_event("startup")
    async def _startup() -> None:
        configure_logging(
            logger_name="capturelive",
            console_level=parse_level(cfg.buffer.log_level),
            file_level=logging.DEBUG,
            log_path=(cfg.buffer.log_path or None),
        )
        logger.info(f"API_STARTUP archive={cfg.buffer.archive_path or '-'}")

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        logger.info("API_SHUTDOWN")

    return app


app = create_app()
