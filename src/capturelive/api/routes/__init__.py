# src/capturelive/api/routes/__init__.py
from __future__ import annotations

from fastapi import APIRouter

# Root router to be included by app.py
api_router = APIRouter()

from capturelive.api.routes.health import router as health_router  # noqa: E402
from capturelive.api.routes.buffer import router as buffer_router  # noqa: E402

api_router.include_router(health_router)
api_router.include_router(buffer_router)
