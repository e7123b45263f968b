from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from capturelive.api.errors import CaptureLiveApiError
from capturelive.api.middlewares.request_context import get_request_id
from capturelive.utils.logger import get_logger

logger = get_logger("capturelive.api")


def _err_payload(
    *,
    code: str,
    message: str,
    request_id: Optional[str],
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "request_id": request_id or "",
        }
    }


def install_error_handlers(app: FastAPI) -> None:
    """
    Centralized error handling: every failure leaves as the same error JSON,
    with the request_id for correlation.
    """

    @app.exception_handler(CaptureLiveApiError)
    async def _handle_api_error(request: Request, exc: CaptureLiveApiError) -> JSONResponse:
        rid = get_request_id(request)
        logger.info(f"API_ERROR rid={rid} code={exc.code} status={exc.status_code} msg={exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=_err_payload(code=exc.code, message=exc.message, request_id=rid, details=exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def _handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        rid = get_request_id(request)
        logger.info(f"API_VALIDATION_ERROR rid={rid} path={request.url.path}")
        return JSONResponse(
            status_code=422,
            content=_err_payload(
                code="validation_error",
                message="request validation failed",
                request_id=rid,
                details={"errors": exc.errors()},
            ),
        )

    @app.exception_handler(Exception)
    async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        rid = get_request_id(request)
        logger.exception(f"API_UNHANDLED_ERROR rid={rid}")
        return JSONResponse(
            status_code=500,
            content=_err_payload(code="internal_error", message=str(exc), request_id=rid),
        )
