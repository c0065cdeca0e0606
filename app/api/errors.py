from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exception_handlers import http_exception_handler

from app.api.responses import error_payload

API_PREFIX = "/api/"

logger = logging.getLogger(__name__)


class ApiException(Exception):
    """Raised by API routes for expected failures rendered in the error envelope."""

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


async def _handle_api_exception(request: Request, exc: ApiException) -> JSONResponse:
    logger.info(
        "api.request.rejected",
        extra={
            "event": "api.request.rejected",
            "path": request.url.path,
            "status_code": exc.status_code,
            "code": exc.code,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(
            request,
            code=exc.code,
            message=exc.message,
            details=exc.details,
        ),
    )


async def _handle_http_exception(request: Request, exc: StarletteHTTPException):
    if not request.url.path.startswith(API_PREFIX):
        return await http_exception_handler(request, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_payload(
            request,
            code=f"http_{exc.status_code}",
            message=str(exc.detail),
        ),
        headers=getattr(exc, "headers", None),
    )


def register_api_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiException, _handle_api_exception)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
