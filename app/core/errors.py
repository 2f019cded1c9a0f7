from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

_LOG = logging.getLogger("app.http")

INVALID_PAYLOAD_CODE = "invalid_payload"


class ApiError(Exception):
    """Error rendered as ``{"error": ...}`` plus optional ``details``/``code``."""

    def __init__(self, error: str, *, status_code: int = 500, details: Any = None, code: str | None = None):
        super().__init__(error)
        self.error = error
        self.status_code = status_code
        self.details = details
        self.code = code

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        if self.code is not None:
            payload["code"] = self.code
        return payload


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def _api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_payload()))

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(request: Request, exc: RequestValidationError):
        _LOG.info(
            "rejected malformed request %s %s request_id=%s",
            request.method,
            request.url.path,
            getattr(request.state, "request_id", "-"),
        )
        payload = {
            "error": "Invalid request payload",
            "details": jsonable_encoder(exc.errors()),
            "code": INVALID_PAYLOAD_CODE,
        }
        return JSONResponse(status_code=400, content=payload)

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception):
        _LOG.error(
            "unhandled error %s %s request_id=%s",
            request.method,
            request.url.path,
            getattr(request.state, "request_id", "-"),
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
