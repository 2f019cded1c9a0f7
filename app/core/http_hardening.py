from __future__ import annotations

import logging
import re
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request

REQUEST_ID_HEADER = "X-Request-ID"
SERVER_TIMING_HEADER = "Server-Timing"
# Browser form clients read these cross-origin to correlate with server logs.
EXPOSED_HEADERS = [REQUEST_ID_HEADER, SERVER_TIMING_HEADER]

_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,128}$")
_LOG = logging.getLogger("app.http")


def _request_id_from_header(raw: str | None) -> str:
    value = str(raw or "").strip()
    if not value or not _REQUEST_ID_RE.fullmatch(value):
        return uuid4().hex
    return value


def _log_context(request: Request) -> str:
    product = request.query_params.get("product")
    if product is None:
        return ""
    return f" product={product!r}"


def install_http_hardening(app: FastAPI) -> None:
    @app.middleware("http")
    async def _request_context_middleware(request: Request, call_next):
        request_id = _request_id_from_header(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        started_at = perf_counter()

        response = await call_next(request)

        duration_ms = (perf_counter() - started_at) * 1000.0
        response.headers["X-Content-Type-Options"] = "nosniff"
        # The UI document is rebuilt from the tables on every request.
        response.headers["Cache-Control"] = "no-store"
        response.headers[SERVER_TIMING_HEADER] = f"app;dur={duration_ms:.1f}"
        response.headers[REQUEST_ID_HEADER] = request_id

        _LOG.info(
            "%s %s status=%s duration_ms=%.2f request_id=%s%s",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
            _log_context(request),
        )
        return response
