import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.errors import ApiError, install_error_handlers
from app.core.http_hardening import EXPOSED_HEADERS, install_http_hardening
from app.api.router import router as api_router
from app.db import session as db_session

_LOG = logging.getLogger("app.db")

app = FastAPI(title=settings.APP_NAME, version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials="*" not in settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=EXPOSED_HEADERS,
)
install_http_hardening(app)
install_error_handlers(app)

app.include_router(api_router, prefix="/api")

@app.get("/", include_in_schema=False)
def landing():
    return JSONResponse({"service": settings.APP_NAME, "status": "ok"})

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/health/db")
def health_db():
    try:
        db_session.check_database_connection()
    except SQLAlchemyError as exc:
        _LOG.warning("database health check failed: %s", exc)
        raise ApiError("Database unavailable", status_code=503) from exc
    return {"status": "ok"}
