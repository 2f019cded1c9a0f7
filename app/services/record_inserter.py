from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Mapping

from sqlalchemy import Date, DateTime, insert
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError, StatementError
from sqlalchemy.orm import Session

from app.core.errors import INVALID_PAYLOAD_CODE
from app.models.process_record import (
    PROCESS_RECORD_COLUMNS,
    PROCESS_RECORD_COLUMN_NAMES,
    ColumnSpec,
    process_records,
)

_LOG = logging.getLogger("app.records")


class RecordInsertError(Exception):
    def __init__(self, message: str, *, code: str | None, details: str, retryable: bool = False):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        # Store unreachable rather than the record being rejected.
        self.retryable = retryable


def _coerce_value(spec: ColumnSpec, value: Any) -> Any:
    # JSON has no date type; ISO strings are parsed for date/datetime columns.
    # Anything unparseable goes to the store as-is so it reports the error.
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        if isinstance(spec.type_, DateTime):
            return datetime.fromisoformat(text.replace("Z", "+00:00"))
        if isinstance(spec.type_, Date):
            if "T" in text or " " in text:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            return date.fromisoformat(text)
    except ValueError:
        return value
    return value


def build_record_values(record: Mapping[str, Any]) -> list[Any]:
    """Positional values in PROCESS_RECORD_COLUMNS order, None for missing columns."""
    return [_coerce_value(spec, record[spec.name]) if spec.name in record else None for spec in PROCESS_RECORD_COLUMNS]


def store_error_code(exc: SQLAlchemyError) -> str | None:
    orig = getattr(exc, "orig", None)
    for attr in ("sqlstate", "pgcode", "sqlite_errorname"):
        value = getattr(orig, attr, None)
        if value:
            return str(value)
    return getattr(exc, "code", None)


def store_error_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig).strip()
    return str(exc).strip()


def insert_process_record(db: Session, record: Mapping[str, Any]) -> dict[str, Any]:
    values = build_record_values(record)
    stmt = insert(process_records).values(dict(zip(PROCESS_RECORD_COLUMN_NAMES, values)))
    try:
        db.execute(stmt)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        # Bind-time rejections never reached the store.
        rejected_locally = isinstance(exc, StatementError) and not isinstance(exc, DBAPIError)
        code = INVALID_PAYLOAD_CODE if rejected_locally else store_error_code(exc)
        details = store_error_message(exc)
        retryable = isinstance(exc, OperationalError)
        _LOG.warning(
            "process record insert failed uid=%s qo_no=%s code=%s dbapi=%s",
            record.get("uid"),
            record.get("qo_no"),
            code,
            isinstance(exc, DBAPIError),
        )
        if rejected_locally:
            message = "Invalid value in record"
        elif retryable:
            message = "Store unavailable"
        else:
            message = "Record rejected by store"
        raise RecordInsertError(message, code=code, details=details, retryable=retryable) from exc
    return {"uid": record.get("uid"), "qo_no": record.get("qo_no")}
