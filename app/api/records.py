from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from app.core.errors import ApiError
from app.db.session import get_db
from app.schemas.records import RecordCreated, RecordError
from app.services.record_inserter import RecordInsertError, insert_process_record

router = APIRouter()


@router.post(
    "/add-record",
    status_code=201,
    response_model=RecordCreated,
    responses={400: {"model": RecordError}, 500: {"model": RecordError}},
)
def add_record(payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    try:
        created = insert_process_record(db, payload)
    except RecordInsertError as exc:
        raise ApiError(
            exc.message,
            status_code=500 if exc.retryable else 400,
            details=exc.details,
            code=exc.code or "store_error",
        ) from exc
    return RecordCreated(message="Record added", qo_no=created["qo_no"], uid=created["uid"])
