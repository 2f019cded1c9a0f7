from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.deps import get_row_source
from app.core.errors import ApiError
from app.schemas.ui_data import ErrorOut
from app.services.row_source import RowSource
from app.services.ui_document import UiDataFetchError, assemble_ui_document, render_ui_document

router = APIRouter()
_LOG = logging.getLogger("app.ui_data")


@router.get("/ui-data", responses={500: {"model": ErrorOut}})
async def get_ui_data(
    request: Request,
    product: str = Query(default=settings.DEFAULT_PRODUCT),
    source: RowSource = Depends(get_row_source),
):
    request_id = getattr(request.state, "request_id", "-")
    try:
        document = await assemble_ui_document(source, product)
    except UiDataFetchError as exc:
        _LOG.error(
            "ui data unavailable product=%s request_id=%s failures=%s",
            product,
            request_id,
            {table: repr(error) for table, error in exc.failures.items()},
            exc_info=True,
        )
        raise ApiError("Failed to load UI data", status_code=500) from exc
    except Exception as exc:
        # Projection runs on whatever the row source handed back.
        _LOG.error("ui data projection failed product=%s request_id=%s", product, request_id, exc_info=True)
        raise ApiError("Failed to build UI data", status_code=500) from exc
    return JSONResponse(render_ui_document(document))
