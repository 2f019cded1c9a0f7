from fastapi import APIRouter
from app.api import records, ui_data

router = APIRouter()
router.include_router(ui_data.router, tags=["UiData"])
router.include_router(records.router, tags=["Records"])
