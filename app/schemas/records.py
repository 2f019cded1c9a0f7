from pydantic import BaseModel
from typing import Any, Optional


class RecordCreated(BaseModel):
    message: str
    qo_no: Optional[Any] = None
    uid: Optional[Any] = None


class RecordError(BaseModel):
    error: str
    details: Any = None
    code: Optional[str] = None
