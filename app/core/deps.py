from app.db.session import SessionLocal
from app.services.row_source import RowSource, SqlRowSource


def get_row_source() -> RowSource:
    return SqlRowSource(SessionLocal)
