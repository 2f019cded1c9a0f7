from __future__ import annotations

import logging
import sys

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.db.session import check_database_connection

_LOG = logging.getLogger("app.run")


def main() -> int:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        check_database_connection()
    except SQLAlchemyError as exc:
        _LOG.error("database is not reachable, refusing to start: %s", exc)
        return 1
    _LOG.info("database reachable; listening on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
