from __future__ import annotations

from typing import Callable, Protocol, Sequence

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.models.option_data import OptionData
from app.models.ui_change import UiChange
from app.models.ui_element import UiElement, WILDCARD_PRODUCT


class RowSource(Protocol):
    def fetch_elements(self, product: str) -> Sequence[UiElement]:
        ...

    def fetch_options(self) -> Sequence[OptionData]:
        ...

    def fetch_change_rules(self) -> Sequence[UiChange]:
        ...


class SqlRowSource:
    """Reads the three UI definition tables, one short-lived session per fetch.

    Fetches may run on different threads at the same time, so nothing here is
    shared between calls except the session factory (and its pool).
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def fetch_elements(self, product: str) -> Sequence[UiElement]:
        stmt = (
            select(UiElement)
            .where(or_(UiElement.product == product, UiElement.product == WILDCARD_PRODUCT))
            .order_by(UiElement.seq_id.asc(), UiElement.element_id.asc())
        )
        with self._session_factory() as db:
            return list(db.scalars(stmt).all())

    def fetch_options(self) -> Sequence[OptionData]:
        stmt = select(OptionData).order_by(OptionData.option_id.asc())
        with self._session_factory() as db:
            return list(db.scalars(stmt).all())

    def fetch_change_rules(self) -> Sequence[UiChange]:
        stmt = select(UiChange).order_by(UiChange.change_id.asc())
        with self._session_factory() as db:
            return list(db.scalars(stmt).all())
