from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from app.data.ui_demo_seed import OPTIONS, UI_CHANGES, UI_ELEMENTS
from app.db.session import Base, SessionLocal
from app.models.option_data import OptionData
from app.models.ui_change import UiChange
from app.models.ui_element import UiElement


def _upsert(db: Session, model: type[Base], rows: list[dict[str, Any]]) -> tuple[int, int]:
    created = 0
    updated = 0
    pk_name = model.__mapper__.primary_key[0].key
    columns = [attr.key for attr in model.__mapper__.column_attrs]

    for item in rows:
        values = {name: item.get(name) for name in columns}
        row = db.get(model, values[pk_name])
        if row is None:
            db.add(model(**values))
            created += 1
            continue

        changed = False
        for name, value in values.items():
            if getattr(row, name) != value:
                setattr(row, name, value)
                changed = True
        if changed:
            db.add(row)
            updated += 1

    return created, updated


def upsert_ui_definitions(
    db: Session,
    *,
    elements: list[dict[str, Any]],
    options: list[dict[str, Any]],
    changes: list[dict[str, Any]],
) -> dict[str, tuple[int, int]]:
    result = {
        "ui_elements": _upsert(db, UiElement, elements),
        "options_data": _upsert(db, OptionData, options),
        "ui_changed": _upsert(db, UiChange, changes),
    }
    db.commit()
    return result


def main() -> None:
    db = SessionLocal()
    try:
        result = upsert_ui_definitions(db, elements=UI_ELEMENTS, options=OPTIONS, changes=UI_CHANGES)
    finally:
        db.close()
    for table, (created, updated) in result.items():
        print(f"{table}: created={created} updated={updated}")


if __name__ == "__main__":
    main()
