from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

class UiChange(Base):
    __tablename__ = "ui_changed"

    change_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    element_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    parent_value: Mapped[str | None] = mapped_column(String(200), nullable=True)
    action_id: Mapped[int] = mapped_column(Integer, nullable=False)
    action_type: Mapped[str] = mapped_column(String(50), nullable=False)
