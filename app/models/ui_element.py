from sqlalchemy import String, Integer, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

WILDCARD_PRODUCT = "*"

class UiElement(Base):
    __tablename__ = "ui_elements"
    __table_args__ = (Index("ix_ui_elements_product_seq", "product", "seq_id"),)

    element_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    seq_id: Mapped[int] = mapped_column(Integer, nullable=False)
    element_type: Mapped[str] = mapped_column(String(50), nullable=False)
    label: Mapped[str | None] = mapped_column(String(200), nullable=True)
    parent_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    parent_label: Mapped[str | None] = mapped_column(String(200), nullable=True)
    initial_value: Mapped[str | None] = mapped_column(String(200), nullable=True)
    options_key: Mapped[str | None] = mapped_column(String(80), nullable=True)
    properties: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    trigger_event: Mapped[str | None] = mapped_column(String(50), nullable=True)
    product: Mapped[str | None] = mapped_column(String(80), nullable=True)
