from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

class OptionData(Base):
    __tablename__ = "options_data"

    option_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    option_key: Mapped[str] = mapped_column(String(80), nullable=False, index=True)
    value: Mapped[str] = mapped_column(String(200), nullable=False)
    label: Mapped[str] = mapped_column(String(200), nullable=False)
    parent_value: Mapped[str | None] = mapped_column(String(200), nullable=True)
    product: Mapped[str | None] = mapped_column(String(80), nullable=True)
