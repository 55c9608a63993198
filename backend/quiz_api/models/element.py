import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from quiz_api.db.base import Base

class Element(Base):
    __tablename__ = "elements"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(sa.Text, nullable=False)
    symbol: Mapped[str] = mapped_column(sa.Text, nullable=False, unique=True)
    level: Mapped[int] = mapped_column(sa.Integer, nullable=False, server_default="1")
    hints: Mapped[list] = mapped_column(sa.JSON, nullable=False)
    image_url: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    distribution_image_url: Mapped[str | None] = mapped_column(sa.Text, nullable=True)

    created_at: Mapped[sa.DateTime] = mapped_column(sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())
    updated_at: Mapped[sa.DateTime] = mapped_column(sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())

    __table_args__ = (
        sa.CheckConstraint("level >= 1", name="ck_elements_level"),
        sa.Index("ix_elements_level_name", "level", "name"),
    )
