import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column
from quiz_api.db.base import Base

NO_LEVEL_FILTER = "TODOS"

class RankingEntry(Base):
    __tablename__ = "ranking"

    id: Mapped[int] = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(sa.Text, nullable=False)
    score: Mapped[int] = mapped_column(sa.Integer, nullable=False, server_default="0")
    level: Mapped[str] = mapped_column(sa.Text, nullable=False)

    created_at: Mapped[sa.DateTime] = mapped_column(sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())

    __table_args__ = (
        sa.CheckConstraint(f"level <> '{NO_LEVEL_FILTER}'", name="ck_ranking_level_not_sentinel"),
        sa.Index("ix_ranking_score", "score"),
        sa.Index("ix_ranking_level_score", "level", "score"),
    )
