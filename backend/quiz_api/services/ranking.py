import sqlalchemy as sa
from sqlalchemy.orm import Session

from quiz_api.models.ranking import RankingEntry
from quiz_api.schemas.ranking import RankingEntryOut


def get_top_ranking(db: Session) -> list[RankingEntryOut]:
    rows = db.execute(
        sa.select(RankingEntry).order_by(RankingEntry.score.desc())
    ).scalars().all()
    return [RankingEntryOut.model_validate(r) for r in rows]
