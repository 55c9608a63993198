from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from quiz_api.db.session import get_db
from quiz_api.schemas.ranking import RankingEntryOut
from quiz_api.services.ranking import get_top_ranking

router = APIRouter()


@router.get("", response_model=list[RankingEntryOut])
def top_ranking(db: Session = Depends(get_db)):
    return get_top_ranking(db)
