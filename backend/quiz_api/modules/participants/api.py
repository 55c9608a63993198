from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from quiz_api.api.deps import get_current_admin
from quiz_api.core.config import settings
from quiz_api.db.session import get_db
from quiz_api.schemas.ranking import ParticipantPageOut, ParticipantRenameIn, RankingEntryOut
from quiz_api.services.errors import ParticipantNotFound
from quiz_api.services.participants import (
    ParticipantFilter,
    delete_participant,
    list_participants,
    rename_participant,
)

router = APIRouter(dependencies=[Depends(get_current_admin)])


def _clean(raw: str | None) -> str | None:
    if raw is None:
        return None
    out = raw.strip()
    return out or None


@router.get("", response_model=ParticipantPageOut)
def participants(
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    busca: str | None = Query(default=None, max_length=120, description="Trecho do nome de usuario"),
    nivel: str | None = Query(default=None, max_length=60, description="Nivel; TODOS nao filtra"),
    db: Session = Depends(get_db),
):
    if limit is None:
        limit = settings.DEFAULT_PAGE_SIZE
    if limit > settings.MAX_PAGE_SIZE:
        raise HTTPException(400, f"limit deve ser no maximo {settings.MAX_PAGE_SIZE}")
    flt = ParticipantFilter(search_text=_clean(busca), level=_clean(nivel))
    return list_participants(db, page=page, limit=limit, flt=flt)


@router.put("/{participant_id}", response_model=RankingEntryOut)
def rename(participant_id: int, payload: ParticipantRenameIn, db: Session = Depends(get_db)):
    new_username = payload.username.strip()
    if not new_username:
        raise HTTPException(400, "username nao pode estar vazio")
    try:
        return rename_participant(db, participant_id, new_username)
    except ParticipantNotFound:
        raise HTTPException(404, "Participante nao encontrado")


@router.delete("/{participant_id}", response_model=RankingEntryOut)
def delete(participant_id: int, db: Session = Depends(get_db)):
    try:
        return delete_participant(db, participant_id)
    except ParticipantNotFound:
        raise HTTPException(404, "Participante nao encontrado")
