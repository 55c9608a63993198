"""
Ranking participants: filtered listing and admin mutations.

``list_participants`` runs the count and the page fetch inside one
read transaction so ``total`` and ``data`` always describe the same
filtered set.  ``delete_participant`` and ``rename_participant`` raise
``ParticipantNotFound`` for unknown ids and leave the store untouched.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import sqlalchemy as sa
from sqlalchemy.orm import Session

from quiz_api.core.config import settings
from quiz_api.models.ranking import NO_LEVEL_FILTER, RankingEntry
from quiz_api.schemas.ranking import ParticipantPageOut, RankingEntryOut
from quiz_api.services.errors import ParticipantNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParticipantFilter:
    search_text: str | None = None
    level: str | None = None


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def _filter_conditions(flt: ParticipantFilter) -> list[sa.ColumnElement[bool]]:
    conditions: list[sa.ColumnElement[bool]] = []
    if flt.search_text:
        if settings.SEARCH_CASE_SENSITIVE:
            conditions.append(RankingEntry.username.contains(flt.search_text, autoescape=True))
        else:
            conditions.append(
                sa.func.lower(RankingEntry.username).contains(flt.search_text.lower(), autoescape=True)
            )
    if flt.level and flt.level != NO_LEVEL_FILTER:
        conditions.append(RankingEntry.level == flt.level)
    return conditions


@contextmanager
def _read_snapshot(db: Session) -> Iterator[None]:
    if db.in_transaction():
        # caller owns the transaction boundary
        yield
        return
    options = {}
    if settings.DB_SNAPSHOT_ISOLATION:
        options["isolation_level"] = settings.DB_SNAPSHOT_ISOLATION
    db.connection(execution_options=options)
    try:
        yield
    finally:
        db.rollback()


def list_participants(
    db: Session,
    page: int = 1,
    limit: int = 10,
    flt: ParticipantFilter | None = None,
) -> ParticipantPageOut:
    conditions = _filter_conditions(flt or ParticipantFilter())

    with _read_snapshot(db):
        total = db.execute(
            sa.select(sa.func.count()).select_from(RankingEntry).where(*conditions)
        ).scalar_one()
        rows = db.execute(
            sa.select(RankingEntry)
            .where(*conditions)
            .order_by(RankingEntry.score.desc())
            .offset(page_offset(page, limit))
            .limit(limit)
        ).scalars().all()
        data = [RankingEntryOut.model_validate(r) for r in rows]

    return ParticipantPageOut(
        data=data,
        total=int(total),
        page=page,
        total_pages=total_pages(int(total), limit),
    )


def _get_or_raise(db: Session, participant_id: int) -> RankingEntry:
    row = db.get(RankingEntry, participant_id)
    if row is None:
        raise ParticipantNotFound(participant_id)
    return row


def delete_participant(db: Session, participant_id: int) -> RankingEntryOut:
    row = _get_or_raise(db, participant_id)
    removed = RankingEntryOut.model_validate(row)
    db.delete(row)
    db.commit()
    logger.info("Deleted participant %s (%s)", removed.id, removed.username)
    return removed


def rename_participant(db: Session, participant_id: int, new_username: str) -> RankingEntryOut:
    row = _get_or_raise(db, participant_id)
    old_username = row.username
    row.username = new_username
    db.commit()
    logger.info("Renamed participant %s from %r to %r", participant_id, old_username, new_username)
    return RankingEntryOut.model_validate(row)
