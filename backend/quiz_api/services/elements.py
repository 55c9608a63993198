import logging

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quiz_api.core.security import now_utc
from quiz_api.models.element import Element
from quiz_api.schemas.element import ElementIn, ElementOut
from quiz_api.services.errors import ElementConflict, ElementNotFound

logger = logging.getLogger(__name__)


def _symbol_taken(db: Session, symbol: str, exclude_id: int | None = None) -> bool:
    stmt = sa.select(Element.id).where(sa.func.lower(Element.symbol) == symbol.lower())
    if exclude_id is not None:
        stmt = stmt.where(Element.id != exclude_id)
    return db.execute(stmt.limit(1)).scalar_one_or_none() is not None


def _get_or_raise(db: Session, element_id: int) -> Element:
    row = db.get(Element, element_id)
    if row is None:
        raise ElementNotFound(element_id)
    return row


def _commit_or_conflict(db: Session, symbol: str) -> None:
    # the symbol check above can lose a race; the unique index has the final say
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ElementConflict(symbol)


def _apply(row: Element, payload: ElementIn) -> None:
    row.name = payload.name
    row.symbol = payload.symbol
    row.level = payload.level
    row.hints = list(payload.hints)
    row.image_url = payload.image_url
    row.distribution_image_url = payload.distribution_image_url


def list_elements(db: Session) -> list[ElementOut]:
    rows = db.execute(
        sa.select(Element).order_by(Element.level, Element.name)
    ).scalars().all()
    return [ElementOut.model_validate(r) for r in rows]


def get_element(db: Session, element_id: int) -> ElementOut:
    return ElementOut.model_validate(_get_or_raise(db, element_id))


def create_element(db: Session, payload: ElementIn) -> ElementOut:
    if _symbol_taken(db, payload.symbol):
        raise ElementConflict(payload.symbol)
    row = Element()
    _apply(row, payload)
    db.add(row)
    _commit_or_conflict(db, payload.symbol)
    db.refresh(row)
    logger.info("Created element %s (%s)", row.id, row.symbol)
    return ElementOut.model_validate(row)


def update_element(db: Session, element_id: int, payload: ElementIn) -> ElementOut:
    row = _get_or_raise(db, element_id)
    if _symbol_taken(db, payload.symbol, exclude_id=element_id):
        raise ElementConflict(payload.symbol)
    _apply(row, payload)
    row.updated_at = now_utc()
    _commit_or_conflict(db, payload.symbol)
    db.refresh(row)
    logger.info("Updated element %s (%s)", row.id, row.symbol)
    return ElementOut.model_validate(row)


def delete_element(db: Session, element_id: int) -> ElementOut:
    row = _get_or_raise(db, element_id)
    removed = ElementOut.model_validate(row)
    db.delete(row)
    db.commit()
    logger.info("Deleted element %s (%s)", removed.id, removed.symbol)
    return removed
