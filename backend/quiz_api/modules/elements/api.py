from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from quiz_api.api.deps import get_current_admin
from quiz_api.db.session import get_db
from quiz_api.schemas.element import ElementIn, ElementOut
from quiz_api.services import elements as element_service
from quiz_api.services.errors import ElementConflict, ElementNotFound

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.get("", response_model=list[ElementOut])
def list_elements(db: Session = Depends(get_db)):
    return element_service.list_elements(db)


@router.get("/{element_id}", response_model=ElementOut)
def get_element(element_id: int, db: Session = Depends(get_db)):
    try:
        return element_service.get_element(db, element_id)
    except ElementNotFound:
        raise HTTPException(404, "Elemento nao encontrado")


@router.post("", response_model=ElementOut, status_code=201)
def create_element(payload: ElementIn, db: Session = Depends(get_db)):
    try:
        return element_service.create_element(db, payload)
    except ElementConflict as exc:
        raise HTTPException(409, f"Simbolo {exc.symbol} ja cadastrado")


@router.put("/{element_id}", response_model=ElementOut)
def update_element(element_id: int, payload: ElementIn, db: Session = Depends(get_db)):
    try:
        return element_service.update_element(db, element_id, payload)
    except ElementNotFound:
        raise HTTPException(404, "Elemento nao encontrado")
    except ElementConflict as exc:
        raise HTTPException(409, f"Simbolo {exc.symbol} ja cadastrado")


@router.delete("/{element_id}", response_model=ElementOut)
def delete_element(element_id: int, db: Session = Depends(get_db)):
    try:
        return element_service.delete_element(db, element_id)
    except ElementNotFound:
        raise HTTPException(404, "Elemento nao encontrado")
