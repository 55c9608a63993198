from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from quiz_api.core.security import create_access_token
from quiz_api.db.session import get_db
from quiz_api.schemas.auth import LoginIn, TokenOut
from quiz_api.services.auth import authenticate_admin

router = APIRouter()


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    admin = authenticate_admin(db, payload.username, payload.password)
    if admin is None:
        raise HTTPException(401, "Usuario ou senha invalidos")
    return TokenOut(access_token=create_access_token(str(admin.id)))
