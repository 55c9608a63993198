from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from quiz_api.core.security import decode_token
from quiz_api.db.session import get_db
from quiz_api.models.admin import Admin

bearer = HTTPBearer()


def get_current_admin(
    creds: HTTPAuthorizationCredentials = Depends(bearer),
    db: Session = Depends(get_db),
) -> Admin:
    try:
        payload = decode_token(creds.credentials)
    except JWTError:
        raise HTTPException(status_code=401, detail="Token invalido")
    if payload.get("type") != "access":
        raise HTTPException(status_code=401, detail="Tipo de token invalido")
    try:
        admin_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Token invalido")
    admin = db.get(Admin, admin_id)
    if not admin:
        raise HTTPException(status_code=401, detail="Administrador nao encontrado")
    # end the lookup transaction; handlers open their own
    db.commit()
    return admin
