import logging

import sqlalchemy as sa
from sqlalchemy.orm import Session

from quiz_api.core.security import hash_password, now_utc, verify_password
from quiz_api.models.admin import Admin

logger = logging.getLogger(__name__)


def authenticate_admin(db: Session, username: str, password: str) -> Admin | None:
    admin = db.execute(
        sa.select(Admin).where(Admin.username == username.strip())
    ).scalar_one_or_none()
    if admin is None or not verify_password(password, admin.password_hash):
        logger.warning("Failed admin login for %r", username)
        return None
    admin.last_login_at = now_utc()
    db.commit()
    logger.info("Admin %s logged in", admin.id)
    return admin


def upsert_admin(db: Session, username: str, password: str) -> Admin:
    username = username.strip()
    admin = db.execute(
        sa.select(Admin).where(Admin.username == username)
    ).scalar_one_or_none()
    if admin is None:
        admin = Admin(username=username, password_hash=hash_password(password))
        db.add(admin)
    else:
        admin.password_hash = hash_password(password)
    db.commit()
    db.refresh(admin)
    return admin
