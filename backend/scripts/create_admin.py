import getpass
import os

from quiz_api.core.config import settings
from quiz_api.db.session import Database
from quiz_api.services.auth import upsert_admin


def main():
    username = os.getenv("ADMIN_USERNAME") or input("usuario: ").strip()
    password = os.getenv("ADMIN_PASSWORD") or getpass.getpass("senha: ")
    if not username or not password:
        raise SystemExit("erro: usuario e senha sao obrigatorios")

    database = Database(settings.DATABASE_URL)
    try:
        with database.session() as db:
            admin = upsert_admin(db, username, password)
            print(f"ok: administrador {admin.username} (id={admin.id}) salvo")
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
