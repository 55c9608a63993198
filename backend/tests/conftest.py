from __future__ import annotations

import os
from uuid import uuid4

os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ["ALLOWED_HOSTS"] = "testserver"
os.environ["ENV"] = "dev"
os.environ["SEARCH_CASE_SENSITIVE"] = "false"

import pytest
from fastapi.testclient import TestClient

from quiz_api.db.session import Database
from quiz_api.main import create_app
from tests.testkit import ApiClient, IdentityFactory, create_admin, login


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_all()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def session(database):
    with database.session() as db:
        yield db


@pytest.fixture
def api(database):
    with TestClient(create_app(database)) as client:
        yield ApiClient(client)


@pytest.fixture
def admin_token(api, database) -> str:
    admin = create_admin(database)
    return login(api, admin["username"], admin["password"])


@pytest.fixture(scope="session")
def identity_factory() -> IdentityFactory:
    return IdentityFactory(seed=uuid4().hex[:8])
