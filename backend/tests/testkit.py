from __future__ import annotations

from dataclasses import dataclass

from fastapi.testclient import TestClient

from quiz_api.db.session import Database
from quiz_api.models.ranking import RankingEntry
from quiz_api.services.auth import upsert_admin


class ApiError(RuntimeError):
    def __init__(self, status_code: int, payload):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"HTTP {status_code}: {payload}")


class ApiClient:
    def __init__(self, client: TestClient):
        self.client = client

    def call(self, method: str, path: str, *, token: str | None = None, body=None, params=None):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        resp = self.client.request(method.upper(), path, headers=headers, json=body, params=params)
        payload = _parse_payload(resp)
        if resp.status_code >= 400:
            raise ApiError(resp.status_code, payload)
        return payload


@dataclass
class IdentityFactory:
    seed: str
    counter: int = 0

    def next_username(self, prefix: str) -> str:
        self.counter += 1
        return f"{prefix}_{self.seed}_{self.counter}"


def _parse_payload(resp):
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def seed_ranking(database: Database, rows: list[tuple[str, int, str]]) -> list[int]:
    with database.session() as db:
        entries = [RankingEntry(username=u, score=s, level=lvl) for u, s, lvl in rows]
        db.add_all(entries)
        db.commit()
        return [e.id for e in entries]


def create_admin(database: Database, username: str = "admin", password: str = "Quimica_123") -> dict:
    with database.session() as db:
        admin = upsert_admin(db, username, password)
        return {"id": admin.id, "username": username, "password": password}


def login(api: ApiClient, username: str, password: str) -> str:
    tokens = api.call("POST", "/auth/login", body={"username": username, "password": password})
    token = tokens.get("access_token") if isinstance(tokens, dict) else None
    if not token:
        raise AssertionError("No access_token in login response.")
    return token


def element_payload(**overrides) -> dict:
    payload = {
        "nome": "Ferro",
        "simbolo": "Fe",
        "nivel": 2,
        "dicas": ["Metal", "Magnetico", "Hematita"],
        "imagemUrl": "/img/fe.png",
        "imgDistribuicao": "/img/dist/fe.png",
    }
    payload.update(overrides)
    return payload
