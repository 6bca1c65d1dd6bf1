"""
Shared fixtures.

HTTP tests run against the real FastAPI app with the dinos repository
swapped for an in-memory store, so no database is needed.
"""

from __future__ import annotations

from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from core import db
from dinos import repository


class InMemoryDinoStore:
    """Test double with the same contract as `dinos.repository`."""

    def __init__(self) -> None:
        self.rows: dict[UUID, dict] = {}
        self.fail_with: Exception | None = None

    def _check(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def list_dinos(self) -> list[dict]:
        self._check()
        return [dict(row) for row in sorted(self.rows.values(), key=lambda r: (r["name"], str(r["id"])))]

    async def get_dino(self, dino_id: UUID) -> dict | None:
        self._check()
        row = self.rows.get(dino_id)
        return dict(row) if row is not None else None

    async def create_dino(self, *, dino_id, name, weight, diet, user_id=None) -> dict:
        self._check()
        if dino_id in self.rows:
            raise db.ConflictError(f"Key (id)=({dino_id}) already exists.")
        row = {"id": dino_id, "name": name, "weight": weight, "diet": diet, "user_id": user_id}
        self.rows[dino_id] = row
        return dict(row)

    async def update_dino(
        self,
        dino_id,
        *,
        name=None,
        weight=None,
        diet=None,
        user_id=None,
        replace_user_id=False,
    ) -> dict | None:
        self._check()
        row = self.rows.get(dino_id)
        if row is None:
            return None
        if name is not None:
            row["name"] = name
        if weight is not None:
            row["weight"] = weight
        if diet is not None:
            row["diet"] = diet
        if replace_user_id:
            row["user_id"] = user_id
        return dict(row)

    async def delete_dino(self, dino_id: UUID) -> dict | None:
        self._check()
        row = self.rows.pop(dino_id, None)
        return {"id": row["id"]} if row is not None else None


@pytest.fixture
def store(monkeypatch) -> InMemoryDinoStore:
    fake = InMemoryDinoStore()
    for name in ("list_dinos", "get_dino", "create_dino", "update_dino", "delete_dino"):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def client(store, monkeypatch):
    async def _noop() -> None:
        return None

    monkeypatch.setattr(db, "init_pool", _noop)
    monkeypatch.setattr(db, "close_pool", _noop)

    from main import app

    with TestClient(app) as test_client:
        yield test_client
