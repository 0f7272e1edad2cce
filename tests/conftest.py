"""
Shared fixtures.

The environment is pointed at a throwaway SQLite file before anything from
``menuboard`` is imported, since settings and the engine are built at
import time.
"""
import asyncio
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="menuboard-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["ADMIN_PASSWORD"] = "letmein"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["SEED_DEFAULT_SECTIONS"] = "false"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP_DIR, "uploads")

import pytest
from fastapi.testclient import TestClient

from menuboard.auth.tokens import issue_token
from menuboard.db import async_session, create_db_and_tables, drop_db_and_tables
from menuboard.main import app

ADMIN_PASSWORD = "letmein"


@pytest.fixture(autouse=True)
def fresh_db():
    """Every test starts from empty tables."""
    asyncio.run(drop_db_and_tables())
    asyncio.run(create_db_and_tables())
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {issue_token()}"}


@pytest.fixture
def run_db():
    """Run ``fn(db, *args)`` inside its own session and return the result."""
    def _run(fn, *args, **kwargs):
        async def _go():
            async with async_session() as db:
                return await fn(db, *args, **kwargs)
        return asyncio.run(_go())
    return _run


@pytest.fixture
def make_section(client, auth_headers):
    def _make(name, **extra):
        res = client.post("/api/sections", json={"name": name, **extra}, headers=auth_headers)
        assert res.status_code == 200, res.text
        return res.json()
    return _make


@pytest.fixture
def make_item(client, auth_headers):
    def _make(section_id, name, price=0, **extra):
        payload = {"section_id": section_id, "name": name, "price": price, **extra}
        res = client.post("/api/items", json=payload, headers=auth_headers)
        assert res.status_code == 200, res.text
        return res.json()
    return _make
