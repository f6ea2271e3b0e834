"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path`` and an app built
around it, so tests never see each other's rows.
"""
import sqlite3
from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient

from flashcards_api.app.core.db import Database
from flashcards_api.app.main import create_app

API = "/api/v1"


@pytest.fixture()
def database(tmp_path):
    db = Database(str(tmp_path / "test.db"))
    db.init()
    return db


@pytest.fixture()
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture()
def raw(database):
    """Run a raw query against the test DB and return the rows as dicts."""
    def _raw(sql: str, params=()):
        conn = sqlite3.connect(database.path)
        conn.row_factory = sqlite3.Row
        try:
            return [dict(row) for row in conn.execute(sql, params).fetchall()]
        finally:
            conn.close()
    return _raw


class _FailingCursor:
    """Cursor that raises ``OperationalError`` on statements with a given prefix."""

    def __init__(self, cursor, prefix):
        self._cursor = cursor
        self._prefix = prefix

    def execute(self, sql, params=()):
        if sql.lstrip().startswith(self._prefix):
            raise sqlite3.OperationalError(f"forced failure: {self._prefix}")
        return self._cursor.execute(sql, params)

    def __getattr__(self, name):
        return getattr(self._cursor, name)


@pytest.fixture()
def fail_on(database, monkeypatch):
    """Make ``database.transaction()`` fail on statements with a prefix.

    Statements before the failing one run for real, so the test can
    check that the transaction rolled them back.
    """
    def _fail_on(prefix: str):
        transaction = database.transaction

        @contextmanager
        def failing_transaction():
            with transaction() as cursor:
                yield _FailingCursor(cursor, prefix)

        monkeypatch.setattr(database, "transaction", failing_transaction)
    return _fail_on


@pytest.fixture()
def user(client):
    """A registered user; returns the signup response body."""
    response = client.post(
        f"{API}/users",
        json={"userName": "Ann", "email": "a@x.com", "password": "pw"},
    )
    assert response.status_code == 200
    return response.json()


@pytest.fixture()
def deck_id(client, user):
    """A deck of ``user`` holding one card (bonjour / hello)."""
    response = client.post(
        f"{API}/decks",
        params={"userId": user["userId"]},
        json={"deckName": "French", "card": {"front": "bonjour", "back": "hello"}},
    )
    assert response.status_code == 201
    return response.json()
