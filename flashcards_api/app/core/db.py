"""
SQLite persistence and schema migrations.

A ``Database`` object owns the location of the SQLite file and hands
out connections.  It is created once per process (see ``create_app``)
and passed to the services that need it, so tests can point the whole
application at a temporary file.

Two context managers cover the access patterns used by the services:

``cursor()``
    one or more statements, committed together when the block exits.
``transaction()``
    same, but rolls back explicitly when the block raises so that a
    multi-row operation is never left half applied.

The schema is described by the ``MIGRATIONS`` list.  Applied versions
are recorded in the ``migrations`` table and only newer entries run on
start-up.  Append new migrations with an incremented version number;
never edit one that has shipped.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        -- Credentials live apart from the profile and are joined by email.
        CREATE TABLE IF NOT EXISTS login (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            email TEXT NOT NULL UNIQUE,
            hash TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS decks (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            user_id INTEGER NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(id)
        );

        -- No ON DELETE CASCADE: DeckService removes a deck's cards itself.
        CREATE TABLE IF NOT EXISTS flashcards (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            deck_id INTEGER NOT NULL,
            question TEXT NOT NULL,
            answer TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(deck_id) REFERENCES decks(id)
        );
        """,
    ),
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_decks_user_id ON decks(user_id);
        CREATE INDEX IF NOT EXISTS idx_flashcards_deck_id ON flashcards(deck_id);
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Return an absolute path for ``database_url``.

    Absolute paths are used unchanged, relative ones are taken from the
    current working directory, as with any other file argument.  Run the
    server and the CLI from the same directory, or use an absolute
    ``DATABASE_URL``, so both open the same file.
    """
    if os.path.isabs(database_url):
        return database_url
    return str(Path(database_url).resolve())


class Database:
    """Handle on the SQLite database file used by the services."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)

    def __repr__(self) -> str:
        return f"Database({self.path!r})"

    def connect(self) -> sqlite3.Connection:
        """Open a new connection with name based row access.

        Foreign keys are enforced per connection in SQLite, so the
        pragma is issued every time.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor, commit on normal exit and always close."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor whose statements commit or roll back as one unit."""
        conn = self.connect()
        try:
            yield conn.cursor()
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init(self) -> int:
        """Create the database file if needed and apply pending migrations.

        Returns the schema version after the run.
        """
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self.cursor() as cursor:
            cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version <= current_version:
                    continue
                logger.info("Applying migration %s to %s", version, self.path)
                cursor.executescript(sql)
                cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                current_version = version
        return current_version
