"""
Signup and login.

Profiles live in ``users`` and credentials in ``login``; the two are
joined by email.  Both rows of a new user are written in a single
transaction so a failed signup never leaves a credential without a
profile (or the reverse).
"""

import logging
import sqlite3

from ..core.db import Database
from ..core.errors import AuthenticationError, EmailInUseError
from ..core.security import (
    DUMMY_PASSWORD_HASH,
    create_session_token,
    hash_password,
    verify_password,
)
from ..schemas.user import LoginResult, UserCreate, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Account operations backed by the ``users`` and ``login`` tables."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def login(self, email: str, password: str) -> LoginResult:
        """Check credentials and issue a session token.

        Raises ``AuthenticationError`` with the same message whether the
        email is unknown or the password is wrong.  An unknown email is
        still run through a password verification so both cases take
        comparable time.
        """
        with self.database.cursor() as cursor:
            row = cursor.execute(
                """
                SELECT users.id, users.name, login.hash
                FROM users
                INNER JOIN login ON users.email = login.email
                WHERE users.email = ?
                """,
                (email,),
            ).fetchone()

        stored_hash = row["hash"] if row else DUMMY_PASSWORD_HASH
        password_ok = verify_password(password, stored_hash)
        if row is None or not password_ok:
            logger.info("Failed login attempt")
            raise AuthenticationError()

        logger.info("User %s logged in", row["id"])
        return LoginResult(
            user_name=row["name"],
            user_id=row["id"],
            token=create_session_token(row["id"]),
        )

    async def create_user(self, data: UserCreate) -> UserRead:
        """Register a user and return its id and name.

        Raises ``EmailInUseError`` when the email already belongs to a
        user, including the case where a concurrent signup wins the race
        and the unique constraint fires inside the transaction.
        """
        with self.database.cursor() as cursor:
            existing = cursor.execute(
                "SELECT 1 FROM users WHERE email = ?", (data.email,)
            ).fetchone()
        if existing:
            raise EmailInUseError()

        hashed = hash_password(data.password)
        try:
            with self.database.transaction() as cursor:
                cursor.execute(
                    "INSERT INTO login (email, hash) VALUES (?, ?)",
                    (data.email, hashed),
                )
                cursor.execute(
                    "INSERT INTO users (name, email) VALUES (?, ?)",
                    (data.name, data.email),
                )
                user_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            raise EmailInUseError() from exc

        logger.info("Registered user %s", user_id)
        return UserRead(user_name=data.name, user_id=user_id)
