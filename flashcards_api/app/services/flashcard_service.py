"""
Card level operations.

Cards are always addressed by the pair ``(deck_id, id)`` so that a card
id from one deck cannot be used to touch a card in another deck.
"""

import logging
import sqlite3
from typing import Optional

from ..core.db import Database
from ..core.errors import EmptyCardUpdateError
from ..schemas.flashcard import (
    FlashcardCreate,
    FlashcardRead,
    FlashcardUpdate,
    flashcard_for_client,
    flashcard_for_db,
)

logger = logging.getLogger(__name__)


def insert_flashcard(cursor: sqlite3.Cursor, deck_id: int, card: FlashcardCreate) -> int:
    """Insert ``card`` under ``deck_id`` using the caller's cursor.

    Taking a cursor lets ``DeckService.create_deck`` put the insert in
    its own transaction.
    """
    values = flashcard_for_db(card)
    values["deck_id"] = deck_id
    columns = ", ".join(values)
    placeholders = ", ".join("?" for _ in values)
    cursor.execute(
        f"INSERT INTO flashcards ({columns}) VALUES ({placeholders})",
        tuple(values.values()),
    )
    return cursor.lastrowid


class FlashcardService:
    """Operations on the ``flashcards`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def create_card(self, deck_id: int, card: FlashcardCreate) -> int:
        with self.database.cursor() as cursor:
            card_id = insert_flashcard(cursor, deck_id, card)
        logger.info("Created card %s in deck %s", card_id, deck_id)
        return card_id

    async def edit_card(self, deck_id: int, card_id: int, changes: FlashcardUpdate) -> Optional[FlashcardRead]:
        """Apply ``changes`` to the card and return it.

        Returns ``None`` when no card matches ``(deck_id, card_id)``; no
        row is created in that case.  Raises ``EmptyCardUpdateError`` when
        ``changes`` carries no field.
        """
        values = flashcard_for_db(changes)
        if not values:
            raise EmptyCardUpdateError()
        # Column names come from CLIENT_TO_DB_FIELDS, never from the request.
        assignments = ", ".join(f"{column} = ?" for column in values)
        with self.database.cursor() as cursor:
            cursor.execute(
                f"UPDATE flashcards SET {assignments} WHERE deck_id = ? AND id = ?",
                (*values.values(), deck_id, card_id),
            )
            if cursor.rowcount == 0:
                logger.warning("Card %s not found in deck %s", card_id, deck_id)
                return None
            row = cursor.execute(
                "SELECT * FROM flashcards WHERE deck_id = ? AND id = ?",
                (deck_id, card_id),
            ).fetchone()
        return flashcard_for_client(row)

    async def delete_card(self, deck_id: int, card_id: int) -> None:
        """Delete the card; a missing card is not an error."""
        with self.database.cursor() as cursor:
            cursor.execute(
                "DELETE FROM flashcards WHERE deck_id = ? AND id = ?",
                (deck_id, card_id),
            )
            removed = cursor.rowcount
        logger.info("Deleted %s card(s) matching card %s in deck %s", removed, card_id, deck_id)
