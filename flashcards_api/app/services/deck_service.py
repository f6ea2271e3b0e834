"""
Deck queries and the two multi-row deck operations.

Creating a deck inserts its first card in the same transaction, and
deleting a deck removes its cards first, also in one transaction.  The
schema has no cascading foreign keys, so the explicit delete is what
keeps ``flashcards`` free of orphans.
"""

import logging
from typing import List

from ..core.db import Database
from ..schemas.deck import DeckCreate, DeckRead, DeckSummary
from ..schemas.flashcard import flashcard_for_client
from .flashcard_service import insert_flashcard

logger = logging.getLogger(__name__)


class DeckService:
    """Operations on the ``decks`` table."""

    def __init__(self, database: Database) -> None:
        self.database = database

    async def get_all_decks(self, user_id: int) -> List[DeckSummary]:
        """List the decks of ``user_id`` with their card counts."""
        with self.database.cursor() as cursor:
            rows = cursor.execute(
                """
                SELECT decks.id, decks.name,
                       (SELECT COUNT(*) FROM flashcards
                        WHERE flashcards.deck_id = decks.id) AS card_count
                FROM decks
                WHERE decks.user_id = ?
                ORDER BY decks.id
                """,
                (user_id,),
            ).fetchall()
        return [DeckSummary(id=row["id"], name=row["name"], card_count=row["card_count"]) for row in rows]

    async def get_deck(self, deck_id: int) -> DeckRead:
        """Return the deck name and its cards.

        A missing deck yields ``deck_name=None`` and no cards rather
        than an error.
        """
        with self.database.cursor() as cursor:
            deck = cursor.execute("SELECT name FROM decks WHERE id = ?", (deck_id,)).fetchone()
            rows = cursor.execute(
                "SELECT * FROM flashcards WHERE deck_id = ? ORDER BY id", (deck_id,)
            ).fetchall()
        return DeckRead(
            deck_name=deck["name"] if deck else None,
            cards=[flashcard_for_client(row) for row in rows],
        )

    async def create_deck(self, user_id: int, data: DeckCreate) -> int:
        """Insert a deck with its initial card and return the deck id."""
        with self.database.transaction() as cursor:
            cursor.execute(
                "INSERT INTO decks (name, user_id) VALUES (?, ?)",
                (data.deck_name, user_id),
            )
            deck_id = cursor.lastrowid
            insert_flashcard(cursor, deck_id, data.card)
        logger.info("Created deck %s for user %s", deck_id, user_id)
        return deck_id

    async def delete_deck(self, deck_id: int) -> None:
        """Delete the deck's cards, then the deck itself."""
        with self.database.transaction() as cursor:
            cursor.execute("DELETE FROM flashcards WHERE deck_id = ?", (deck_id,))
            removed_cards = cursor.rowcount
            cursor.execute("DELETE FROM decks WHERE id = ?", (deck_id,))
        logger.info("Deleted deck %s and %s card(s)", deck_id, removed_cards)
