"""
Flashcard payloads and the storage/client field mapping.

Cards are stored with ``question``/``answer`` columns but clients
speak ``front``/``back``.  ``flashcard_for_client`` and
``flashcard_for_db`` are the only places that know both vocabularies.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

# client field -> storage column
CLIENT_TO_DB_FIELDS = {"front": "question", "back": "answer"}


class FlashcardCreate(BaseModel):
    """Body of ``POST /decks/{deckId}/cards`` and the initial card of a deck."""

    front: str = Field(..., examples=["bonjour"])
    back: str = Field(..., examples=["hello"])


class FlashcardUpdate(BaseModel):
    """Body of ``PUT``/``PATCH`` on a card; omitted fields are left alone."""

    front: Optional[str] = None
    back: Optional[str] = None


class FlashcardRead(BaseModel):
    """A card as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    deck_id: int = Field(..., alias="deckId")
    front: str
    back: str


def flashcard_for_client(row: Mapping[str, Any]) -> FlashcardRead:
    """Translate a ``flashcards`` row into the client representation."""
    return FlashcardRead(
        id=row["id"],
        deck_id=row["deck_id"],
        front=row["question"],
        back=row["answer"],
    )


def flashcard_for_db(card: FlashcardCreate | FlashcardUpdate) -> Dict[str, Any]:
    """Translate client card fields into ``flashcards`` column values.

    Only fields the client actually sent are included, so a partial
    update touches only those columns.
    """
    sent = card.model_dump(exclude_unset=True)
    return {
        column: sent[field]
        for field, column in CLIENT_TO_DB_FIELDS.items()
        if field in sent and sent[field] is not None
    }
