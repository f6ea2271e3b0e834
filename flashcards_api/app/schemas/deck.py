"""
Pydantic models for decks.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .flashcard import FlashcardCreate, FlashcardRead


class DeckCreate(BaseModel):
    """A new deck always comes with its first card."""

    model_config = ConfigDict(populate_by_name=True)

    deck_name: str = Field(..., alias="deckName", min_length=1, examples=["French verbs"])
    card: FlashcardCreate


class DeckSummary(BaseModel):
    """Entry of the deck list, with the number of cards in the deck."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    card_count: int = Field(0, alias="cardCount")


class DeckRead(BaseModel):
    """A deck with all of its cards.

    ``deck_name`` is ``None`` when the deck does not exist; ``cards`` is
    then empty.
    """

    model_config = ConfigDict(populate_by_name=True)

    deck_name: Optional[str] = Field(None, alias="deckName")
    cards: List[FlashcardRead] = Field(default_factory=list)
