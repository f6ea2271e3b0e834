"""
Deck endpoints.

The owning user is passed as the ``userId`` query parameter for listing
and creating decks; single decks are addressed by id.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse

from flashcards_api.app.api.deps import get_deck_service
from flashcards_api.app.schemas.deck import DeckCreate, DeckRead, DeckSummary
from flashcards_api.app.services.deck_service import DeckService

router = APIRouter()


@router.get("", response_model=List[DeckSummary])
async def list_decks(
    user_id: int = Query(..., alias="userId"),
    service: DeckService = Depends(get_deck_service),
) -> List[DeckSummary]:
    """All decks of a user, each with its ``cardCount``."""
    return await service.get_all_decks(user_id)


@router.get("/{deck_id}", response_model=DeckRead)
async def get_deck(
    deck_id: int,
    service: DeckService = Depends(get_deck_service),
) -> DeckRead:
    return await service.get_deck(deck_id)


@router.post("", response_model=int, status_code=status.HTTP_201_CREATED)
async def create_deck(
    deck: DeckCreate,
    user_id: int = Query(..., alias="userId"),
    service: DeckService = Depends(get_deck_service),
) -> int:
    """Create a deck together with its first card; returns the deck id."""
    return await service.create_deck(user_id, deck)


@router.delete("/{deck_id}", response_class=PlainTextResponse)
async def delete_deck(
    deck_id: int,
    service: DeckService = Depends(get_deck_service),
) -> str:
    """Delete a deck and every card in it."""
    await service.delete_deck(deck_id)
    return "deck deleted"
