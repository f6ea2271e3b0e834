"""
Flashcard endpoints, nested under their deck.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from flashcards_api.app.api.deps import get_flashcard_service
from flashcards_api.app.core.errors import SERVER_ERROR_MESSAGE
from flashcards_api.app.schemas.flashcard import FlashcardCreate, FlashcardRead, FlashcardUpdate
from flashcards_api.app.services.flashcard_service import FlashcardService

router = APIRouter()


@router.post(
    "/{deck_id}/cards",
    response_class=PlainTextResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_card(
    deck_id: int,
    card: FlashcardCreate,
    service: FlashcardService = Depends(get_flashcard_service),
) -> str:
    await service.create_card(deck_id, card)
    return "card created!"


@router.api_route(
    "/{deck_id}/cards/{card_id}",
    methods=["PUT", "PATCH"],
    response_model=FlashcardRead,
    responses={500: {"description": "No card with this id in the deck"}},
)
async def edit_card(
    deck_id: int,
    card_id: int,
    changes: FlashcardUpdate,
    service: FlashcardService = Depends(get_flashcard_service),
):
    """Update the fields present in the body.

    A card that does not exist in the deck is reported as a 500
    ``server error``; nothing is created.
    """
    card = await service.edit_card(deck_id, card_id, changes)
    if card is None:
        return PlainTextResponse(SERVER_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return card


@router.delete("/{deck_id}/cards/{card_id}", response_class=PlainTextResponse)
async def delete_card(
    deck_id: int,
    card_id: int,
    service: FlashcardService = Depends(get_flashcard_service),
) -> str:
    await service.delete_card(deck_id, card_id)
    return "card deleted"
