"""
Flashcard field mapping between storage rows and client payloads.
"""
from flashcards_api.app.schemas.flashcard import (
    FlashcardCreate,
    FlashcardUpdate,
    flashcard_for_client,
    flashcard_for_db,
)
from flashcards_api.app.schemas.user import UserRead


def test_row_to_client_renames_fields():
    card = flashcard_for_client({"id": 3, "deck_id": 2, "question": "q", "answer": "a"})
    assert card.model_dump(by_alias=True) == {"id": 3, "deckId": 2, "front": "q", "back": "a"}


def test_create_to_db_renames_fields():
    assert flashcard_for_db(FlashcardCreate(front="q", back="a")) == {"question": "q", "answer": "a"}


def test_partial_update_keeps_only_sent_fields():
    assert flashcard_for_db(FlashcardUpdate(back="a")) == {"answer": "a"}
    assert flashcard_for_db(FlashcardUpdate()) == {}


def test_user_read_serialises_camel_case():
    assert UserRead(user_name="Ann", user_id=1).model_dump(by_alias=True) == {"userName": "Ann", "userId": 1}
