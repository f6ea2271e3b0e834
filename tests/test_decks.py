"""
Deck endpoints and the deck transactions.
"""
import asyncio
import sqlite3

import pytest

from flashcards_api.app.schemas.deck import DeckCreate
from flashcards_api.app.schemas.flashcard import FlashcardCreate
from flashcards_api.app.services import deck_service
from flashcards_api.app.services.deck_service import DeckService

from .conftest import API


def _create_deck(client, user_id, name, front="q", back="a"):
    response = client.post(
        f"{API}/decks",
        params={"userId": user_id},
        json={"deckName": name, "card": {"front": front, "back": back}},
    )
    assert response.status_code == 201
    return response.json()


def _add_card(client, deck_id, front, back):
    response = client.post(f"{API}/decks/{deck_id}/cards", json={"front": front, "back": back})
    assert response.status_code == 201


# ── Create ────────────────────────────────────────────────────

class TestCreateDeck:
    def test_returns_deck_id(self, client, user):
        deck_id = _create_deck(client, user["userId"], "Vocab")
        assert isinstance(deck_id, int)
        assert deck_id > 0

    def test_inserts_deck_and_initial_card(self, client, deck_id, user, raw):
        assert raw("SELECT id, name, user_id FROM decks") == [
            {"id": deck_id, "name": "French", "user_id": user["userId"]}
        ]
        assert raw("SELECT deck_id, question, answer FROM flashcards") == [
            {"deck_id": deck_id, "question": "bonjour", "answer": "hello"}
        ]

    def test_requires_user_id(self, client, user):
        response = client.post(
            f"{API}/decks",
            json={"deckName": "X", "card": {"front": "q", "back": "a"}},
        )
        assert response.status_code == 400

    def test_requires_initial_card(self, client, user, raw):
        response = client.post(f"{API}/decks", params={"userId": user["userId"]}, json={"deckName": "X"})
        assert response.status_code == 400
        assert raw("SELECT * FROM decks") == []

    def test_failed_card_insert_rolls_back_deck(self, database, user, raw, monkeypatch):
        def failing_insert(cursor, deck_id, card):
            # Runs after the deck row has been written.
            cursor.execute("INSERT INTO flashcards (deck_id) VALUES (?)", (deck_id,))

        monkeypatch.setattr(deck_service, "insert_flashcard", failing_insert)
        data = DeckCreate(deck_name="Broken", card=FlashcardCreate(front="q", back="a"))
        with pytest.raises(sqlite3.IntegrityError):
            asyncio.run(DeckService(database).create_deck(user["userId"], data))
        assert raw("SELECT * FROM decks") == []
        assert raw("SELECT * FROM flashcards") == []


# ── List ──────────────────────────────────────────────────────

class TestListDecks:
    def test_counts_cards_per_deck(self, client, user):
        first = _create_deck(client, user["userId"], "A")
        second = _create_deck(client, user["userId"], "B")
        _add_card(client, second, "q2", "a2")
        _add_card(client, second, "q3", "a3")

        response = client.get(f"{API}/decks", params={"userId": user["userId"]})
        assert response.status_code == 200
        assert response.json() == [
            {"id": first, "name": "A", "cardCount": 1},
            {"id": second, "name": "B", "cardCount": 3},
        ]

    def test_scoped_to_user(self, client, user):
        other = client.post(
            f"{API}/users",
            json={"name": "Bob", "email": "b@x.com", "password": "pw"},
        ).json()
        _create_deck(client, user["userId"], "OnlyForAnn")

        response = client.get(f"{API}/decks", params={"userId": other["userId"]})
        assert response.json() == []

    def test_user_id_must_be_integer(self, client):
        response = client.get(f"{API}/decks", params={"userId": "abc"})
        assert response.status_code == 400


# ── Get ───────────────────────────────────────────────────────

class TestGetDeck:
    def test_returns_name_and_cards_in_client_shape(self, client, deck_id):
        response = client.get(f"{API}/decks/{deck_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["deckName"] == "French"
        assert len(body["cards"]) == 1
        card = body["cards"][0]
        assert card["front"] == "bonjour"
        assert card["back"] == "hello"
        assert card["deckId"] == deck_id
        assert "question" not in card

    def test_missing_deck_is_empty(self, client):
        response = client.get(f"{API}/decks/999")
        assert response.status_code == 200
        assert response.json() == {"deckName": None, "cards": []}


# ── Delete ────────────────────────────────────────────────────

class TestDeleteDeck:
    def test_removes_deck_and_all_cards(self, client, deck_id, raw):
        _add_card(client, deck_id, "q2", "a2")

        response = client.delete(f"{API}/decks/{deck_id}")
        assert response.status_code == 200
        assert response.text == "deck deleted"
        assert raw("SELECT * FROM decks WHERE id = ?", (deck_id,)) == []
        assert raw("SELECT * FROM flashcards WHERE deck_id = ?", (deck_id,)) == []

    def test_deck_is_empty_afterwards(self, client, deck_id):
        client.delete(f"{API}/decks/{deck_id}")
        assert client.get(f"{API}/decks/{deck_id}").json() == {"deckName": None, "cards": []}

    def test_other_decks_untouched(self, client, user, deck_id, raw):
        keep = _create_deck(client, user["userId"], "Keep")
        client.delete(f"{API}/decks/{deck_id}")
        assert [row["id"] for row in raw("SELECT id FROM decks")] == [keep]
        assert len(raw("SELECT * FROM flashcards WHERE deck_id = ?", (keep,))) == 1

    def test_failed_deck_delete_keeps_cards(self, client, deck_id, raw, fail_on):
        _add_card(client, deck_id, "q2", "a2")
        fail_on("DELETE FROM decks")

        response = client.delete(f"{API}/decks/{deck_id}")
        assert response.status_code == 500
        assert response.text == "server error"
        assert len(raw("SELECT * FROM decks WHERE id = ?", (deck_id,))) == 1
        assert len(raw("SELECT * FROM flashcards WHERE deck_id = ?", (deck_id,))) == 2
