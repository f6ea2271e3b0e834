"""
FastAPI dependencies that hand services to the routers.

The ``Database`` is created by ``create_app`` and stored on
``app.state``; each request builds lightweight service objects around
it.
"""

from fastapi import Depends, Request

from ..core.db import Database
from ..services.deck_service import DeckService
from ..services.flashcard_service import FlashcardService
from ..services.user_service import UserService


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_user_service(database: Database = Depends(get_database)) -> UserService:
    return UserService(database)


def get_deck_service(database: Database = Depends(get_database)) -> DeckService:
    return DeckService(database)


def get_flashcard_service(database: Database = Depends(get_database)) -> FlashcardService:
    return FlashcardService(database)
