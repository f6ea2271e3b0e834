"""
Top-level router for version 1 of the API.

Auth routes sit at the root of the version prefix (``/login``,
``/logout``, ``/users``); deck and card routes share the ``/decks``
prefix because cards are nested under their deck.
"""

from fastapi import APIRouter

from .endpoints import auth, cards, decks, health

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(decks.router, prefix="/decks", tags=["decks"])
router.include_router(cards.router, prefix="/decks", tags=["cards"])
router.include_router(health.router, tags=["health"])
