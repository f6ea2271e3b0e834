"""
Flashcards API: signup/login with cookie sessions and CRUD over decks
and flashcards.

The web application lives in ``flashcards_api.app``; operator commands
live in ``flashcards_api.cli``.
"""

__version__ = "1.0.0"
