"""Start the Flashcards API server.

Convenience entry point for hosts where only a single Python file can be
configured as the start command.  Host and port come from the
``API_HOST`` and ``API_PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``).

Usage:
    python run.py
"""
import os
import sys

from flashcards_api.cli import main

if __name__ == "__main__":
    sys.exit(
        main([
            "serve",
            "--host", os.getenv("API_HOST", "0.0.0.0"),
            "--port", os.getenv("API_PORT", "8000"),
        ])
    )
