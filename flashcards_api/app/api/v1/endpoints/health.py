"""
Liveness endpoint for load balancers and uptime checks.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from flashcards_api.app.api.deps import get_database
from flashcards_api.app.core.config import settings
from flashcards_api.app.core.db import Database

router = APIRouter()


@router.get("/health")
async def health(database: Database = Depends(get_database)) -> Dict[str, str]:
    """Report the API version after a trivial query on the database."""
    with database.cursor() as cursor:
        cursor.execute("SELECT 1")
    return {"status": "ok", "version": settings.api_version}
