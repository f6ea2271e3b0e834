"""
Main entrypoint for the Flashcards API.

``create_app`` assembles the FastAPI application: logging, middleware,
error handlers and the versioned routers.  The database handle is
created here (or supplied by the caller, which is how the tests point
the app at a temporary file) and migrated when the application starts.
Serve it with any ASGI server, e.g.::

    uvicorn flashcards_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import Database
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import setup_middleware

logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[Database]
        Database the services will use.  Defaults to
        ``settings.database_url``.
    """
    setup_logging(settings.log_level, settings.log_file or None, access_log=settings.access_log)
    database = database or Database(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        version = app.state.database.init()
        logger.info("Database %s ready at schema version %s", app.state.database.path, version)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database = database

    setup_middleware(app)
    register_exception_handlers(app)
    app.include_router(v1_router, prefix="/api/v1")
    return app


# Instantiated at import time so ASGI servers can find it.
app = create_app()
