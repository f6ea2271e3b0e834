"""
Environment driven configuration.

``Settings`` is a plain dataclass whose defaults are read from
environment variables when this module is first imported, so variables
must be exported before the application is imported.  Every field has a
usable default which makes the API runnable out of the box for local
development; override ``SECRET_KEY`` in any shared deployment.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Flashcards API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file written next to the console output.
    log_file: str = os.getenv("LOG_FILE", "")
    # One line per HTTP request on the ``flashcards_api.access`` logger.
    access_log: bool = _env_flag("ACCESS_LOG", "true")

    secret_key: str = os.getenv("SECRET_KEY", "change_me")

    # Session cookie issued on login.  The web client expects this name.
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "webToken")
    session_max_age_seconds: int = int(os.getenv("SESSION_MAX_AGE_SECONDS", str(12 * 60 * 60)))
    cookie_secure: bool = _env_flag("COOKIE_SECURE")

    # SQLite database file.  Relative paths are resolved against the
    # working directory of the process by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "flashcards.db")

    # Comma separated list of allowed origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
