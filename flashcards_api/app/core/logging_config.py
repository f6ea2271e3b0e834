"""
Logging setup shared by the API server and the command line tools.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Handlers are only added if the root logger
has none yet, for example because the test runner or uvicorn configured
it already.  The level of the request access logger is applied on every
call so ``ACCESS_LOG=false`` silences it either way.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# One INFO record per HTTP request, written by ``core.middleware``.
ACCESS_LOGGER_NAME = "flashcards_api.access"


def configure_access_log(enabled: bool = True) -> logging.Logger:
    """Enable or mute the per-request access log and return its logger."""
    access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
    access_logger.setLevel(logging.INFO if enabled else logging.WARNING)
    return access_logger


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = True) -> None:
    """Configure the root logger and the access logger.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"info"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to mirror log records to.  Empty or ``None``
        disables the file handler.
    access_log : bool
        Whether each HTTP request is logged.  The access logger keeps
        INFO records even when the root level is stricter.
    """
    configure_access_log(access_log)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
