"""Operator commands for the Flashcards API.

Usage::

    python -m flashcards_api serve --host 0.0.0.0 --port 8000
    python -m flashcards_api reset-password --email ann@example.com
    python -m flashcards_api create-token --user-id 1 --days 30

``reset-password`` never reads or prints the existing hash; it only
stores a new one.  When ``--password`` is omitted the new password is
prompted for without echo.  ``--db`` overrides ``DATABASE_URL`` for the
database commands.
"""

import argparse
import getpass
import logging
import sys
from typing import List, Optional

from flashcards_api.app.core.config import settings
from flashcards_api.app.core.db import Database
from flashcards_api.app.core.logging_config import setup_logging
from flashcards_api.app.core.security import create_session_token, hash_password

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_INPUT = 1
EXIT_NOT_FOUND = 2


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "flashcards_api.app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return EXIT_OK


def _reset_password(args: argparse.Namespace) -> int:
    new_password = args.password or getpass.getpass("Enter NEW password: ")
    if not new_password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        return EXIT_BAD_INPUT

    database = Database(args.db or settings.database_url)
    database.init()
    with database.cursor() as cursor:
        cursor.execute(
            "UPDATE login SET hash = ? WHERE email = ?",
            (hash_password(new_password), args.email),
        )
        updated = cursor.rowcount
    if not updated:
        print(f"[!] No user found with email: {args.email}", file=sys.stderr)
        return EXIT_NOT_FOUND
    logger.info("Password reset for %s", args.email)
    print(f"[+] Password updated for user: {args.email}")
    return EXIT_OK


def _create_token(args: argparse.Namespace) -> int:
    if args.days <= 0:
        print("[!] --days must be positive.", file=sys.stderr)
        return EXIT_BAD_INPUT
    print(create_session_token(args.user_id, expires_delta=args.days * 24 * 60 * 60))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flashcards-api", description="Flashcards API tools.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the API with uvicorn.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes (development).")
    serve.set_defaults(handler=_serve)

    reset = subparsers.add_parser("reset-password", help="Store a new password for a user.")
    reset.add_argument("--db", help="SQLite file; defaults to DATABASE_URL.")
    reset.add_argument("--email", required=True, help="Email of the user to update.")
    reset.add_argument("--password", help="New password. Prompted for when omitted.")
    reset.set_defaults(handler=_reset_password)

    token = subparsers.add_parser("create-token", help="Print a session token for a user id.")
    token.add_argument("--user-id", type=int, required=True)
    token.add_argument("--days", type=int, default=1, help="Token lifetime in days.")
    token.set_defaults(handler=_create_token)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging(settings.log_level, settings.log_file or None, access_log=settings.access_log)
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
