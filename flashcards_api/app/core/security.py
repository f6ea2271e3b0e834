"""
Session tokens and password hashing.

Session tokens are compact JWTs (``header.payload.signature``, each
part base64url encoded without padding) signed with HMAC-SHA256 and the
application ``secret_key``.  Every token carries an ``exp`` claim as a
UNIX timestamp; ``decode_access_token`` rejects expired or tampered
tokens by returning ``None``.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16 byte salt.
The stored form is ``"<salt hex>$<digest hex>"``.  ``DUMMY_PASSWORD_HASH``
is a well formed hash nobody knows the password of; login verifies
against it when the email is unknown so that an unknown email and a
wrong password take the same time.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from .config import settings

PBKDF2_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes) -> bytes:
    return hmac.new(settings.secret_key.encode("utf-8"), message, hashlib.sha256).digest()


def _encode_segment(value: Dict[str, Any]) -> str:
    return _b64_url_encode(json.dumps(value, separators=(",", ":")).encode("utf-8"))


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Return a signed token for ``claims``.

    Parameters
    ----------
    claims : dict
        Claims to embed, typically ``{"sub": "<user id>"}``.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to the session cookie max age so
        the token and the cookie carrying it expire together.
    """
    payload = dict(claims)
    lifetime = expires_delta or settings.session_max_age_seconds
    payload["exp"] = int(time.time()) + lifetime
    header = {"alg": "HS256", "typ": "JWT"}
    signing_input = f"{_encode_segment(header)}.{_encode_segment(payload)}"
    signature = _b64_url_encode(_sign(signing_input.encode("utf-8")))
    return f"{signing_input}.{signature}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid token, ``None`` otherwise."""
    try:
        header_b64, payload_b64, signature_b64 = token.split(".")
        expected = _sign(f"{header_b64}.{payload_b64}".encode("utf-8"))
        if not hmac.compare_digest(expected, _b64_url_decode(signature_b64)):
            return None
        claims = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        expires_at = int(claims["exp"])
    except (ValueError, TypeError, KeyError):
        # Wrong segment count, bad base64/JSON or a missing ``exp``.
        return None
    if expires_at < int(time.time()):
        return None
    return claims


def create_session_token(user_id: int, expires_delta: Optional[int] = None) -> str:
    """Token identifying ``user_id``; used for the login cookie and body."""
    return create_access_token({"sub": str(user_id)}, expires_delta=expires_delta)


def hash_password(password: str) -> str:
    """Hash ``password`` with a fresh random salt."""
    salt = os.urandom(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${digest.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a stored ``salt$digest`` string.

    Malformed stored values never match.
    """
    try:
        salt_hex, digest_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored = bytes.fromhex(digest_hex)
    except (AttributeError, ValueError):
        return False
    digest = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(digest, stored)


DUMMY_PASSWORD_HASH = hash_password(os.urandom(16).hex())
