"""Credential hashing utilities built on PBKDF2-HMAC-SHA256."""
from __future__ import annotations

import hashlib
import hmac
import secrets

from morse_messenger.core.settings import settings

_ALGORITHM = "pbkdf2_sha256"
_SALT_BYTES = 16


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str, *, iterations: int | None = None) -> str:
    """Return a salted hash of ``password``.

    The result is self-describing: ``pbkdf2_sha256$<iterations>$<salt>$<hash>``
    with salt and hash hex-encoded, so the work factor can change without
    invalidating stored credentials.
    """
    rounds = iterations or settings.password_hash_iterations
    salt = secrets.token_bytes(_SALT_BYTES)
    digest = _derive(password, salt, rounds)
    return f"{_ALGORITHM}${rounds}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored_hash: str) -> bool:
    """Return True if ``password`` matches ``stored_hash``."""
    try:
        algorithm, rounds, salt_hex, digest_hex = stored_hash.split("$")
        iterations = int(rounds)
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(digest_hex)
    except ValueError:
        return False
    if algorithm != _ALGORITHM or iterations < 1:
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), expected)
