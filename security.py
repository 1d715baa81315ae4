"""
Password hashing for manager and client accounts.

Stored format: ``pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>``.
Verification goes through ``PBKDF2HMAC.verify``, which compares in constant time.
"""

import base64
import logging
import secrets
from typing import Optional

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from settings import PASSWORD_HASH_ITERATIONS

logger = logging.getLogger(__name__)

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16
KEY_LENGTH = 32


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=iterations,
    )


def hash_password(password: str, iterations: int = PASSWORD_HASH_ITERATIONS,
                  salt: Optional[bytes] = None) -> str:
    if salt is None:
        salt = secrets.token_bytes(SALT_BYTES)
    digest = _kdf(salt, iterations).derive(password.encode("utf-8"))
    return "$".join((
        ALGORITHM,
        str(iterations),
        base64.b64encode(salt).decode("ascii"),
        base64.b64encode(digest).decode("ascii"),
    ))


def _parse(encoded: str):
    algorithm, iterations, salt_b64, digest_b64 = encoded.split("$")
    if algorithm != ALGORITHM:
        raise ValueError(f"unsupported algorithm {algorithm}")
    rounds = int(iterations)
    if rounds < 1:
        raise ValueError(f"iteration count must be positive, got {rounds}")
    return rounds, base64.b64decode(salt_b64), base64.b64decode(digest_b64)


def verify_password(password: str, encoded: str) -> bool:
    """Check ``password`` against a stored hash. Unrecognised values never verify."""
    try:
        rounds, salt, expected = _parse(encoded)
    except (ValueError, AttributeError) as e:
        logger.warning(f"Stored password is not a recognised hash: {e}")
        return False
    try:
        _kdf(salt, rounds).verify(password.encode("utf-8"), expected)
    except InvalidKey:
        return False
    return True
