"""
Password hashing for user accounts.

Stored form is "salt:hash", where hash is PBKDF2-SHA256 of the password
with a per-user random salt. Only UserService touches these; the hash
never leaves the users collection.
"""

import hashlib
import secrets

PBKDF2_ALGORITHM = "sha256"
PBKDF2_ITERATIONS = 100_000
SALT_BYTES = 32


def _derive(password: str, salt: str) -> str:
    return hashlib.pbkdf2_hmac(
        PBKDF2_ALGORITHM,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        iterations=PBKDF2_ITERATIONS,
    ).hex()


def hash_password(password: str) -> str:
    """Hash a new account password for storage."""
    salt = secrets.token_hex(SALT_BYTES)
    return f"{salt}:{_derive(password, salt)}"


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a login attempt against a stored hash.

    A malformed stored value (no separator, not a string) never matches.
    """
    try:
        salt, stored = password_hash.split(":")
    except (ValueError, AttributeError):
        return False
    return secrets.compare_digest(_derive(password, salt), stored)
