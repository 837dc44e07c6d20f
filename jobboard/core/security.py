"""Password hashing helpers."""

import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    """Digest the password so bcrypt always sees 44 bytes, whatever its length."""
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    hashed = bcrypt.hashpw(_prehash(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash in the store.
        return False


# Verified against when no account matches, so a miss costs the same as a
# wrong password.
DUMMY_HASH = hash_password("jobboard-dummy-password")
