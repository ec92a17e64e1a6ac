"""Password hashing (bcrypt with SHA-256 pre-hash).

Used for account passwords and for refresh tokens before persistence.
Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a
fixed-length input so long secrets are not silently truncated. Refresh
tokens are JWTs whose first 72 bytes are shared by every token minted for
the same account, so without the pre-hash a rotated-away token would still
verify against the new hash.
"""

import base64
import hashlib

import bcrypt

from condo.core.config import get_settings


def _prehash(secret: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(secret.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        result = bcrypt.checkpw(
            _prehash(plain_password),
            hashed_password.encode("utf-8"),
        )
        return bool(result)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(_prehash(password), salt)
    return hashed.decode("utf-8")
