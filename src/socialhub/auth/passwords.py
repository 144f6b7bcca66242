from __future__ import annotations

from passlib.context import CryptContext

_pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    # passlib raises ValueError on a malformed stored hash; treat that as a mismatch.
    try:
        return _pwd_context.verify(plain, hashed)
    except ValueError:
        return False


# --- Module Notes -----------------------------------------------------------
# Stored hashes use the modular crypt format, e.g. $pbkdf2-sha256$...
