"""Security utilities (password hashing, opaque bearer tokens)."""

import secrets

from passlib.context import CryptContext

password_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)


def new_token(nbytes: int = 32) -> str:
    """Random URL-safe token for the Authorization header."""
    return secrets.token_urlsafe(nbytes)
