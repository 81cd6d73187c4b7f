"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from sunflix.core.config import Settings
from sunflix.core.exceptions import AuthError

# bcrypt only reads the first 72 bytes of its input; longer passwords are refused.
PASSWORD_MAX_BYTES = 72

DEFAULT_BCRYPT_ROUNDS = 10


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Over-long candidates never match."""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    sub: str,
    settings: Settings,
    issued_at: datetime | None = None,
) -> str:
    """Create a JWT access token carrying the user id as sub, plus iat and exp."""
    now = issued_at or datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "iat": now,
        "exp": expire,
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: Settings) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def verify_token(token: str | None, settings: Settings) -> str:
    """Return the user id embedded in a bearer token, or raise AuthError."""
    if not token:
        raise AuthError("No token provided")
    try:
        payload = decode_access_token(token, settings)
    except jwt.PyJWTError:
        raise AuthError("Invalid token")
    sub = payload.get("sub")
    if not sub or not isinstance(sub, str):
        raise AuthError("Invalid token")
    return sub
