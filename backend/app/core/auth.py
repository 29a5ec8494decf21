"""Password hashing and access tokens (JWT, HS256 or RS256 per settings)."""

from datetime import datetime, timezone, timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from app.config import settings

BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """bcrypt hash of the first 72 bytes of password (bcrypt ignores the rest)."""
    hashed = bcrypt.hashpw(password.encode("utf-8")[:BCRYPT_MAX_BYTES], bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES], password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def _jwt_keys() -> tuple[str, str, str]:
    """(signing key, verification key, algorithm)."""
    if settings.use_rs256:
        return settings.jwt_private_key.strip(), settings.jwt_public_key.strip(), "RS256"
    return settings.secret_key, settings.secret_key, settings.jwt_algorithm


def create_access_token(user_id: int, username: str, role: str | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)
    payload: dict[str, Any] = {"sub": str(user_id), "username": username, "exp": expire}
    if role:
        payload["role"] = role
    signing_key, _, algorithm = _jwt_keys()
    token = jwt.encode(payload, signing_key, algorithm=algorithm)
    return token if isinstance(token, str) else token.decode("utf-8")


def decode_token(token: str) -> dict[str, Any]:
    """Verified claims. Raises JWTError on a bad signature or an expired token."""
    _, verify_key, algorithm = _jwt_keys()
    return jwt.decode(token, verify_key, algorithms=[algorithm])


def user_id_from_token(token: str) -> int:
    """User id from the `sub` claim. Raises JWTError when the token or its subject is invalid."""
    sub = decode_token(token).get("sub")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise JWTError("Token has no valid subject")
