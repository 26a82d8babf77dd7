"""Bearer token helpers built on python-jose."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from question_bank.core.settings import settings


class InvalidTokenError(ValueError):
    """Raised when a bearer token cannot be decoded into a voter id."""


def create_access_token(voter_id: int, expires_minutes: int | None = None) -> str:
    """Return a signed JWT whose subject is the voter id."""
    minutes = expires_minutes if expires_minutes is not None else settings.access_token_expire_minutes
    expire = datetime.now(UTC) + timedelta(minutes=minutes)
    payload = {"sub": str(voter_id), "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_voter_id(token: str) -> int:
    """Decode a bearer token and return the voter id it carries.

    Raises:
        InvalidTokenError: If the signature, expiry or subject is invalid.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise InvalidTokenError("Could not validate credentials") from err

    subject = payload.get("sub")
    if subject is None:
        raise InvalidTokenError("Token has no subject")
    try:
        return int(subject)
    except (TypeError, ValueError) as err:
        raise InvalidTokenError("Token subject is not a voter id") from err
