"""Helpers for issuing and validating access tokens."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from school_alerts.config import get_settings

ALGORITHM = "HS256"


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    """Sign ``data`` into a bearer token.

    Tokens are normally issued by the platform's auth service; this helper
    shares its signing scheme for tooling and tests.
    """

    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


__all__ = ["ALGORITHM", "create_access_token", "decode_access_token"]
