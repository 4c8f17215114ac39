"""FastAPI dependency utilities."""

from datetime import datetime

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from school_alerts.application.use_cases.alerts import AlertPolicy
from school_alerts.config import get_settings
from school_alerts.domain.entities import User
from school_alerts.infrastructure.database import get_db
from school_alerts.infrastructure.repositories import UserRepository
from school_alerts.infrastructure.security import decode_access_token
from school_alerts.utils import now_in_app_timezone

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def _credentials_exception(detail: str = "Invalid credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_exception() from exc

    subject = payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise _credentials_exception() from exc

    user = UserRepository(db).get(user_id)
    if user is None:
        raise _credentials_exception("User not found")
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user from the provided token."""

    return resolve_current_user(token, db)


def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Ensure the authenticated user is active."""

    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Inactive user",
        )
    return current_user


def get_current_time() -> datetime:
    """Return the single "now" used for every rule evaluated in a request."""

    return now_in_app_timezone()


def get_alert_policy() -> AlertPolicy:
    return AlertPolicy.from_settings(get_settings())
