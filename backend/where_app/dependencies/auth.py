"""Authentication dependencies for FastAPI routes."""

from fastapi import Depends, HTTPException

from where_app.models.user import SessionUser
from where_app.services.session import RequestSession
from where_app.dependencies.services import get_session


def get_current_user(session: RequestSession = Depends(get_session)) -> SessionUser | None:
    """Return the session user or None."""
    return session.current_user()


def require_user_api(session: RequestSession = Depends(get_session)) -> SessionUser:
    """Return the session user or raise 401."""
    user = session.current_user()
    if not user:
        raise HTTPException(status_code=401, detail="Login required")
    return user
