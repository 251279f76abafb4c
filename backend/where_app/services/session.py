"""Session / identity providers."""

from typing import Protocol

from where_app.models.user import SessionUser


class SessionProvider(Protocol):
    def current_user(self) -> SessionUser | None: ...

    def store_points(self, total: float) -> None:
        """Replace the current user's cached points figure."""
        ...


class StaticSession:
    """Holds a single user in-process. Used by scripts and tests."""

    def __init__(self, user: SessionUser | None = None):
        self.user = user

    def current_user(self) -> SessionUser | None:
        return self.user

    def store_points(self, total: float) -> None:
        if self.user:
            self.user.points = total

    def login(self, user: SessionUser) -> SessionUser:
        self.user = user
        return user

    def logout(self):
        self.user = None


class RequestSession:
    """Identity kept in a starlette session dict (``request.session``)."""

    def __init__(self, session: dict):
        self._session = session

    def current_user(self) -> SessionUser | None:
        user_id = self._session.get("user_id")
        if not user_id:
            return None
        return SessionUser(
            id=user_id,
            username=self._session.get("username"),
            is_anonymous=bool(self._session.get("is_anonymous", False)),
            points=float(self._session.get("points", 0.0)),
        )

    def store_points(self, total: float) -> None:
        if self._session.get("user_id"):
            self._session["points"] = total

    def login(self, user: SessionUser):
        self._session.clear()
        self._session.update(
            {
                "user_id": user.id,
                "username": user.username,
                "is_anonymous": user.is_anonymous,
                "points": user.points,
            }
        )

    def logout(self):
        self._session.clear()
