"""Session user identity with a cached points figure."""

from dataclasses import dataclass


@dataclass
class SessionUser:
    id: str
    username: str | None = None
    is_anonymous: bool = False
    points: float = 0.0  # cached; the ledger is authoritative
