"""Domain errors surfaced to callers."""


class WhereError(Exception):
    """Base class for errors raised by the core."""


class LocationNotFoundError(WhereError):
    """Raised when a mutating operation references an unknown location."""

    def __init__(self, location_id: str):
        self.location_id = location_id
        super().__init__(f"Location not found: {location_id}")


class NotAuthorizedError(WhereError):
    """Raised when the acting user may not perform the mutation."""
