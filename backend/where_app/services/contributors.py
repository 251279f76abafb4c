"""Contributor tracking on locations."""

import logging

from where_app.config import get_settings
from where_app.models.location import CONTRIBUTION_KINDS, Contributor, Location
from where_app.models.user import SessionUser

logger = logging.getLogger(__name__)


def add_contributor(location: Location, user: SessionUser | None, kind: str) -> bool:
    """Credit ``user`` with a ``kind`` contribution on ``location``.

    Records are unique per (user_id, kind); a repeat is silently ignored.
    ``user=None`` is credited as the anonymous identity.

    Returns:
        True if a new Contributor record was appended
    """
    if kind not in CONTRIBUTION_KINDS:
        raise ValueError(f"Unknown contribution kind: {kind}")

    if user is None:
        user_id, username, is_anonymous = get_settings().anonymous_user_id, None, True
    else:
        user_id, username, is_anonymous = user.id, user.username, user.is_anonymous

    if location.has_contribution(user_id, kind):
        return False

    location.contributors.append(
        Contributor(
            user_id=user_id,
            username=username,
            is_anonymous=is_anonymous,
            contribution=kind,
        )
    )
    logger.debug("Recorded %s contributor %s on %s", kind, user_id, location.id)
    return True
