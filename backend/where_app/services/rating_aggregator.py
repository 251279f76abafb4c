"""Rating aggregator — keeps per-axis running averages without storing submissions."""

import logging
from typing import Mapping

from where_app.models.location import Location
from where_app.models.rating import RATING_AXES
from where_app.models.user import SessionUser
from where_app.services.contributors import add_contributor

logger = logging.getLogger(__name__)


def _running_average(current: float, count: int, value: float) -> float:
    """Mean of ``count`` samples averaging ``current`` plus one more sample.

    Formula: (current * count + value) / (count + 1)
    """
    return (current * count + value) / (count + 1)


def submit_rating(location: Location, new_ratings: Mapping[str, float], user: SessionUser | None) -> Location:
    """Fold one rating vector into the location's averages.

    Every axis in RATING_AXES must be present. Values are not range checked
    or clamped. Mutates and returns ``location``; the caller saves it.
    """
    missing = [axis for axis in RATING_AXES if axis not in new_ratings]
    if missing:
        raise ValueError(f"Rating is missing axes: {', '.join(missing)}")

    count = location.rating_count
    current = location.ratings
    location.ratings = {
        axis: _running_average(float(current.get(axis, 0.0)), count, float(new_ratings[axis]))
        for axis in RATING_AXES
    }
    location.rating_count = count + 1

    add_contributor(location, user, "rating")

    logger.info("Location %s rated (%d ratings)", location.id, location.rating_count)
    return location
