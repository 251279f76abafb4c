"""Location actions, the mutations behind every engagement event.

Each action follows the same cycle: load the location under its lock,
mutate, save, award the actor's points, fan out engagement points to the
location's creator and contributors, then refresh the session user's
cached total.
"""

import logging
from typing import Mapping

from where_app.config import Settings, get_settings
from where_app.exceptions import LocationNotFoundError, NotAuthorizedError
from where_app.models.location import Comment, Location, new_comment_id, new_location_id
from where_app.models.rating import empty_ratings
from where_app.models.user import SessionUser
from where_app.services.contributors import add_contributor
from where_app.services.points_service import PointsService
from where_app.services.rating_aggregator import submit_rating

logger = logging.getLogger(__name__)


class LocationService:
    def __init__(self, points: PointsService, settings: Settings | None = None):
        self.points = points
        self.store = points.store
        self.session = points.session
        self.locks = points.locks
        self.settings = settings or get_settings()

    # --- Queries ---

    def get_location(self, location_id: str) -> Location:
        location = self.store.get_location(location_id)
        if not location:
            raise LocationNotFoundError(location_id)
        return location

    def list_locations(self) -> list[Location]:
        return self.store.list_locations()

    # --- Mutations ---

    def add_location(
        self,
        name: str | None = None,
        description: str = "",
        latitude: float = 0.0,
        longitude: float = 0.0,
        images: list[str] | None = None,
        ratings: Mapping[str, float] | None = None,
        created_by: str | None = None,
    ) -> Location:
        """Create a location. The creator is credited with an image contribution."""
        user = self.session.current_user()
        creator_id = created_by or (user.id if user else self.settings.anonymous_user_id)
        images = list(images or [])

        location = Location(
            id=new_location_id(),
            created_by=creator_id,
            name=name or "Unnamed Location",
            description=description,
            latitude=latitude,
            longitude=longitude,
            # Initial images are all shown; the display cap applies from add_image on
            images=list(images),
            all_images=list(images),
            ratings={**empty_ratings(), **dict(ratings)} if ratings else empty_ratings(),
        )
        creator = SessionUser(
            id=creator_id,
            username=user.username if user else None,
            is_anonymous=user.is_anonymous if user else True,
        )
        add_contributor(location, creator, "image")
        self.store.save_location(location)
        logger.info("Created location %s (%s) by %s", location.id, location.name, creator_id)

        if user:
            self.points.add_points(user.id, location.id, "create_location", self.settings.create_location_points)
            self.points.refresh_cached_total(user.id)
        return location

    def add_comment(
        self,
        location_id: str,
        text: str,
        user_id: str | None = None,
        username: str | None = None,
        is_anonymous: bool | None = None,
    ) -> Comment:
        """Post a comment. The author is the session user unless given explicitly."""
        user = self.session.current_user()
        if user_id:
            author = SessionUser(
                id=user_id,
                username=username,
                is_anonymous=bool(is_anonymous) if is_anonymous is not None else username is None,
            )
        elif user:
            author = user
        else:
            author = SessionUser(id=self.settings.anonymous_user_id, is_anonymous=True)

        with self.locks.hold(location_id):
            location = self.get_location(location_id)
            comment = Comment(
                id=new_comment_id(),
                user_id=author.id,
                username=author.username,
                is_anonymous=author.is_anonymous,
                text=text,
            )
            location.comments.append(comment)
            add_contributor(location, author, "comment")
            self.store.save_location(location)

            # Comments always pay their author, session or not
            self.points.add_points(author.id, location_id, "comment", self.settings.action_points)
            self._after_engagement(location_id)
        return comment

    def rate_location(self, location_id: str, ratings: Mapping[str, float]) -> Location:
        user = self.session.current_user()
        with self.locks.hold(location_id):
            location = submit_rating(self.get_location(location_id), ratings, user)
            self.store.save_location(location)
            if user:
                self.points.add_points(user.id, location_id, "rate_location", self.settings.action_points)
            self._after_engagement(location_id)
        return location

    def verify_location(self, location_id: str) -> Location:
        """Confirm presence at a location."""
        user = self.session.current_user()
        with self.locks.hold(location_id):
            location = self.get_location(location_id)
            location.verified = True
            location.verification_count += 1
            add_contributor(location, user, "verification")
            self.store.save_location(location)
            logger.info("Location %s verified (%d)", location_id, location.verification_count)

            if user:
                self.points.add_points(user.id, location_id, "verify_location", self.settings.action_points)
            self._after_engagement(location_id)
        return location

    def add_image(self, location_id: str, image_url: str) -> Location:
        user = self.session.current_user()
        with self.locks.hold(location_id):
            location = self.get_location(location_id)
            location.all_images.append(image_url)
            location.images = location.all_images[: self.settings.display_image_limit]
            add_contributor(location, user, "image")
            self.store.save_location(location)

            if user:
                self.points.add_points(user.id, location_id, "add_image", self.settings.action_points)
            self._after_engagement(location_id)
        return location

    def remove_image(self, location_id: str, image_url: str) -> Location:
        """Remove an image. Only the location's creator may do this; points are untouched."""
        user = self.session.current_user()
        with self.locks.hold(location_id):
            location = self.get_location(location_id)
            if not user or user.id != location.created_by:
                raise NotAuthorizedError("Only the creator can remove images")

            location.all_images = [img for img in location.all_images if img != image_url]
            location.images = location.all_images[: self.settings.display_image_limit]
            self.store.save_location(location)
        logger.info("Removed image from %s", location_id)
        return location

    def _after_engagement(self, location_id: str):
        self.points.distribute_engagement_points(location_id, self.settings.engagement_points)
        user = self.session.current_user()
        if user:
            self.points.refresh_cached_total(user.id)
