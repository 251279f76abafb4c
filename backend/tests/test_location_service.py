"""Engagement actions end to end against the in-memory store."""

import threading

import pytest

from where_app.exceptions import LocationNotFoundError, NotAuthorizedError
from where_app.models.rating import empty_ratings
from where_app.models.user import SessionUser


@pytest.fixture
def location(locations):
    return locations.add_location(name="Old Town", latitude=50.06, longitude=19.94, images=["first.jpg"])


def login(session, user_id: str) -> SessionUser:
    return session.login(SessionUser(id=user_id, username=user_id.title()))


class TestAddLocation:
    def test_creator_is_image_contributor_and_earns_creation_points(self, locations, points, location):
        assert location.created_by == "alice"
        assert [(c.user_id, c.contribution) for c in location.contributors] == [("alice", "image")]
        assert location.ratings == empty_ratings()
        assert location.rating_count == 0
        assert points.get_user_points("alice") == pytest.approx(1.0)
        assert [a.activity_type for a in points.get_user_activities("alice")] == ["create_location"]

    def test_persisted(self, locations, location):
        assert locations.get_location(location.id).name == "Old Town"
        assert len(locations.list_locations()) == 1

    def test_guest_creation_earns_nothing(self, locations, session, ledger):
        session.logout()

        created = locations.add_location(name="Somewhere")

        assert created.created_by == "anonymous"
        assert created.contributors[0].is_anonymous
        assert len(ledger) == 0

    def test_initial_ratings(self, locations):
        created = locations.add_location(name="Rated", ratings={"security": 7.0})

        assert created.ratings["security"] == 7.0
        assert created.ratings["violence"] == 0.0

    def test_initial_images_are_all_shown(self, locations, settings):
        images = [f"{i}.jpg" for i in range(settings.display_image_limit + 3)]

        created = locations.add_location(name="Gallery", images=images)

        assert created.images == images
        assert created.all_images == images

    def test_added_images_cap_the_display_list(self, locations, settings):
        images = [f"{i}.jpg" for i in range(settings.display_image_limit)]
        created = locations.add_location(name="Gallery", images=images)

        updated = locations.add_image(created.id, "extra.jpg")

        assert updated.images == images
        assert updated.all_images == images + ["extra.jpg"]


class TestEngagementActions:
    def test_rating_by_another_user(self, locations, points, session, location):
        login(session, "bob")

        updated = locations.rate_location(location.id, {**empty_ratings(), "security": 6.0})

        assert updated.rating_count == 1
        assert updated.ratings["security"] == 6.0
        assert ("bob", "rating") in [(c.user_id, c.contribution) for c in updated.contributors]
        # 0.1 for rating + 0.07 engagement share as the only non-creator contributor
        assert points.get_user_points("bob") == pytest.approx(0.17)
        assert points.get_user_points("alice") == pytest.approx(1.03)
        assert session.current_user().points == pytest.approx(0.17)

    def test_repeat_ratings_keep_one_contributor(self, locations, session, location):
        login(session, "bob")
        locations.rate_location(location.id, {**empty_ratings(), "security": 2.0})
        updated = locations.rate_location(location.id, {**empty_ratings(), "security": 4.0})

        assert updated.rating_count == 2
        assert updated.ratings["security"] == pytest.approx(3.0)
        assert sum(1 for c in updated.contributors if c.contribution == "rating") == 1

    def test_comment_pays_explicit_author(self, locations, points, location):
        comment = locations.add_comment(location.id, "Lovely square", user_id="carol", username="Carol")

        stored = locations.get_location(location.id)
        assert stored.comments[0].id == comment.id
        assert comment.is_anonymous is False
        assert ("carol", "comment") in [(c.user_id, c.contribution) for c in stored.contributors]
        assert points.get_user_points("carol") == pytest.approx(0.17)

    def test_comment_defaults_to_session_user(self, locations, session, location):
        login(session, "dave")

        comment = locations.add_comment(location.id, "Busy at night")

        assert comment.user_id == "dave"
        assert comment.username == "Dave"

    def test_verification(self, locations, points, session, location):
        login(session, "bob")
        locations.verify_location(location.id)
        login(session, "carol")
        updated = locations.verify_location(location.id)

        assert updated.verified
        assert updated.verification_count == 2
        assert [c.user_id for c in updated.contributors if c.contribution == "verification"] == ["bob", "carol"]
        # bob: 0.1 + 0.07 from his own verification + 0.035 from carol's
        assert points.get_user_points("bob") == pytest.approx(0.205)

    def test_add_image(self, locations, session, location):
        login(session, "bob")

        updated = locations.add_image(location.id, "second.jpg")

        assert updated.all_images == ["first.jpg", "second.jpg"]
        assert updated.images == ["first.jpg", "second.jpg"]
        assert ("bob", "image") in [(c.user_id, c.contribution) for c in updated.contributors]

    def test_creator_actions_do_not_make_extra_shares(self, locations, points, location):
        locations.add_image(location.id, "second.jpg")

        # 1.0 creation + 0.1 image + 0.03 creator share, remainder unattributed
        assert points.get_user_points("alice") == pytest.approx(1.13)

    def test_cached_total_tracks_ledger(self, locations, points, session, alice, location):
        locations.rate_location(location.id, empty_ratings())
        locations.add_comment(location.id, "hi", user_id="bob", username="Bob")
        locations.verify_location(location.id)
        points.like_image("erin", location.id, "first.jpg")
        points.refresh_cached_total("alice")

        assert alice.points == pytest.approx(points.get_user_points("alice"))


class TestFailures:
    @pytest.mark.parametrize(
        "action, args",
        [
            ("rate_location", (empty_ratings(),)),
            ("add_comment", ("hello",)),
            ("verify_location", ()),
            ("add_image", ("x.jpg",)),
            ("remove_image", ("x.jpg",)),
        ],
    )
    def test_unknown_location(self, locations, ledger, action, args):
        with pytest.raises(LocationNotFoundError):
            getattr(locations, action)("loc_missing", *args)
        assert len(ledger) == 0

    def test_only_creator_removes_images(self, locations, session, location):
        login(session, "bob")

        with pytest.raises(NotAuthorizedError):
            locations.remove_image(location.id, "first.jpg")
        assert locations.get_location(location.id).all_images == ["first.jpg"]

    def test_creator_removes_image(self, locations, points, location):
        before = points.get_user_points("alice")

        updated = locations.remove_image(location.id, "first.jpg")

        assert updated.all_images == []
        assert updated.images == []
        assert points.get_user_points("alice") == before

    def test_unsaved_changes_do_not_leak(self, locations, location):
        location.name = "Renamed"

        assert locations.get_location(location.id).name == "Old Town"


class TestConcurrency:
    def test_parallel_ratings_are_not_lost(self, locations, location):
        submissions = 40
        barrier = threading.Barrier(8)

        def worker(n):
            barrier.wait()
            for _ in range(submissions // 8):
                locations.rate_location(location.id, {**empty_ratings(), "security": float(n)})

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        stored = locations.get_location(location.id)
        assert stored.rating_count == submissions
        assert stored.ratings["security"] == pytest.approx(sum(range(8)) * 5 / submissions)
