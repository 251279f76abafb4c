"""Running average and contributor tracking on rating submission."""

import pytest

from where_app.models.location import Location
from where_app.models.rating import RATING_AXES, empty_ratings
from where_app.models.user import SessionUser
from where_app.services.contributors import add_contributor
from where_app.services.rating_aggregator import submit_rating


def vector(**overrides) -> dict[str, float]:
    values = empty_ratings()
    values.update(overrides)
    return values


@pytest.fixture
def location() -> Location:
    return Location(id="loc_1", created_by="alice")


@pytest.fixture
def bob() -> SessionUser:
    return SessionUser(id="bob", username="Bob")


class TestRunningAverage:
    def test_single_rating_replaces_zero_vector(self, location, bob):
        submit_rating(location, vector(security=8, violence=2), bob)

        assert location.rating_count == 1
        assert location.ratings["security"] == 8
        assert location.ratings["violence"] == 2
        assert location.ratings["welcoming"] == 0

    def test_mean_of_many_submissions(self, location, bob):
        submissions = [
            {axis: float(i + n) for i, axis in enumerate(RATING_AXES)}
            for n in (1, 4, 7, 2, 10)
        ]
        for submission in submissions:
            submit_rating(location, submission, bob)

        assert location.rating_count == len(submissions)
        for axis in RATING_AXES:
            expected = sum(s[axis] for s in submissions) / len(submissions)
            assert location.ratings[axis] == pytest.approx(expected)

    def test_out_of_range_values_are_averaged(self, location, bob):
        submit_rating(location, vector(security=20), bob)
        submit_rating(location, vector(security=-4), bob)

        assert location.ratings["security"] == pytest.approx(8)

    def test_initial_vector_is_overwritten_by_first_rating(self, bob):
        location = Location(id="loc_2", created_by="alice", ratings=vector(security=5))

        submit_rating(location, vector(security=9), bob)

        assert location.ratings["security"] == 9

    def test_missing_axis_is_rejected(self, location, bob):
        incomplete = vector()
        del incomplete["solicitation"]

        with pytest.raises(ValueError, match="solicitation"):
            submit_rating(location, incomplete, bob)
        assert location.rating_count == 0

    def test_returns_the_same_location(self, location, bob):
        assert submit_rating(location, vector(), bob) is location


class TestContributors:
    def test_rating_adds_one_contributor_per_user(self, location, bob):
        submit_rating(location, vector(security=3), bob)
        submit_rating(location, vector(security=5), bob)

        rating_records = [c for c in location.contributors if c.contribution == "rating"]
        assert len(rating_records) == 1
        assert rating_records[0].user_id == "bob"
        assert rating_records[0].username == "Bob"

    def test_same_user_may_contribute_different_kinds(self, location, bob):
        assert add_contributor(location, bob, "comment") is True
        assert add_contributor(location, bob, "image") is True
        assert add_contributor(location, bob, "comment") is False

        assert [c.contribution for c in location.contributors] == ["comment", "image"]

    def test_anonymous_contributor(self, location):
        add_contributor(location, None, "verification")

        contributor = location.contributors[0]
        assert contributor.user_id == "anonymous"
        assert contributor.username is None
        assert contributor.is_anonymous is True

    def test_unknown_kind(self, location, bob):
        with pytest.raises(ValueError):
            add_contributor(location, bob, "like")
