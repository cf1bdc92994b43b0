"""Unit tests for the Profile entity and ProfileChanges."""

from datetime import datetime, timedelta

from domain.entities.profile import Profile, ProfileChanges


class TestProfile:
    def test_updated_at_never_precedes_created_at(self):
        created = datetime(2026, 1, 1, 12, 0)
        profile = Profile(
            name="John Doe",
            email="john@example.com",
            created_at=created,
            updated_at=created - timedelta(seconds=1),
        )

        assert profile.updated_at == created

    def test_id_is_unassigned_until_stored(self):
        assert Profile(name="John Doe", email="john@example.com").id is None


class TestProfileChanges:
    def test_nothing_provided_by_default(self):
        assert ProfileChanges().provided() == {}

    def test_none_is_not_provided(self):
        assert ProfileChanges(name="Jane", bio=None).provided() == {"name": "Jane"}

    def test_empty_string_is_provided(self):
        assert ProfileChanges(website="").provided() == {"website": ""}
