"""
Tests for the in-memory character and review repositories
"""

import pytest

from starwars.data import (
    CharacterRepository,
    Droid,
    Episode,
    Human,
    Review,
    ReviewRepository,
    Starship,
    Unit,
    convert_to_unit,
)


@pytest.fixture
def characters():
    return CharacterRepository()


@pytest.fixture
def reviews():
    return ReviewRepository()


class TestCharacterRepository:
    """Tests for CharacterRepository lookups."""

    def test_hero_of_empire_is_luke(self, characters):
        assert characters.get_hero(Episode.EMPIRE).name == "Luke Skywalker"

    @pytest.mark.parametrize("episode", [Episode.NEWHOPE, Episode.JEDI])
    def test_hero_of_other_episodes_is_r2d2(self, characters, episode):
        assert characters.get_hero(episode).name == "R2-D2"

    def test_get_characters_keeps_order_and_skips_unknown(self, characters):
        result = characters.get_characters(["2001", "missing", "1000"])
        assert [c.id for c in result] == ["2001", "1000"]

    def test_get_human_rejects_droid_ids(self, characters):
        assert isinstance(characters.get_human("1000"), Human)
        assert characters.get_human("2000") is None

    def test_get_droid_rejects_human_ids(self, characters):
        assert isinstance(characters.get_droid("2000"), Droid)
        assert characters.get_droid("1000") is None

    def test_unknown_character_is_none(self, characters):
        assert characters.get_character("9999") is None

    def test_get_starship(self, characters):
        starship = characters.get_starship("3000")
        assert isinstance(starship, Starship)
        assert starship.name == "TIE Advanced x1"

    def test_search_is_case_insensitive(self, characters):
        names = [item.name for item in characters.search("SKY")]
        assert names == ["Luke Skywalker"]

    def test_search_includes_starships(self, characters):
        results = characters.search("tie")
        assert len(results) == 1
        assert isinstance(results[0], Starship)

    def test_search_without_match(self, characters):
        assert characters.search("Jar Jar") == []


class TestReviewRepository:
    """Tests for ReviewRepository storage."""

    def test_no_reviews_yields_empty_list(self, reviews):
        assert reviews.get_reviews(Episode.JEDI) == []

    def test_reviews_are_kept_per_episode_in_order(self, reviews):
        first = Review(stars=5, commentary="Great")
        second = Review(stars=3)
        reviews.add_review(Episode.JEDI, first)
        reviews.add_review(Episode.JEDI, second)
        reviews.add_review(Episode.EMPIRE, Review(stars=4))

        assert reviews.get_reviews(Episode.JEDI) == [first, second]
        assert len(reviews.get_reviews(Episode.EMPIRE)) == 1

    def test_get_reviews_returns_a_copy(self, reviews):
        reviews.add_review(Episode.JEDI, Review(stars=1))
        reviews.get_reviews(Episode.JEDI).clear()
        assert len(reviews.get_reviews(Episode.JEDI)) == 1


def test_convert_to_unit():
    assert convert_to_unit(2.0, Unit.METERS) == 2.0
    assert convert_to_unit(1.0, Unit.FOOT) == pytest.approx(3.28084)
