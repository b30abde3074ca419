"""
In-memory repositories for characters, starships and reviews
"""

from ..logging import get_logger
from .models import Character, Droid, Episode, Human, Review, Starship

logger = get_logger(__name__)

ALL_EPISODES = [Episode.NEWHOPE, Episode.EMPIRE, Episode.JEDI]


def _seed_characters() -> list[Character]:
    return [
        Human(
            id="1000",
            name="Luke Skywalker",
            friends=["1002", "1003", "2000", "2001"],
            appears_in=list(ALL_EPISODES),
            home_planet="Tatooine",
            height=1.72,
        ),
        Human(
            id="1001",
            name="Darth Vader",
            friends=["1004"],
            appears_in=list(ALL_EPISODES),
            home_planet="Tatooine",
            height=2.02,
        ),
        Human(
            id="1002",
            name="Han Solo",
            friends=["1000", "1003", "2001"],
            appears_in=list(ALL_EPISODES),
            height=1.8,
        ),
        Human(
            id="1003",
            name="Leia Organa",
            friends=["1000", "1002", "2000", "2001"],
            appears_in=list(ALL_EPISODES),
            home_planet="Alderaan",
            height=1.5,
        ),
        Human(
            id="1004",
            name="Wilhuff Tarkin",
            friends=["1001"],
            appears_in=[Episode.NEWHOPE],
            height=1.8,
        ),
        Droid(
            id="2000",
            name="C-3PO",
            friends=["1000", "1002", "1003", "2001"],
            appears_in=list(ALL_EPISODES),
            primary_function="Protocol",
            height=1.67,
        ),
        Droid(
            id="2001",
            name="R2-D2",
            friends=["1000", "1002", "1003"],
            appears_in=list(ALL_EPISODES),
            primary_function="Astromech",
            height=1.09,
        ),
    ]


class CharacterRepository:
    """
    Read-only store of the canonical characters and starships.

    Lookups by id return None for unknown ids rather than raising.
    """

    def __init__(self):
        self._characters: dict[str, Character] = {c.id: c for c in _seed_characters()}
        self._starships: dict[str, Starship] = {
            "3000": Starship(id="3000", name="TIE Advanced x1", length=9.2),
        }

    def get_hero(self, episode: Episode) -> Character:
        """Luke is the hero of The Empire Strikes Back, R2-D2 of every other episode."""
        if episode == Episode.EMPIRE:
            return self._characters["1000"]
        return self._characters["2001"]

    def get_character(self, id: str) -> Character | None:
        return self._characters.get(id)

    def get_characters(self, ids: list[str]) -> list[Character]:
        """Get characters in the order of ``ids``, skipping unknown ids."""
        return [self._characters[id] for id in ids if id in self._characters]

    def get_human(self, id: str) -> Human | None:
        character = self._characters.get(id)
        return character if isinstance(character, Human) else None

    def get_droid(self, id: str) -> Droid | None:
        character = self._characters.get(id)
        return character if isinstance(character, Droid) else None

    def get_starship(self, id: str) -> Starship | None:
        return self._starships.get(id)

    def search(self, text: str) -> list[Character | Starship]:
        """Case-insensitive substring search over character and starship names."""
        needle = text.lower()
        results: list[Character | Starship] = [
            character for character in self._characters.values() if needle in character.name.lower()
        ]
        results.extend(
            starship for starship in self._starships.values() if needle in starship.name.lower()
        )
        return results


class ReviewRepository:
    """Append-only store of reviews per episode."""

    def __init__(self):
        self._reviews: dict[Episode, list[Review]] = {}

    def add_review(self, episode: Episode, review: Review) -> Review:
        self._reviews.setdefault(episode, []).append(review)
        logger.debug("Review stored", episode=episode.value, stars=review.stars)
        return review

    def get_reviews(self, episode: Episode) -> list[Review]:
        return list(self._reviews.get(episode, []))
