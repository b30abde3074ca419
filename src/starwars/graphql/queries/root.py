"""
Root GraphQL query definitions
"""

import strawberry

from ...data import models
from ...data.repositories import CharacterRepository, ReviewRepository
from ..context import get_service
from ..types.character import Character, Droid, Human, to_character
from ..types.episode import Episode
from ..types.review import Review
from ..types.starship import SearchResult, Starship


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def hero(self, info: strawberry.Info, episode: Episode = Episode.NEWHOPE) -> Character:
        """Get the hero of an episode."""
        repository = get_service(info, CharacterRepository)
        return to_character(repository.get_hero(episode))

    @strawberry.field
    def character(self, info: strawberry.Info, character_ids: list[str]) -> list[Character]:
        """Get characters by ID; unknown IDs are skipped."""
        repository = get_service(info, CharacterRepository)
        return [to_character(c) for c in repository.get_characters(character_ids)]

    @strawberry.field
    def human(self, info: strawberry.Info, id: str) -> Human | None:
        """Get a human by ID."""
        human = get_service(info, CharacterRepository).get_human(id)
        return Human.from_model(human) if human else None

    @strawberry.field
    def droid(self, info: strawberry.Info, id: str) -> Droid | None:
        """Get a droid by ID."""
        droid = get_service(info, CharacterRepository).get_droid(id)
        return Droid.from_model(droid) if droid else None

    @strawberry.field
    def starship(self, info: strawberry.Info, id: str) -> Starship | None:
        """Get a starship by ID."""
        starship = get_service(info, CharacterRepository).get_starship(id)
        return Starship.from_model(starship) if starship else None

    @strawberry.field
    def search(self, info: strawberry.Info, text: str) -> list[SearchResult]:
        """Search characters and starships by name."""
        return [
            Starship.from_model(item) if isinstance(item, models.Starship) else to_character(item)
            for item in get_service(info, CharacterRepository).search(text)
        ]

    @strawberry.field
    def reviews(self, info: strawberry.Info, episode: Episode) -> list[Review]:
        """Get the reviews of an episode."""
        repository = get_service(info, ReviewRepository)
        return [Review.from_model(r) for r in repository.get_reviews(episode)]
