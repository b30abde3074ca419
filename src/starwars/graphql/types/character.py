"""
Character GraphQL type definitions
"""

import strawberry

from ...data import models
from ...data.repositories import CharacterRepository
from ..context import get_service
from .connection import CharacterConnection
from .episode import Episode, Unit
from .scalars import PaginationAmount


@strawberry.interface(description="A character in the Star Wars Trilogy.")
class Character:
    id: strawberry.ID
    name: str
    appears_in: list[Episode]
    friend_ids: strawberry.Private[list[str]]
    height_in_meters: strawberry.Private[float]

    @strawberry.field(description="The height of the character.")
    def height(self, unit: Unit = Unit.METERS) -> float:
        return models.convert_to_unit(self.height_in_meters, unit)

    @strawberry.field(description="The friends of the character, paged.")
    def friends(
        self,
        info: strawberry.Info,
        first: PaginationAmount | None = None,
        after: str | None = None,
    ) -> CharacterConnection:
        repository = get_service(info, CharacterRepository)
        friends = [to_character(c) for c in repository.get_characters(self.friend_ids)]
        return CharacterConnection.paginate(friends, first, after)


@strawberry.type(description="A humanoid creature in the Star Wars universe.")
class Human(Character):
    home_planet: str | None = None

    @strawberry.field(description="The first friend of this human who is also human.")
    def other_human(self, info: strawberry.Info) -> "Human | None":
        repository = get_service(info, CharacterRepository)
        for friend_id in self.friend_ids:
            friend = repository.get_human(friend_id)
            if friend is not None:
                return Human.from_model(friend)
        return None

    @classmethod
    def from_model(cls, human: models.Human) -> "Human":
        return cls(
            id=strawberry.ID(human.id),
            name=human.name,
            appears_in=list(human.appears_in),
            friend_ids=list(human.friends),
            height_in_meters=human.height,
            home_planet=human.home_planet,
        )


@strawberry.type(description="A mechanical creature in the Star Wars universe.")
class Droid(Character):
    primary_function: str | None = None

    @classmethod
    def from_model(cls, droid: models.Droid) -> "Droid":
        return cls(
            id=strawberry.ID(droid.id),
            name=droid.name,
            appears_in=list(droid.appears_in),
            friend_ids=list(droid.friends),
            height_in_meters=droid.height,
            primary_function=droid.primary_function,
        )


def to_character(character: models.Character) -> Human | Droid:
    """Wrap a domain character in its GraphQL type."""
    if isinstance(character, models.Human):
        return Human.from_model(character)
    if isinstance(character, models.Droid):
        return Droid.from_model(character)
    raise TypeError(f"Unknown character kind: {type(character).__name__}")
