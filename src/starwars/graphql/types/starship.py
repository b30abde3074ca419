"""
Starship GraphQL type definitions
"""

from typing import Annotated

import strawberry

from ...data import models
from .character import Droid, Human
from .episode import Unit


@strawberry.type(description="A ship in the Star Wars saga.")
class Starship:
    id: strawberry.ID
    name: str
    length_in_meters: strawberry.Private[float]

    @strawberry.field(description="Length of the starship.")
    def length(self, unit: Unit = Unit.METERS) -> float:
        return models.convert_to_unit(self.length_in_meters, unit)

    @classmethod
    def from_model(cls, starship: models.Starship) -> "Starship":
        return cls(
            id=strawberry.ID(starship.id),
            name=starship.name,
            length_in_meters=starship.length,
        )


SearchResult = Annotated[Human | Droid | Starship, strawberry.union("SearchResult")]
