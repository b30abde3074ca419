"""Star Wars data set and repositories."""

from .models import Character, Droid, Episode, Human, Review, Starship, Unit, convert_to_unit
from .repositories import CharacterRepository, ReviewRepository

__all__ = [
    "Character",
    "CharacterRepository",
    "Droid",
    "Episode",
    "Human",
    "Review",
    "ReviewRepository",
    "Starship",
    "Unit",
    "convert_to_unit",
]
