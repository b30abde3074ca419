"""
Domain models for the Star Wars data set
"""

from dataclasses import dataclass, field
from enum import Enum

METERS_TO_FEET = 3.28084


class Episode(Enum):
    NEWHOPE = "NEWHOPE"
    EMPIRE = "EMPIRE"
    JEDI = "JEDI"


class Unit(Enum):
    FOOT = "FOOT"
    METERS = "METERS"


def convert_to_unit(meters: float, unit: Unit) -> float:
    """Convert a length stored in meters to the requested unit."""
    if unit == Unit.FOOT:
        return meters * METERS_TO_FEET
    return meters


@dataclass
class Character:
    id: str
    name: str
    friends: list[str] = field(default_factory=list)
    appears_in: list[Episode] = field(default_factory=list)
    height: float = 1.72


@dataclass
class Human(Character):
    home_planet: str | None = None


@dataclass
class Droid(Character):
    primary_function: str | None = None


@dataclass
class Starship:
    id: str
    name: str
    length: float


@dataclass
class Review:
    stars: int
    commentary: str | None = None
