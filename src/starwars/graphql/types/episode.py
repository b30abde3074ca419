"""
Enum GraphQL type definitions
"""

import strawberry

from ...data import models

Episode = strawberry.enum(models.Episode, description="One of the films in the Star Wars Trilogy.")

Unit = strawberry.enum(models.Unit, description="Length unit.")
