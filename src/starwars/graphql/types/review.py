"""
Review GraphQL type definitions
"""

import strawberry

from ...data import models


@strawberry.type(description="A review of a film.")
class Review:
    stars: int
    commentary: str | None = None

    @classmethod
    def from_model(cls, review: models.Review) -> "Review":
        return cls(stars=review.stars, commentary=review.commentary)


@strawberry.input(description="The input object sent when someone is creating a new review.")
class ReviewInput:
    stars: int
    commentary: str | None = None

    def to_model(self) -> models.Review:
        return models.Review(stars=self.stars, commentary=self.commentary)
