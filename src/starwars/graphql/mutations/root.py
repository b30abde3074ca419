"""
Root GraphQL mutation definitions
"""

import strawberry

from ...data.repositories import ReviewRepository
from ...events import EventMessage, EventSender
from ...logging import get_logger
from ..context import get_service
from ..directives import HasCountry
from ..subscriptions.root import review_event
from ..types.episode import Episode
from ..types.review import Review, ReviewInput

logger = get_logger(__name__)


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(
        permission_classes=[HasCountry],
        directives=[HasCountry.directive()],
    )
    async def create_review(
        self, info: strawberry.Info, episode: Episode, review: ReviewInput
    ) -> Review:
        """Store a review for an episode and notify ``onReview`` subscribers."""
        stored = get_service(info, ReviewRepository).add_review(episode, review.to_model())
        result = Review.from_model(stored)

        sender: EventSender = get_service(info, EventSender)
        await sender.send(EventMessage(review_event(episode), result))

        logger.info("Review created", episode=episode.value, stars=stored.stars)
        return result
