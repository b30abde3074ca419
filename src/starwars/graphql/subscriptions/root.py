"""
Root GraphQL subscription definitions
"""

from collections.abc import AsyncGenerator
from contextlib import aclosing

import strawberry

from ...events import EventDescription, EventRegistry
from ..context import get_service
from ..types.episode import Episode
from ..types.review import Review

ON_REVIEW = "onReview"


def review_event(episode: Episode) -> EventDescription:
    return EventDescription.create(ON_REVIEW, episode=episode)


@strawberry.type
class Subscription:
    """Root GraphQL subscription type."""

    @strawberry.subscription
    async def on_review(
        self, info: strawberry.Info, episode: Episode
    ) -> AsyncGenerator[Review, None]:
        """Stream reviews created for an episode."""
        registry: EventRegistry = get_service(info, EventRegistry)
        async with aclosing(registry.subscribe(review_event(episode))) as reviews:
            async for review in reviews:
                yield review
