"""
In-memory event registry used to deliver subscription events
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any, Protocol

from .logging import get_logger

logger = get_logger(__name__)

SUBSCRIBER_QUEUE_SIZE = 100


@dataclass(frozen=True)
class EventDescription:
    """Identifies a subscription topic by event name and arguments."""

    name: str
    arguments: tuple[tuple[str, Any], ...] = ()

    @classmethod
    def create(cls, name: str, **arguments: Any) -> EventDescription:
        return cls(name=name, arguments=tuple(sorted(arguments.items())))


@dataclass
class EventMessage:
    """An event payload bound to the topic it is published on."""

    event: EventDescription
    payload: Any = field(default=None)


class EventRegistry(Protocol):
    def subscribe(self, event: EventDescription) -> AsyncIterator[Any]: ...


class EventSender(Protocol):
    async def send(self, message: EventMessage) -> None: ...


class InMemoryEventRegistry:
    """
    Process-local publish/subscribe hub.

    Implements both ``EventRegistry`` and ``EventSender``; a single instance
    is registered for both roles so senders reach every live subscriber.
    Messages sent to a topic without subscribers are dropped.
    """

    def __init__(self, queue_size: int = SUBSCRIBER_QUEUE_SIZE):
        self._queue_size = queue_size
        self._subscribers: dict[EventDescription, list[asyncio.Queue]] = {}

    async def send(self, message: EventMessage) -> None:
        queues = self._subscribers.get(message.event, [])
        logger.debug(
            "Sending event",
            topic=message.event.name,
            subscribers=len(queues),
        )
        for queue in list(queues):
            try:
                queue.put_nowait(message.payload)
            except asyncio.QueueFull:
                logger.warning("Subscriber queue full, dropping event", topic=message.event.name)

    async def subscribe(self, event: EventDescription) -> AsyncIterator[Any]:
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._queue_size)
        self._subscribers.setdefault(event, []).append(queue)
        logger.debug("Subscriber added", topic=event.name)
        try:
            while True:
                yield await queue.get()
        finally:
            self._remove(event, queue)

    def subscriber_count(self, event: EventDescription) -> int:
        return len(self._subscribers.get(event, []))

    def _remove(self, event: EventDescription, queue: asyncio.Queue) -> None:
        queues = self._subscribers.get(event)
        if not queues:
            return
        if queue in queues:
            queues.remove(queue)
        if not queues:
            del self._subscribers[event]
        logger.debug("Subscriber removed", topic=event.name)
