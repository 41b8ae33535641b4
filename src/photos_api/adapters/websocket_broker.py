"""In-process topic broker feeding WebSocket subscribers."""

import asyncio
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from photos_api.services.photos import PhotoBroadcaster

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Subscription:
    """Queue of pending messages for one subscriber."""

    topic: str
    queue: asyncio.Queue
    loop: asyncio.AbstractEventLoop

    async def receive(self) -> dict[str, object]:
        """Wait for the next message on the topic."""
        return await self.queue.get()


@dataclass
class InMemoryBroker(PhotoBroadcaster):
    """Fan-out broker keyed by topic name.

    ``publish`` may be called from any thread; delivery is scheduled on the
    event loop that owns each subscriber's queue.
    """

    _subscriptions: dict[str, list[Subscription]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def subscribe(self, topic: str) -> Subscription:
        """Register a subscriber on the running event loop."""
        subscription = Subscription(
            topic=topic, queue=asyncio.Queue(), loop=asyncio.get_running_loop()
        )
        with self._lock:
            self._subscriptions.setdefault(topic, []).append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Stop delivering messages to a subscriber."""
        with self._lock:
            subscribers = self._subscriptions.get(subscription.topic, [])
            if subscription in subscribers:
                subscribers.remove(subscription)
            if not subscribers:
                self._subscriptions.pop(subscription.topic, None)

    @contextmanager
    def subscription(self, topic: str) -> Iterator[Subscription]:
        """Subscribe for the duration of a ``with`` block."""
        subscription = self.subscribe(topic)
        try:
            yield subscription
        finally:
            self.unsubscribe(subscription)

    def subscriber_count(self, topic: str) -> int:
        with self._lock:
            return len(self._subscriptions.get(topic, []))

    def publish(self, topic: str, message: dict[str, object]) -> None:
        """Deliver a message to every current subscriber of the topic."""
        with self._lock:
            subscribers = list(self._subscriptions.get(topic, []))
        if not subscribers:
            logger.debug("No subscribers for %s", topic)
            return
        for subscription in subscribers:
            try:
                subscription.loop.call_soon_threadsafe(
                    subscription.queue.put_nowait, message
                )
            except RuntimeError:
                # Loop already closed; the subscriber is gone.
                logger.warning("Dropping closed subscriber on %s", topic)
                self.unsubscribe(subscription)
