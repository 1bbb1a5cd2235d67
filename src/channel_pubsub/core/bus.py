"""Single-topic publish/subscribe bus."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from channel_pubsub.core.ids import create_uniq_id

logger = logging.getLogger(__name__)

T = TypeVar("T")
Handler = Callable[[T], None]
IdFactory = Callable[[], str]


@dataclass(frozen=True)
class Subscription:
    """Handle returned by PubSub.subscribe()."""

    id: str
    unsubscribe: Callable[[], None]

    def __call__(self) -> None:
        self.unsubscribe()


class PubSub(Generic[T]):
    """In-process pub/sub bus for a single logical topic.

    Semantics:
    - broadcast: each publish() goes to every handler subscribed at that moment
    - synchronous: delivery happens in the publisher's call, nothing is queued
    - fail fast: a handler exception propagates out of publish() and the
      remaining handlers of that pass are not called

    Not thread-safe; callers on multiple threads must serialize access.
    """

    def __init__(self, id_factory: IdFactory = create_uniq_id) -> None:
        self._id_factory = id_factory
        self._id = id_factory()
        self._handlers: dict[str, Handler[T]] = {}

    @property
    def id(self) -> str:
        return self._id

    @property
    def subscription_ids(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, subscription_id: object) -> bool:
        return subscription_id in self._handlers

    def __repr__(self) -> str:
        return f"PubSub(id={self._id!r}, subscriptions={len(self._handlers)})"

    def subscribe(self, fn: Handler[T]) -> Subscription:
        """Register a handler and return its cancellable handle."""
        subscription_id = self._id_factory()
        self._handlers[subscription_id] = fn
        logger.debug("bus %s: subscribed %s", self._id, subscription_id)
        return Subscription(
            id=subscription_id,
            unsubscribe=lambda: self.unsubscribe(subscription_id),
        )

    def unsubscribe(self, subscription_id: str) -> None:
        """Remove a subscription; unknown ids are ignored."""
        if subscription_id not in self._handlers:
            return
        del self._handlers[subscription_id]
        logger.debug("bus %s: unsubscribed %s", self._id, subscription_id)

    def publish(self, data: T) -> None:
        # Snapshot first: handlers may subscribe/unsubscribe while we iterate
        handlers = list(self._handlers.values())
        for fn in handlers:
            fn(data)


def create_pub_sub(id_factory: IdFactory = create_uniq_id) -> PubSub[T]:
    """Create an independent bus with its own subscription mapping."""
    return PubSub(id_factory)
