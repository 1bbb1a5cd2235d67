"""Multi-channel registry built on PubSub."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional

from channel_pubsub.core.bus import Handler, IdFactory, PubSub, T
from channel_pubsub.core.ids import create_uniq_id

logger = logging.getLogger(__name__)

# Receives a copy of every message published to any channel of the registry
ALL_CHANNEL = "all"


@dataclass(frozen=True)
class ChannelSubscription:
    """Handle returned by ChannelPubSub.subscribe()."""

    id: str
    channel: str
    unsubscribe: Callable[[], None]

    def __call__(self) -> None:
        self.unsubscribe()


class ChannelPubSub(Generic[T]):
    """Routes subscribe/unsubscribe/publish to one PubSub per channel name.

    Channel buses are created on first subscribe and kept for the lifetime of
    the registry, even once they have no subscribers left.
    """

    def __init__(self, id_factory: IdFactory = create_uniq_id) -> None:
        self._id_factory = id_factory
        self._channels: dict[str, PubSub[T]] = {}

    @property
    def channels(self) -> tuple[str, ...]:
        """Known channel names, in creation order."""
        return tuple(self._channels)

    def __contains__(self, channel: object) -> bool:
        return channel in self._channels

    def __repr__(self) -> str:
        return f"ChannelPubSub(channels={list(self._channels)!r})"

    def get_channel(self, channel: str) -> Optional[PubSub[T]]:
        """Look up the bus for a channel without creating it."""
        return self._channels.get(channel)

    def _get_or_create(self, channel: str) -> PubSub[T]:
        bus = self._channels.get(channel)
        if bus is None:
            bus = PubSub(self._id_factory)
            self._channels[channel] = bus
            logger.debug("created channel %r (bus %s)", channel, bus.id)
        return bus

    def subscribe(self, channel: str, fn: Handler[T]) -> ChannelSubscription:
        """Subscribe to a channel, creating it if needed."""
        sub = self._get_or_create(channel).subscribe(fn)
        return ChannelSubscription(
            id=sub.id,
            channel=channel,
            unsubscribe=sub.unsubscribe,
        )

    def unsubscribe(self, channel: str, subscription_id: str) -> None:
        """Cancel a subscription; unknown channels and ids are ignored."""
        bus = self._channels.get(channel)
        if bus is None:
            return
        bus.unsubscribe(subscription_id)

    def publish(self, channel: str, data: T) -> None:
        """Deliver to the "all" channel first, then to the named channel.

        Publishing to "all" itself reaches its subscribers once.
        """
        all_bus = self._channels.get(ALL_CHANNEL)
        if all_bus is not None:
            all_bus.publish(data)

        if channel == ALL_CHANNEL:
            return

        bus = self._channels.get(channel)
        if bus is not None:
            bus.publish(data)


def create_channel_pub_sub(id_factory: IdFactory = create_uniq_id) -> ChannelPubSub[T]:
    """Create an empty registry."""
    return ChannelPubSub(id_factory)
