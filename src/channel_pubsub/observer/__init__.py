"""Passive channel observation."""

from channel_pubsub.observer.observer import (
    ChannelObserver,
    ChannelStatistics,
    ObservedMessage,
)

__all__ = ["ChannelObserver", "ChannelStatistics", "ObservedMessage"]
