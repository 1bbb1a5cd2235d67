"""Channel PubSub - synchronous in-process publish/subscribe with named channels."""

__version__ = "0.1.0"

from channel_pubsub.core.bus import PubSub, Subscription, create_pub_sub
from channel_pubsub.core.channels import (
    ALL_CHANNEL,
    ChannelPubSub,
    ChannelSubscription,
    create_channel_pub_sub,
)
from channel_pubsub.core.ids import create_uniq_id
from channel_pubsub.observer.observer import ChannelObserver

__all__ = [
    "ALL_CHANNEL",
    "ChannelObserver",
    "ChannelPubSub",
    "ChannelSubscription",
    "PubSub",
    "Subscription",
    "create_channel_pub_sub",
    "create_pub_sub",
    "create_uniq_id",
]
