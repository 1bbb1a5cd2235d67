"""Core publish/subscribe components."""

from channel_pubsub.core.bus import PubSub, Subscription, create_pub_sub
from channel_pubsub.core.channels import (
    ALL_CHANNEL,
    ChannelPubSub,
    ChannelSubscription,
    create_channel_pub_sub,
)
from channel_pubsub.core.ids import create_uniq_id

__all__ = [
    "ALL_CHANNEL",
    "ChannelPubSub",
    "ChannelSubscription",
    "PubSub",
    "Subscription",
    "create_channel_pub_sub",
    "create_pub_sub",
    "create_uniq_id",
]
