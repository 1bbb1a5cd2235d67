"""Passive channel observer implementation."""

from __future__ import annotations

import time
from collections import defaultdict, deque
from dataclasses import dataclass
from functools import partial
from typing import Any, Iterable, Optional

from channel_pubsub.core.channels import ALL_CHANNEL, ChannelPubSub, ChannelSubscription


@dataclass
class ObservedMessage:
    """A published payload with observation metadata."""
    
    channel: str
    payload: Any
    observation_time: float
    sequence_number: int


@dataclass
class ChannelStatistics:
    """Statistics for a single watched channel."""
    
    count: int = 0
    first_seen: Optional[float] = None
    last_seen: Optional[float] = None
    
    @property
    def average_interval(self) -> Optional[float]:
        """Average time between messages on this channel."""
        if self.count < 2 or self.first_seen is None or self.last_seen is None:
            return None
        return (self.last_seen - self.first_seen) / (self.count - 1)


class ChannelObserver:
    """Passively observes traffic on a ChannelPubSub without modifying it.
    
    The observer is an ordinary subscriber: it watches the given channels
    (by default the "all" channel, i.e. every message) and buffers what it
    sees. Messages observed on the "all" channel are recorded under "all"
    because the registry does not tell "all" subscribers where a message
    was published.
    """
    
    def __init__(self, buffer_size: int = 10000) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be > 0")
        self._buffer_size = buffer_size
        self._buffer: deque[ObservedMessage] = deque(maxlen=buffer_size)
        self._sequence = 0
        self._statistics: dict[str, ChannelStatistics] = defaultdict(ChannelStatistics)
        self._subscriptions: list[ChannelSubscription] = []
        self._start_time: Optional[float] = None
    
    @property
    def is_attached(self) -> bool:
        return bool(self._subscriptions)
    
    @property
    def message_count(self) -> int:
        """Total number of observed messages."""
        return self._sequence
    
    @property
    def buffer(self) -> list[ObservedMessage]:
        return list(self._buffer)
    
    @property
    def statistics(self) -> dict[str, ChannelStatistics]:
        """Per-channel statistics."""
        return dict(self._statistics)
    
    @property
    def watched_channels(self) -> tuple[str, ...]:
        return tuple(sub.channel for sub in self._subscriptions)
    
    def attach(
        self,
        registry: ChannelPubSub[Any],
        channels: Iterable[str] = (ALL_CHANNEL,),
    ) -> None:
        """Subscribe to each channel and start observing."""
        if self.is_attached:
            self.detach()
        
        for channel in dict.fromkeys(channels):
            self._subscriptions.append(
                registry.subscribe(channel, partial(self._on_message, channel))
            )
        self._start_time = time.time()
    
    def detach(self) -> None:
        """Cancel all subscriptions held by this observer."""
        for sub in self._subscriptions:
            sub.unsubscribe()
        self._subscriptions.clear()
    
    def _on_message(self, channel: str, payload: Any) -> None:
        now = time.time()
        self._buffer.append(ObservedMessage(
            channel=channel,
            payload=payload,
            observation_time=now,
            sequence_number=self._sequence,
        ))
        self._sequence += 1
        
        stats = self._statistics[channel]
        stats.count += 1
        if stats.first_seen is None:
            stats.first_seen = now
        stats.last_seen = now
    
    def get_messages(self, channel: str) -> list[ObservedMessage]:
        """Buffered messages observed on one channel."""
        return [m for m in self._buffer if m.channel == channel]
    
    def payloads(self, channel: Optional[str] = None) -> list[Any]:
        """Buffered payloads, optionally restricted to one channel."""
        return [
            m.payload for m in self._buffer
            if channel is None or m.channel == channel
        ]
    
    def clear(self) -> None:
        """Clear the buffer and reset statistics."""
        self._buffer.clear()
        self._sequence = 0
        self._statistics.clear()
        self._start_time = time.time()
    
    def summary(self) -> dict[str, object]:
        """Generate a summary of observations."""
        return {
            "total_messages": self._sequence,
            "channels": sorted(self._statistics),
            "buffer_size": len(self._buffer),
            "buffer_capacity": self._buffer_size,
            "watched_channels": list(self.watched_channels),
            "observation_duration": (
                time.time() - self._start_time if self._start_time else 0
            ),
        }
