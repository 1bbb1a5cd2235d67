"""Visualization components."""

from channel_pubsub.visualization.console import ConsoleVisualizer

__all__ = ["ConsoleVisualizer"]
