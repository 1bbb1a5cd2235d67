"""Console-based visualization using Rich."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from channel_pubsub.observer.observer import (
    ChannelObserver,
    ChannelStatistics,
    ObservedMessage,
)


class ConsoleVisualizer:
    """Renders observed pub/sub traffic to the console using Rich."""
    
    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
    
    def print_observed_message(self, observed: ObservedMessage) -> None:
        """Print an observed message with metadata."""
        self.console.print(
            f"[dim]#{observed.sequence_number:05d}[/dim] "
            f"[cyan]{escape(observed.channel)}[/cyan] "
            f"[green]{escape(repr(observed.payload))}[/green]"
        )
    
    def print_statistics_table(
        self,
        statistics: dict[str, ChannelStatistics],
    ) -> None:
        """Print a table of per-channel statistics."""
        table = Table(title="Channel Statistics")
        
        table.add_column("Channel", style="cyan")
        table.add_column("Count", justify="right")
        table.add_column("Avg Interval", justify="right")
        
        for channel in sorted(statistics):
            stats = statistics[channel]
            avg = stats.average_interval
            
            table.add_row(
                escape(channel),
                str(stats.count),
                f"{avg*1000:.3f}ms" if avg is not None else "-",
            )
        
        self.console.print(table)
    
    def print_observer_summary(self, observer: ChannelObserver) -> None:
        """Print observer summary."""
        summary = observer.summary()
        
        watched = ", ".join(summary["watched_channels"]) or "none"
        panel = Panel(
            f"Total Messages: {summary['total_messages']}\n"
            f"Watched Channels: {escape(watched)}\n"
            f"Buffer: {summary['buffer_size']}/{summary['buffer_capacity']}\n"
            f"Duration: {summary['observation_duration']:.2f}s",
            title="Observer Summary",
        )
        self.console.print(panel)
