"""Command-line interface for Channel PubSub."""

import logging

import click
from rich.console import Console

from channel_pubsub import __version__
from channel_pubsub.core.channels import ALL_CHANNEL, ChannelPubSub
from channel_pubsub.observer.observer import ChannelObserver
from channel_pubsub.visualization.console import ConsoleVisualizer


console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Channel PubSub - in-process publish/subscribe with named channels."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


@main.command()
def demo() -> None:
    """Run a small chat scenario across three channels."""
    chat: ChannelPubSub[dict] = ChannelPubSub()
    observer = ChannelObserver()
    visualizer = ConsoleVisualizer(console)
    
    inboxes: dict[str, list[dict]] = {"general": [], "private": [], ALL_CHANNEL: []}
    for channel, inbox in inboxes.items():
        chat.subscribe(channel, inbox.append)
    
    observer.attach(chat, channels=("general", "private", ALL_CHANNEL))
    
    chat.publish("general", {"from": "Alice", "text": "Hello everyone!"})
    chat.publish("private", {"from": "Bob", "text": "Secret message"})
    chat.publish("general", {"from": "Charlie", "text": "Hi Alice!"})
    
    observer.detach()
    
    console.print("[bold]Delivered messages[/bold]")
    for observed in observer.buffer:
        visualizer.print_observed_message(observed)
    
    for channel, inbox in inboxes.items():
        console.print(f"[cyan]{channel}[/cyan] inbox: {len(inbox)} message(s)")
    
    visualizer.print_statistics_table(observer.statistics)
    visualizer.print_observer_summary(observer)


@main.command()
@click.argument("channel")
@click.argument("messages", nargs=-1, required=True)
@click.option(
    "--watch", "-w",
    multiple=True,
    help="Channel to observe (repeatable, default: all)",
)
def publish(channel: str, messages: tuple[str, ...], watch: tuple[str, ...]) -> None:
    """Publish MESSAGES to CHANNEL and show which watched channels saw them."""
    registry: ChannelPubSub[str] = ChannelPubSub()
    observer = ChannelObserver()
    visualizer = ConsoleVisualizer(console)
    
    observer.attach(registry, channels=watch or (ALL_CHANNEL,))
    
    for message in messages:
        registry.publish(channel, message)
    
    observer.detach()
    
    if not observer.message_count:
        console.print("[yellow]No watched channel received anything[/yellow]")
    for observed in observer.buffer:
        visualizer.print_observed_message(observed)
    visualizer.print_statistics_table(observer.statistics)


if __name__ == "__main__":
    main()
