"""End-to-end scenarios across buses and registries."""

from channel_pubsub import ALL_CHANNEL, create_channel_pub_sub, create_pub_sub


def test_subscribe_publish_unsubscribe_cycle() -> None:
    bus = create_pub_sub()
    calls: list[str] = []
    
    sub = bus.subscribe(calls.append)
    bus.publish("x")
    sub.unsubscribe()
    bus.publish("y")
    
    assert calls == ["x"]


def test_chat_scenario() -> None:
    chat = create_channel_pub_sub()
    general: list[dict] = []
    private: list[dict] = []
    everything: list[dict] = []
    
    chat.subscribe("general", general.append)
    chat.subscribe("private", private.append)
    chat.subscribe(ALL_CHANNEL, everything.append)
    
    m1 = {"from": "Alice", "text": "Hello everyone!", "timestamp": 1}
    m2 = {"from": "Bob", "text": "Secret message", "timestamp": 2}
    m3 = {"from": "Charlie", "text": "Hi Alice!", "timestamp": 3}
    
    chat.publish("general", m1)
    chat.publish("private", m2)
    chat.publish("general", m3)
    
    assert general == [m1, m3]
    assert private == [m2]
    assert everything == [m1, m2, m3]


def test_handler_republishes_to_another_channel() -> None:
    """A handler may publish from inside a delivery."""
    chat = create_channel_pub_sub()
    audit: list[str] = []
    
    chat.subscribe("commands", lambda cmd: chat.publish("audit", f"ran {cmd}"))
    chat.subscribe("audit", audit.append)
    
    chat.publish("commands", "deploy")
    
    assert audit == ["ran deploy"]
