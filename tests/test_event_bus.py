"""EventBus delivery and handler isolation."""

from __future__ import annotations


async def test_publish_reaches_subscribers(bus):
    received = []

    async def handler(payload):
        received.append(payload)

    await bus.subscribe("catalog.loaded", handler)
    await bus.subscribe("catalog.loaded", handler)  # duplicates ignored
    await bus.publish("catalog.loaded", {"count": 3})

    assert await bus.wait_until_idle()
    assert received == [{"count": 3}]
    assert bus.subscriber_count("catalog.loaded") == 1


async def test_publish_without_subscribers(bus):
    await bus.publish("nobody.listens", {})
    assert await bus.wait_until_idle()


async def test_failing_handler_does_not_stop_others(bus):
    received = []

    async def broken(payload):
        raise RuntimeError("handler bug")

    async def healthy(payload):
        received.append(payload)

    await bus.subscribe("topic", broken)
    await bus.subscribe("topic", healthy)
    await bus.publish("topic", {"n": 1})

    assert await bus.wait_until_idle()
    assert received == [{"n": 1}]


async def test_unsubscribe(bus):
    received = []

    async def handler(payload):
        received.append(payload)

    await bus.subscribe("topic", handler)
    await bus.unsubscribe("topic", handler)
    await bus.publish("topic", {})

    assert await bus.wait_until_idle()
    assert received == []


async def test_clear(bus):
    async def handler(payload):
        pass

    await bus.subscribe("topic", handler)
    bus.clear()
    assert bus.subscriber_count("topic") == 0
