import asyncio

import pytest

from chat_api.app.core.broker import MessageBroker
from chat_api.app.schemas import MessageRecord


def _message(message_id="abc") -> MessageRecord:
    return MessageRecord(id=message_id, content="hi", created_at="2022-04-14T00:00:00.000Z", author="Ammiel Yawson")


async def _next(stream):
    return await stream.__anext__()


async def _wait_for(broker: MessageBroker, count: int) -> None:
    while broker.subscriber_count < count:
        await asyncio.sleep(0)


def test_publish_reaches_every_subscriber() -> None:
    async def scenario():
        broker = MessageBroker()
        first, second = broker.subscribe(), broker.subscribe()
        pending = [asyncio.create_task(_next(first)), asyncio.create_task(_next(second))]
        await _wait_for(broker, 2)

        await broker.publish("Pubg", _message())
        events = await asyncio.gather(*pending)

        assert [e.channel_name for e in events] == ["Pubg", "Pubg"]
        assert all(e.message.id == "abc" for e in events)
        await first.aclose()
        await second.aclose()
        assert broker.subscriber_count == 0

    asyncio.run(scenario())


def test_publish_without_subscribers_is_noop() -> None:
    async def scenario():
        broker = MessageBroker()
        await broker.publish("Pubg", _message())
        assert broker.subscriber_count == 0

    asyncio.run(scenario())


def test_aclose_ends_open_streams() -> None:
    async def scenario():
        broker = MessageBroker()
        stream = broker.subscribe()
        pending = asyncio.create_task(_next(stream))
        await _wait_for(broker, 1)

        await broker.aclose()

        with pytest.raises(StopAsyncIteration):
            await pending
        assert broker.closed
        assert broker.subscriber_count == 0

    asyncio.run(scenario())


def test_subscribe_after_close_yields_nothing() -> None:
    async def scenario():
        broker = MessageBroker()
        await broker.aclose()
        return [event async for event in broker.subscribe()]

    assert asyncio.run(scenario()) == []
