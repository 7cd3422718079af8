import time

from fastapi.testclient import TestClient

from chat_api.app.main import create_app

SUBSCRIPTION = """
subscription Added($channelName: String) {
  messageAdded(channelName: $channelName) {
    content
    author { name }
  }
}
"""

ADD_MESSAGE = """
mutation Add($channelName: String!, $content: String!) {
  addMessage(channelName: $channelName, content: $content) { id }
}
"""


def _wait_for_subscribers(broker, count: int, timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while broker.subscriber_count < count:
        assert time.monotonic() < deadline, "subscription was not registered"
        time.sleep(0.01)


def _add(client, channel_name: str, content: str) -> None:
    response = client.post(
        "/graphql",
        json={"query": ADD_MESSAGE, "variables": {"channelName": channel_name, "content": content}},
    )
    assert response.json()["data"]["addMessage"]["id"]


def test_message_added_streams_new_messages_for_channel() -> None:
    app = create_app()
    with TestClient(app) as client:
        with client.websocket_connect("/graphql", subprotocols=["graphql-transport-ws"]) as ws:
            ws.send_json({"type": "connection_init"})
            assert ws.receive_json()["type"] == "connection_ack"
            ws.send_json(
                {
                    "id": "1",
                    "type": "subscribe",
                    "payload": {"query": SUBSCRIPTION, "variables": {"channelName": "pubg"}},
                }
            )
            _wait_for_subscribers(app.state.broker, 1)

            _add(client, "Apex", "not for pubg")
            _add(client, "Pubg", "gg")

            message = ws.receive_json()
            assert message["type"] == "next"
            assert message["id"] == "1"
            assert message["payload"]["data"]["messageAdded"] == {
                "content": "gg",
                "author": {"name": "Ammiel Yawson"},
            }
            ws.send_json({"id": "1", "type": "complete"})


def test_message_added_without_filter_receives_every_channel() -> None:
    app = create_app()
    with TestClient(app) as client:
        with client.websocket_connect("/graphql", subprotocols=["graphql-transport-ws"]) as ws:
            ws.send_json({"type": "connection_init"})
            assert ws.receive_json()["type"] == "connection_ack"
            ws.send_json({"id": "all", "type": "subscribe", "payload": {"query": SUBSCRIPTION}})
            _wait_for_subscribers(app.state.broker, 1)

            _add(client, "Apex", "first")
            _add(client, "Pubg", "second")

            received = [ws.receive_json()["payload"]["data"]["messageAdded"]["content"] for _ in range(2)]
            assert received == ["first", "second"]
            ws.send_json({"id": "all", "type": "complete"})
