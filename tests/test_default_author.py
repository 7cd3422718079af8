import pytest
from fastapi.testclient import TestClient

from chat_api.app.core.errors import UnknownAuthorError
from chat_api.app.core.seed import create_seeded_store
from chat_api.app.main import create_app

ADD_MESSAGE = """
mutation { addMessage(channelName: "Apex", content: "ready?") { author { name } } }
"""

PUBG_AUTHORS = '{ channel(name: "Pubg") { name messages { id author { name } } } }'


def test_create_app_rejects_author_who_is_not_a_member() -> None:
    with pytest.raises(UnknownAuthorError) as excinfo:
        create_app(default_author="Ghost")

    assert str(excinfo.value) == "Default author Ghost is not a member"


def test_create_app_rejects_author_missing_from_custom_store() -> None:
    store = create_seeded_store()
    store.members = [m for m in store.members if m.name != "Ammiel Yawson"]

    with pytest.raises(UnknownAuthorError):
        create_app(store=store, default_author="Ammiel Yawson")


def test_configured_author_signs_new_messages() -> None:
    with TestClient(create_app(default_author="Samuel Amenyedor")) as client:
        body = client.post("/graphql", json={"query": ADD_MESSAGE}).json()

    assert body["data"]["addMessage"] == {"author": {"name": "Samuel Amenyedor"}}


def test_dangling_author_nulls_the_message_list(app, graphql) -> None:
    app.state.store.channels[0].messages[0].author = "Ghost"

    body = graphql(PUBG_AUTHORS)

    assert body["data"] == {"channel": {"name": "Pubg", "messages": None}}
    assert body["errors"][0]["message"] == "Cannot return null for non-nullable field Message.author."
    assert body["errors"][0]["path"] == ["channel", "messages", 0, "author"]


def test_other_channels_still_resolve_with_a_dangling_author(app, graphql) -> None:
    app.state.store.channels[0].messages[0].author = "Ghost"
    graphql('mutation { addMessage(channelName: "Apex", content: "still here") { id } }')

    body = graphql("{ allChannels { name messages { content author { name } } } }")

    pubg, apex = body["data"]["allChannels"]
    assert pubg["messages"] is None
    assert apex["messages"] == [{"content": "still here", "author": {"name": "Ammiel Yawson"}}]
