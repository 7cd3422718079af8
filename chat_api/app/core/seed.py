"""
Seed data loaded into a fresh ``ChatStore``.

The dataset is a small gaming community: three members sharing the
``Pubg`` and ``Apex`` channels, with a short reply thread in ``Pubg``.
"""

from chat_api.app.core.store import ChatStore
from chat_api.app.core.timestamps import date_string
from chat_api.app.schemas import ChannelRecord, MemberRecord, MessageRecord


def seed_members():
    return [
        MemberRecord(name="Ammiel Yawson", channels=["Pubg"]),
        MemberRecord(name="Samuel Amenyedor", channels=["Pubg", "Apex"]),
        MemberRecord(name="Daniel Amenyedor", channels=["Pubg", "Apex"]),
    ]


def seed_channels():
    return [
        ChannelRecord(
            name="Pubg",
            full_name="Players Underground Battleground",
            type="Battleroyale",
            messages=[
                MessageRecord(
                    id=1,
                    content="Hi everyone!",
                    author="Ammiel Yawson",
                    created_at=date_string("2022-04-14"),
                ),
                MessageRecord(
                    id=2,
                    content="Can we team up tonight?",
                    author="Ammiel Yawson",
                    created_at=date_string("2022-04-15"),
                ),
                MessageRecord(
                    id=3,
                    content=(
                        "Tonight? I got a tournament in Apex. We can set it up "
                        "for this weekend tho. I'll be available."
                    ),
                    author="Samuel Amenyedor",
                    created_at=date_string("2022-04-16"),
                    reply_to=2,
                ),
                MessageRecord(
                    id=4,
                    content="Yeah me too",
                    author="Daniel Amenyedor",
                    created_at=date_string("2022-04-17"),
                    reply_to=3,
                ),
                MessageRecord(
                    id=5,
                    content="Sellouts 🌚",
                    author="Ammiel Yawson",
                    created_at=date_string("2022-04-18"),
                    reply_to=4,
                ),
            ],
            members=["Ammiel Yawson", "Samuel Amenyedor", "Daniel Amenyedor"],
        ),
        ChannelRecord(
            name="Apex",
            full_name="Apex Legends",
            type="Battleroyale",
            members=["Samuel Amenyedor", "Daniel Amenyedor"],
        ),
    ]


def create_seeded_store() -> ChatStore:
    """Return a new store populated with the seed members and channels."""
    return ChatStore(members=seed_members(), channels=seed_channels())
