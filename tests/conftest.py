"""Pytest configuration and shared HipChat payload fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from tests.helpers import API


def room_links(room_id: int = 7) -> dict[str, Any]:
    return {
        "self": f"{API}/room/{room_id}",
        "webhooks": f"{API}/room/{room_id}/webhook",
        "members": f"{API}/room/{room_id}/member",
        "participants": f"{API}/room/{room_id}/participant",
    }


def user_payload(user_id: int = 42, name: str = "Ada Lovelace") -> dict[str, Any]:
    return {
        "id": user_id,
        "name": name,
        "mention_name": "ada",
        "links": {"self": f"{API}/user/{user_id}"},
    }


@pytest.fixture
def room_detail_payload() -> dict[str, Any]:
    """A GET /room/{id} response body."""
    return {
        "id": 7,
        "name": "Engineering",
        "xmpp_jid": "1_engineering@conf.hipchat.test",
        "statistics": {"links": {"self": f"{API}/room/7/statistics"}},
        "links": room_links(7),
        "created": "2015-06-01T12:00:00+00:00",
        "is_archived": False,
        "privacy": "public",
        "is_guest_accessible": False,
        "topic": "Builds and deploys",
        "avatar_url": None,
        "guest_access_url": None,
        "owner": {
            "id": 42,
            "name": "Ada Lovelace",
            "mention_name": "ada",
            "links": {"self": f"{API}/user/42"},
        },
        "participants": [],
        "version": "ABCDEF12",
    }


@pytest.fixture
def rooms_payload() -> dict[str, Any]:
    """A GET /room response body."""
    return {
        "startIndex": 0,
        "maxResults": 100,
        "items": [
            {"id": 7, "name": "Engineering", "links": room_links(7)},
            {"id": 8, "name": "Support", "links": room_links(8)},
        ],
        "links": {"self": f"{API}/room", "prev": None, "next": f"{API}/room?start-index=100"},
    }


@pytest.fixture
def user_detail_payload() -> dict[str, Any]:
    """A GET /user/{id} response body."""
    return {
        **user_payload(),
        "xmpp_jid": "1_42@chat.hipchat.test",
        "email": "ada@example.com",
        "title": "Analyst",
        "timezone": "Europe/London",
        "photo_url": None,
        "presence": {
            "status": "Computing",
            "idle": 120,
            "show": "away",
            "client": {"version": "4.0", "type": "macos"},
            "is_online": True,
        },
        "is_deleted": False,
        "is_guest": False,
        "is_group_admin": True,
        "created": "2015-01-01T00:00:00+00:00",
        "last_active": "2015-06-01T12:00:00+00:00",
    }


@pytest.fixture
def users_payload() -> dict[str, Any]:
    """A GET /user response body."""
    return {
        "startIndex": 0,
        "maxResults": 100,
        "items": [user_payload(42, "Ada Lovelace"), user_payload(43, "Alan Turing")],
        "links": {"self": f"{API}/user"},
    }


@pytest.fixture
def messages_payload(user_detail_payload: dict[str, Any]) -> dict[str, Any]:
    """A GET /room/{id}/history response body."""
    return {
        "startIndex": 0,
        "maxResults": 75,
        "items": [
            {
                "id": "b1c2d3",
                "date": "2015-06-01T12:00:00.000000+00:00",
                "from": user_detail_payload,
                "message": "@alan the build is green",
                "message_format": "text",
                "type": "message",
                "mentions": [user_payload(43, "Alan Turing") | {"mention_name": "alan"}],
                "file": {
                    "name": "build.log",
                    "url": "https://files.hipchat.test/build.log",
                    "thumb_url": None,
                    "size": 2048,
                },
            },
            {
                "id": "e4f5a6",
                "date": "2015-06-01T12:01:00.000000+00:00",
                "from": "Jenkins",
                "message": "Deploy <b>finished</b>",
                "message_format": "html",
                "type": "notification",
                "color": "green",
                "mentions": [],
            },
        ],
        "links": {"self": f"{API}/room/7/history"},
    }


@pytest.fixture
def emoticon_payload() -> dict[str, Any]:
    """A GET /emoticon/{id} response body."""
    return {
        "id": 11,
        "shortcut": "shipit",
        "width": 30,
        "height": 30,
        "audio_path": None,
        "url": "https://emoticons.hipchat.test/shipit.png",
        "links": {"self": f"{API}/emoticon/11"},
    }
