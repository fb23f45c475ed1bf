"""Pydantic models for HipChat v2 API resources.

Every resource is an immutable value: instances are frozen, compared field
by field, and hashable, so they can be used as dict keys or deduplicated in
sets.  Sequence fields are stored as tuples to keep nested values hashable.

Wire names that are not valid (or not idiomatic) Python identifiers are
mapped through field aliases, e.g. ``self`` -> ``self_``, ``startIndex`` ->
``start_index`` and ``type`` -> ``message_type``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HipChatModel(BaseModel):
    """Base class for every HipChat resource."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_wire(cls, data: Any) -> Self:
        """Build an instance from a decoded JSON mapping using wire field names."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Build an instance from a JSON document."""
        return cls.model_validate_json(text)

    def to_wire(self, *, exclude_none: bool = False) -> dict[str, Any]:
        """Return the JSON-compatible mapping sent to or received from the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=exclude_none)


class PageRequest(HipChatModel):
    """Base class for list/filter parameters sent as a query string.

    Instances of the same request type are totally ordered by their field
    values in declaration order, with unset fields sorting first.
    """

    query_names: ClassVar[dict[str, str]] = {}

    def to_query(self) -> dict[str, str]:
        """Render the set fields as query parameters (booleans as ``true``/``false``)."""
        params: dict[str, str] = {}
        for name, param in self.query_names.items():
            value = getattr(self, name)
            if value is None:
                continue
            params[param] = str(value).lower() if isinstance(value, bool) else str(value)
        return params

    def _sort_key(self) -> tuple[tuple[bool, Any], ...]:
        return tuple(
            (getattr(self, name) is not None, getattr(self, name))
            for name in type(self).model_fields
        )

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() < other._sort_key()  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() <= other._sort_key()  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() > other._sort_key()  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() >= other._sort_key()  # type: ignore[attr-defined]


# --- Enumerations ---


class Color(StrEnum):
    """Background colour of a room notification."""

    YELLOW = "yellow"
    GREEN = "green"
    RED = "red"
    PURPLE = "purple"
    GRAY = "gray"
    RANDOM = "random"

    @classmethod
    def default(cls) -> Color:
        return cls.YELLOW


class MessageFormat(StrEnum):
    """How the server renders a message body."""

    HTML = "html"
    TEXT = "text"

    @classmethod
    def default(cls) -> MessageFormat:
        return cls.HTML


class MessageType(StrEnum):
    """Kind of entry in a room's history."""

    MESSAGE = "message"
    GUEST_ACCESS = "guest_access"
    TOPIC = "topic"
    NOTIFICATION = "notification"

    @classmethod
    def default(cls) -> MessageType:
        return cls.MESSAGE


class Privacy(StrEnum):
    """Room visibility."""

    PUBLIC = "public"
    PRIVATE = "private"

    @classmethod
    def default(cls) -> Privacy:
        return cls.PUBLIC


# --- Emoticons ---


class Emoticon(HipChatModel):
    """A custom emoticon."""

    id: int = Field(..., ge=0)
    shortcut: str
    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    audio_path: str | None = None
    url: str | None = None


# --- Rooms ---


class RoomsRequest(PageRequest):
    """Filters for listing rooms."""

    query_names: ClassVar[dict[str, str]] = {
        "start_index": "start-index",
        "max_results": "max-results",
        "include_private": "include-private",
        "include_archived": "include-archived",
    }

    start_index: int | None = Field(default=None, ge=0)
    max_results: int | None = Field(default=None, ge=0)
    include_private: bool | None = None
    include_archived: bool | None = None


class RoomsLinks(HipChatModel):
    """Pagination links of a room listing."""

    self_: str = Field(..., alias="self")
    prev: str | None = None
    next: str | None = None


class RoomDetailLinks(HipChatModel):
    """Links of a room."""

    self_: str = Field(..., alias="self")
    webhooks: str
    members: str | None = None
    participants: str


class Room(HipChatModel):
    """A room as it appears in a room listing."""

    id: int = Field(..., ge=0)
    name: str
    links: RoomDetailLinks


class Rooms(HipChatModel):
    """One page of rooms."""

    start_index: int = Field(..., ge=0, alias="startIndex")
    max_results: int = Field(..., ge=0, alias="maxResults")
    items: tuple[Room, ...] = ()
    links: RoomsLinks


class RoomDetailStatisticsLinks(HipChatModel):
    self_: str = Field(..., alias="self")


class RoomDetailStatistics(HipChatModel):
    """Pointer to a room's statistics resource."""

    links: RoomDetailStatisticsLinks


class RoomDetailOwnerLinks(HipChatModel):
    self_: str = Field(..., alias="self")


class RoomDetailOwner(HipChatModel):
    """The user who owns a room."""

    id: int = Field(..., ge=0)
    name: str
    mention_name: str
    links: RoomDetailOwnerLinks


class RoomDetail(HipChatModel):
    """Full details of a single room."""

    id: int = Field(..., ge=0)
    name: str
    xmpp_jid: str
    statistics: RoomDetailStatistics
    links: RoomDetailLinks
    created: str
    is_archived: bool
    privacy: Privacy
    is_guest_accessible: bool
    topic: str
    avatar_url: str | None = None
    guest_access_url: str | None = None
    owner: RoomDetailOwner | None = None


class RoomUpdateOwner(HipChatModel):
    id: str | None = None


class RoomUpdate(HipChatModel):
    """Fields to change on a room; unset fields are left out of the request body."""

    name: str | None = Field(default=None, min_length=1, max_length=50)
    privacy: Privacy | None = None
    is_archived: bool | None = None
    is_guest_accessible: bool | None = None
    topic: str | None = Field(default=None, max_length=250)
    owner: RoomUpdateOwner | None = None


class RoomMessage(HipChatModel):
    """Acknowledgement returned after posting a message to a room."""

    id: str
    timestamp: str


class Notification(HipChatModel):
    """A message posted to a room by an integration."""

    message: str = Field(..., min_length=1, max_length=10000)
    color: Color = Color.YELLOW
    notify: bool = False
    message_format: MessageFormat = MessageFormat.HTML


# --- Users ---


class UsersRequest(PageRequest):
    """Filters for listing users."""

    query_names: ClassVar[dict[str, str]] = {
        "start_index": "start-index",
        "max_results": "max-results",
        "include_guests": "include-guests",
        "include_deleted": "include-deleted",
    }

    start_index: int | None = Field(default=0, ge=0)
    max_results: int | None = Field(default=100, ge=0)
    include_guests: bool | None = False
    include_deleted: bool | None = False


class UsersLinks(HipChatModel):
    """Pagination links of a user listing."""

    self_: str = Field(..., alias="self")
    prev: str | None = None
    next: str | None = None


class UserDetailLinks(HipChatModel):
    self_: str = Field(..., alias="self")


class User(HipChatModel):
    """A user as it appears in a user listing."""

    id: int = Field(..., ge=0)
    name: str
    mention_name: str
    links: UserDetailLinks


class Users(HipChatModel):
    """One page of users."""

    start_index: int = Field(..., ge=0, alias="startIndex")
    max_results: int = Field(..., ge=0, alias="maxResults")
    items: tuple[User, ...] = ()
    links: UsersLinks


class UserClient(HipChatModel):
    """The chat client a user is connected with."""

    version: str | None = None
    client_type: str | None = Field(default=None, alias="type")


class UserPresence(HipChatModel):
    """Online status of a user."""

    show: str
    is_online: bool
    status: str | None = None
    idle: int | None = Field(default=None, ge=0)
    client: UserClient | None = None


class UserDetail(HipChatModel):
    """Full details of a single user."""

    id: int = Field(..., ge=0)
    name: str
    mention_name: str
    links: UserDetailLinks
    xmpp_jid: str | None = None
    email: str | None = None
    title: str | None = None
    timezone: str | None = None
    photo_url: str | None = None
    presence: UserPresence | None = None
    is_deleted: bool | None = None
    is_guest: bool | None = None
    is_group_admin: bool | None = None
    created: str | None = None
    last_active: str | None = None


class UserMessage(HipChatModel):
    """Acknowledgement of a private message."""

    id: str
    timestamp: str


# --- Messages ---


class MessagesRequest(PageRequest):
    """Filters for reading a room's history."""

    query_names: ClassVar[dict[str, str]] = {
        "start_index": "start-index",
        "max_results": "max-results",
        "reversed": "reverse",
        "date": "date",
        "include_deleted": "include_deleted",
        "timezone": "timezone",
        "end_date": "end-date",
    }

    start_index: int | None = Field(default=None, ge=0)
    max_results: int | None = Field(default=None, ge=0)
    reversed: bool | None = None
    date: str | None = None
    include_deleted: bool | None = None
    timezone: str | None = None
    end_date: str | None = None


class MessageDetailLinks(HipChatModel):
    self_: str = Field(..., alias="self")


class MessageFile(HipChatModel):
    """A file attached to a message."""

    name: str
    url: str
    size: int = Field(..., ge=0)
    thumb_url: str | None = None


class Message(HipChatModel):
    """An entry in a room's history.

    ``from_`` holds a :class:`UserDetail` for messages sent by users and a
    plain display name for notifications sent by integrations.
    """

    id: str
    date: str
    message: str
    message_type: MessageType = Field(default=MessageType.MESSAGE, alias="type")
    from_: UserDetail | str | None = Field(default=None, alias="from")
    message_format: MessageFormat | None = None
    color: Color | None = None
    mentions: tuple[str, ...] = ()
    file: MessageFile | None = None

    @field_validator("mentions", mode="before")
    @classmethod
    def _normalise_mentions(cls, v: Any) -> Any:
        """Reduce mentioned-user objects (``{"mention_name": ...}`` dicts) to mention names."""
        if isinstance(v, list | tuple):
            return [m.get("mention_name") if isinstance(m, dict) else m for m in v]
        return v


class Messages(HipChatModel):
    """One page of a room's history."""

    start_index: int = Field(..., ge=0, alias="startIndex")
    max_results: int = Field(..., ge=0, alias="maxResults")
    items: tuple[Message, ...] = ()
    links: MessageDetailLinks
