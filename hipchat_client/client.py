"""
HTTP client for the HipChat v2 REST API.

Each operation issues exactly one request and decodes the response into
the immutable resource models from :mod:`hipchat_client.models`.  Paging
through ``links.next`` is left to the caller.
"""

import json
import logging
from typing import Any, NoReturn, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .config import HipChatClientConfig
from .exceptions import (
    HipChatAuthError,
    HipChatConnectionError,
    HipChatDecodeError,
    HipChatResponseError,
    HipChatStatusError,
    HipChatTimeoutError,
)
from .models import (
    Emoticon,
    HipChatModel,
    MessageFormat,
    Messages,
    MessagesRequest,
    Notification,
    RoomDetail,
    RoomMessage,
    Rooms,
    RoomsRequest,
    RoomUpdate,
    UserDetail,
    Users,
    UsersRequest,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=HipChatModel)


def _segment(identifier: str | int) -> str:
    """Percent-encode a room/user identifier for use as a path segment."""
    return quote(str(identifier), safe="@")


class HipChatClient:
    """HTTP client for the HipChat v2 REST API."""

    def __init__(self, config: HipChatClientConfig | None = None):
        """
        Initialize HipChat client.

        Args:
            config: Client configuration (default: from environment variables)
        """
        self.config = config or HipChatClientConfig.from_env()

        if not self.config.token:
            logger.warning("HIPCHAT_TOKEN not set - requests will fail authentication")

    @property
    def base_url(self) -> str:
        return self.config.base_url

    # --- Emoticons ---

    async def get_emoticon(self, emoticon_id_or_shortcut: str | int) -> Emoticon:
        """Retrieve a custom emoticon by id or shortcut."""
        response = await self._request(
            "GET", f"/emoticon/{_segment(emoticon_id_or_shortcut)}"
        )
        return self._decode(response, Emoticon)

    # --- Rooms ---

    async def get_room(self, room_id_or_name: str | int) -> RoomDetail:
        """Retrieve details of a room."""
        response = await self._request("GET", f"/room/{_segment(room_id_or_name)}")
        return self._decode(response, RoomDetail)

    async def update_room(self, room_id_or_name: str | int, update: RoomUpdate) -> None:
        """Update a room; fields left unset on ``update`` are not sent."""
        await self._request(
            "PUT",
            f"/room/{_segment(room_id_or_name)}",
            json_body=update.to_wire(exclude_none=True),
        )
        logger.info("Updated room %s", room_id_or_name, extra={"room": room_id_or_name})

    async def delete_room(self, room_id_or_name: str | int) -> None:
        """Delete a room."""
        await self._request("DELETE", f"/room/{_segment(room_id_or_name)}")
        logger.info("Deleted room %s", room_id_or_name, extra={"room": room_id_or_name})

    async def get_rooms(self, request: RoomsRequest | None = None) -> Rooms:
        """Retrieve one page of rooms."""
        params = request.to_query() if request is not None else {}
        response = await self._request("GET", "/room", params=params)
        rooms = self._decode(response, Rooms)
        logger.info("Fetched %d rooms", len(rooms.items))
        return rooms

    async def get_room_avatar(self, room_id_or_name: str | int) -> str:
        """Return the URL of a room's avatar image.

        HipChat answers with a redirect; the target is read from the
        ``Location`` header rather than followed.

        Raises:
            HipChatResponseError: The response carries no ``Location`` header
        """
        response = await self._request(
            "GET", f"/room/{_segment(room_id_or_name)}/avatar"
        )
        location = response.headers.get("location")
        if not location:
            raise HipChatResponseError(
                f"No Location header in avatar response for room {room_id_or_name}"
            )
        return location

    async def update_room_avatar(self, room_id_or_name: str | int, avatar: str) -> None:
        """Replace a room's avatar with a base64-encoded image."""
        await self._request(
            "PUT",
            f"/room/{_segment(room_id_or_name)}/avatar",
            json_body={"avatar": avatar},
        )

    async def delete_room_avatar(self, room_id_or_name: str | int) -> None:
        """Remove a room's avatar."""
        await self._request("DELETE", f"/room/{_segment(room_id_or_name)}/avatar")

    async def send_notification(
        self, room_id_or_name: str | int, notification: Notification
    ) -> None:
        """Post a notification to a room."""
        await self._request(
            "POST",
            f"/room/{_segment(room_id_or_name)}/notification",
            json_body=notification.to_wire(exclude_none=True),
        )
        logger.debug(
            "Sent notification to room %s", room_id_or_name, extra={"room": room_id_or_name}
        )

    async def send_room_message(
        self, room_id_or_name: str | int, message: str
    ) -> RoomMessage:
        """Post a message to a room as the token's user."""
        response = await self._request(
            "POST",
            f"/room/{_segment(room_id_or_name)}/message",
            json_body={"message": message},
        )
        return self._decode(response, RoomMessage)

    async def get_room_history(
        self, room_id_or_name: str | int, request: MessagesRequest | None = None
    ) -> Messages:
        """Retrieve one page of a room's history."""
        params = request.to_query() if request is not None else {}
        response = await self._request(
            "GET", f"/room/{_segment(room_id_or_name)}/history", params=params
        )
        messages = self._decode(response, Messages)
        logger.info(
            "Fetched %d messages from room %s",
            len(messages.items),
            room_id_or_name,
            extra={"room": room_id_or_name},
        )
        return messages

    # --- Users ---

    async def get_users(self, request: UsersRequest | None = None) -> Users:
        """Retrieve one page of users."""
        params = request.to_query() if request is not None else {}
        response = await self._request("GET", "/user", params=params)
        users = self._decode(response, Users)
        logger.info("Fetched %d users", len(users.items))
        return users

    async def get_user(self, user_id_or_email: str | int) -> UserDetail:
        """Retrieve details of a user by id, ``@mention`` name or e-mail."""
        response = await self._request("GET", f"/user/{_segment(user_id_or_email)}")
        return self._decode(response, UserDetail)

    async def send_private_message(
        self,
        user_id_or_email: str | int,
        message: str,
        notify: bool = False,
        message_format: MessageFormat = MessageFormat.TEXT,
    ) -> None:
        """Send a one-to-one message to a user."""
        await self._request(
            "POST",
            f"/user/{_segment(user_id_or_email)}/message",
            json_body={
                "message": message,
                "notify": notify,
                "message_format": MessageFormat(message_format).value,
            },
        )
        logger.debug(
            "Sent private message to %s",
            user_id_or_email,
            extra={"user": user_id_or_email},
        )

    # --- Transport ---

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request and translate transport/status failures.

        Raises:
            HipChatAuthError: Authentication failed
            HipChatStatusError: Non-success status code
            HipChatTimeoutError: Request timed out
            HipChatConnectionError: Cannot reach the server
            HipChatDecodeError: Response body cannot be content-decoded
        """
        url = f"{self.base_url}{path}"
        headers = self._build_headers(with_body=json_body is not None)
        content = json.dumps(json_body) if json_body is not None else None

        logger.debug("%s %s", method, path, extra={"method": method, "path": path})

        try:
            response = await self._execute_request(
                method, url, headers=headers, params=params, content=content
            )
        except httpx.HTTPStatusError as e:
            self._handle_http_error(e)
        except httpx.TimeoutException as e:
            raise HipChatTimeoutError(self.config.request_timeout) from e
        except httpx.DecodingError as e:
            raise HipChatDecodeError("response body", e) from e
        except httpx.RequestError as e:
            raise HipChatConnectionError(self.base_url, e) from e

        logger.debug(
            "%s %s returned %d",
            method,
            path,
            response.status_code,
            extra={"method": method, "path": path, "status": response.status_code},
        )
        return response

    def _build_headers(self, with_body: bool = False) -> dict[str, str]:
        """Build request headers."""
        headers = {"Authorization": f"Bearer {self.config.token or ''}"}
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    async def _execute_request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        params: dict[str, str] | None = None,
        content: str | None = None,
    ) -> httpx.Response:
        """Execute a single HTTP request; redirects are returned, not followed."""
        timeout = httpx.Timeout(
            self.config.request_timeout, connect=self.config.connect_timeout
        )
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=False) as client:
            response = await client.request(
                method, url, headers=headers, params=params, content=content
            )
            if response.is_error:
                response.raise_for_status()
            return response

    def _handle_http_error(self, error: httpx.HTTPStatusError) -> NoReturn:
        """Raise the client exception matching an HTTP error status."""
        status_code = error.response.status_code
        logger.warning("HipChat returned %d", status_code, extra={"status": status_code})

        if status_code == 401:
            raise HipChatAuthError("Invalid access token") from error
        raise HipChatStatusError(status_code, error.response.text) from error

    def _decode(self, response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Decode a JSON response body into ``model``.

        Raises:
            HipChatDecodeError: Body is not UTF-8 JSON or does not match ``model``
        """
        try:
            return model.from_wire(response.json())
        except (UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
            raise HipChatDecodeError(model.__name__, e) from e


# Singleton instance
_client: HipChatClient | None = None


def get_client(config: HipChatClientConfig | None = None) -> HipChatClient:
    """Get global HipChat client instance.

    Args:
        config: Optional config for first initialization

    Returns:
        Singleton HipChatClient instance
    """
    global _client
    if _client is None:
        _client = HipChatClient(config=config)
        logger.info("HipChat client initialized for %s", _client.base_url)
    return _client
