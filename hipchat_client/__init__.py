"""Client library and resource models for the HipChat v2 REST API."""

from .client import HipChatClient, get_client
from .config import HipChatClientConfig, load_settings_file
from .exceptions import (
    HipChatAuthError,
    HipChatConnectionError,
    HipChatDecodeError,
    HipChatError,
    HipChatResponseError,
    HipChatStatusError,
    HipChatTimeoutError,
)
from .log import JSONFormatter, setup_logging
from .models import (
    Color,
    Emoticon,
    HipChatModel,
    Message,
    MessageDetailLinks,
    MessageFile,
    MessageFormat,
    Messages,
    MessagesRequest,
    MessageType,
    Notification,
    PageRequest,
    Privacy,
    Room,
    RoomDetail,
    RoomDetailLinks,
    RoomDetailOwner,
    RoomDetailOwnerLinks,
    RoomDetailStatistics,
    RoomDetailStatisticsLinks,
    RoomMessage,
    Rooms,
    RoomsLinks,
    RoomsRequest,
    RoomUpdate,
    RoomUpdateOwner,
    User,
    UserClient,
    UserDetail,
    UserDetailLinks,
    UserMessage,
    UserPresence,
    Users,
    UsersLinks,
    UsersRequest,
)

__all__ = [
    # Client
    "HipChatClient",
    "get_client",
    # Config
    "HipChatClientConfig",
    "load_settings_file",
    # Logging
    "JSONFormatter",
    "setup_logging",
    # Enumerations
    "Color",
    "MessageFormat",
    "MessageType",
    "Privacy",
    # Models
    "HipChatModel",
    "PageRequest",
    "Emoticon",
    "Room",
    "RoomDetail",
    "RoomDetailLinks",
    "RoomDetailOwner",
    "RoomDetailOwnerLinks",
    "RoomDetailStatistics",
    "RoomDetailStatisticsLinks",
    "RoomMessage",
    "RoomUpdate",
    "RoomUpdateOwner",
    "Rooms",
    "RoomsLinks",
    "RoomsRequest",
    "Notification",
    "User",
    "UserClient",
    "UserDetail",
    "UserDetailLinks",
    "UserMessage",
    "UserPresence",
    "Users",
    "UsersLinks",
    "UsersRequest",
    "Message",
    "MessageDetailLinks",
    "MessageFile",
    "Messages",
    "MessagesRequest",
    # Exceptions
    "HipChatError",
    "HipChatAuthError",
    "HipChatStatusError",
    "HipChatTimeoutError",
    "HipChatConnectionError",
    "HipChatDecodeError",
    "HipChatResponseError",
]
