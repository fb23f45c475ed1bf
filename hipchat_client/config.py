"""Configuration for the HipChat client."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HipChatClientConfig:
    """Configuration for the HipChat client.

    All values have sensible defaults and can be overridden via constructor,
    environment variables or a JSON settings file.
    """

    # Service discovery
    origin: str = "https://api.hipchat.com"
    """Scheme and host of the HipChat server; the API lives under ``<origin>/v2``"""

    # Authentication
    token: str | None = None
    """Bearer access token (default: from HIPCHAT_TOKEN env var)"""

    # Timeouts (seconds)
    request_timeout: float = 30.0
    """HTTP request timeout in seconds"""

    connect_timeout: float = 5.0
    """HTTP connection timeout in seconds"""

    @property
    def base_url(self) -> str:
        return f"{self.origin.rstrip('/')}/v2"

    @classmethod
    def from_env(cls) -> "HipChatClientConfig":
        """Create config from environment variables.

        Environment variables:
        - HIPCHAT_ORIGIN: HipChat server origin
        - HIPCHAT_TOKEN: access token
        - HIPCHAT_TIMEOUT: request timeout in seconds
        - HIPCHAT_CONNECT_TIMEOUT: connection timeout in seconds
        """
        return cls(
            origin=os.getenv("HIPCHAT_ORIGIN", cls.origin),
            token=os.getenv("HIPCHAT_TOKEN"),
            request_timeout=float(os.getenv("HIPCHAT_TIMEOUT", cls.request_timeout)),
            connect_timeout=float(
                os.getenv("HIPCHAT_CONNECT_TIMEOUT", cls.connect_timeout)
            ),
        )

    @classmethod
    def from_file(cls, path: Path | str) -> "HipChatClientConfig":
        """Create config from a JSON settings file.

        Recognised keys are ``origin``, ``token``, ``request_timeout`` and
        ``connect_timeout``; anything else is ignored.  A missing or invalid
        file yields the defaults, and a ``null`` or empty value keeps the default
        for that key.
        """
        settings = load_settings_file(Path(path))
        data = {key: value for key, value in settings.items() if value is not None}
        return cls(
            origin=data.get("origin") or cls.origin,
            token=data.get("token") or None,
            request_timeout=float(data.get("request_timeout", cls.request_timeout)),
            connect_timeout=float(data.get("connect_timeout", cls.connect_timeout)),
        )


def load_settings_file(path: Path | None) -> dict[str, Any]:
    """Load a JSON settings file and return its contents as a dict.

    Returns an empty dict if the file is missing, unreadable, or invalid.
    """
    if path is None:
        return {}
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Ignoring settings file %s: invalid JSON (%s)", path, e)
        return {}
    except OSError as e:
        logger.warning("Ignoring settings file %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return {}
    return data
