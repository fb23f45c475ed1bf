"""Logging setup for the HipChat client.

Client code logs through ``logging.getLogger(__name__)`` and attaches the
HTTP call and the room/user it concerns via ``extra=``::

    logger.info("Deleted room %s", room, extra={"room": room})
    logger.debug("%s %s", method, path, extra={"method": method, "path": path})

:func:`setup_logging` turns that context into JSON lines (or a readable
console suffix) and masks access tokens before anything is written.
"""

from __future__ import annotations

import json
import logging
import os
import re
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "hipchat_client"
LEVEL_ENV_VAR = "HIPCHAT_LOG_LEVEL"

REQUEST_FIELDS = ("method", "path", "status")
RESOURCE_FIELDS = ("room", "user")

_TOKEN_PATTERNS = (
    re.compile(r"(Bearer\s+)[^\s'\",]+", re.IGNORECASE),
    re.compile(r"(auth_token=)[^&\s'\"]+"),
)
REDACTED = "***"


def redact_tokens(text: str) -> str:
    """Mask bearer tokens and ``auth_token`` query parameters in ``text``."""
    for pattern in _TOKEN_PATTERNS:
        text = pattern.sub(rf"\g<1>{REDACTED}", text)
    return text


def request_context(record: logging.LogRecord) -> dict[str, object]:
    """Collect the ``method``/``path``/``status`` extras present on ``record``."""
    return {
        key: getattr(record, key)
        for key in REQUEST_FIELDS
        if getattr(record, key, None) is not None
    }


class TokenRedactingFilter(logging.Filter):
    """Rewrite records so no access token reaches a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_tokens(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class JSONFormatter(logging.Formatter):
    """Emit log records as single-line JSON.

    HTTP context is nested under ``"request"``; the room or user an
    operation targeted is kept at the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        request = request_context(record)
        if request:
            entry["request"] = request
        for key in RESOURCE_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = redact_tokens(self.formatException(record.exc_info))
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Plain-text lines with the HTTP call appended, e.g. ``[GET /room/7 404]``."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        request = request_context(record)
        if request:
            line += " [" + " ".join(str(v) for v in request.values()) + "]"
        return line


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv(LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        return resolved
    return level


def setup_logging(
    *,
    level: int | str | None = None,
    json_output: bool = True,
    log_file: str | Path | None = None,
    quiet_httpx: bool = True,
) -> logging.Logger:
    """Configure the ``hipchat_client`` logger.

    Parameters
    ----------
    level:
        Level as an int or a name such as ``"debug"``.  Defaults to the
        ``HIPCHAT_LOG_LEVEL`` environment variable, then ``INFO``.
    json_output:
        If *True*, write JSON lines to stdout; otherwise use
        :class:`ConsoleFormatter`.
    log_file:
        Optional path to a log file, rotated at 10 MB with 5 backups and
        always JSON-formatted.
    quiet_httpx:
        Raise the ``httpx`` logger to ``WARNING`` so its per-request INFO
        lines do not duplicate the client's own.

    Returns
    -------
    logging.Logger
        The configured ``hipchat_client`` logger.
    """
    resolved = _resolve_level(level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolved)
    for handler in logger.handlers[:]:
        handler.close()
    logger.handlers.clear()

    redact = TokenRedactingFilter()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(resolved)
    console.setFormatter(JSONFormatter() if json_output else ConsoleFormatter())
    console.addFilter(redact)
    logger.addHandler(console)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
        file_handler.setLevel(resolved)
        file_handler.setFormatter(JSONFormatter())
        file_handler.addFilter(redact)
        logger.addHandler(file_handler)

    if quiet_httpx:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    return logger
