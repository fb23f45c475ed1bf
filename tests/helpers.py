"""Shared test helpers for HipChat client tests."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, Mock

import httpx

ORIGIN = "https://hipchat.test"
API = f"{ORIGIN}/v2"


def make_response(
    status_code: int = 200,
    body: Any = None,
    headers: dict[str, str] | None = None,
) -> Mock:
    """Build a mock httpx.Response; 4xx/5xx statuses raise from raise_for_status()."""
    response = Mock(spec=httpx.Response)
    response.status_code = status_code
    response.headers = httpx.Headers(headers or {})
    response.is_error = status_code >= 400
    response.text = json.dumps(body) if body is not None else ""
    if body is None:
        response.json.side_effect = json.JSONDecodeError("Expecting value", "", 0)
    else:
        response.json.return_value = body
    if response.is_error:
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            f"HTTP {status_code}", request=Mock(), response=response
        )
    return response


def make_http_client(
    response: Mock | None = None, side_effect: Exception | None = None
) -> AsyncMock:
    """Build a mock httpx.AsyncClient usable as an async context manager."""
    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.request.side_effect = side_effect
    else:
        mock_client.request.return_value = response
    mock_client.__aenter__.return_value = mock_client
    mock_client.__aexit__.return_value = None
    return mock_client


def sent_request(mock_client: AsyncMock) -> tuple[str, str, dict[str, Any]]:
    """Return (method, url, kwargs) of the single request made on ``mock_client``."""
    mock_client.request.assert_called_once()
    args, kwargs = mock_client.request.call_args
    return args[0], args[1], kwargs
