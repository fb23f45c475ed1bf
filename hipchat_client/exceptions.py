"""Custom exceptions for the HipChat client."""


class HipChatError(Exception):
    """Base exception for HipChat client errors."""

    pass


class HipChatAuthError(HipChatError):
    """Authentication failed - invalid, expired or missing access token."""

    def __init__(self, message: str = "Invalid access token"):
        super().__init__(message)
        self.message = message


class HipChatStatusError(HipChatError):
    """HipChat answered with a non-success status code."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Unexpected status code {status_code}: {detail}")


class HipChatTimeoutError(HipChatError):
    """Request timed out waiting for HipChat."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Request timed out after {timeout_seconds}s")


class HipChatConnectionError(HipChatError):
    """Cannot reach the HipChat server."""

    def __init__(self, base_url: str, original_error: Exception):
        self.base_url = base_url
        self.original_error = original_error
        super().__init__(f"Cannot connect to {base_url}: {original_error}")


class HipChatDecodeError(HipChatError):
    """Response body is not valid JSON or does not match the expected resource."""

    def __init__(self, resource: str, original_error: Exception):
        self.resource = resource
        self.original_error = original_error
        super().__init__(f"Cannot decode {resource}: {original_error}")


class HipChatResponseError(HipChatError):
    """Response is well-formed but lacks data the operation needs."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
