"""Exceptions raised by phonelogs."""

from typing import Optional


class PhoneLogsError(Exception):
    """Base class for all phonelogs errors."""


class InvalidArgument(PhoneLogsError, ValueError):
    """A caller-supplied argument is invalid.

    Raised before any request is issued, so it always signals a programming
    error rather than a transient failure.
    """

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{argument}: {message}")
        self.argument = argument


class RequestFailed(PhoneLogsError):
    """The HTTP request failed or its body could not be decoded.

    Attributes:
        status_code: HTTP status code, or ``None`` when no response was received.
        body: Response body text, or the transport error message.
    """

    def __init__(self, status_code: Optional[int], body: str) -> None:
        if status_code is None:
            message = f"Request failed: {body}"
        else:
            message = f"Request failed with status {status_code}: {body}"
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class Cancelled(PhoneLogsError):
    """The caller cancelled the operation before it completed."""
