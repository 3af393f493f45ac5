from typing import Optional

from httpx import TransportError


class ApiClientError(Exception):
    """Base class for errors raised while building or executing a request."""


class InvalidURLError(ApiClientError, ValueError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL '{url}': {reason}")


class UnsupportedContentTypeError(ApiClientError):
    """Raised when a body or a response uses a media type the client cannot handle."""

    def __init__(self, content_type: Optional[str]) -> None:
        self.content_type = content_type
        super().__init__(f"Unsupported content type: {content_type}")


class HTTPError(ApiClientError):
    """A non-2xx response. The response body is never read."""

    def __init__(self, status_code: int, url: str = "", reason: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.reason = reason

        message = f"HTTP error! status: {status_code}"
        if reason:
            message += f" {reason}"
        if url:
            message += f"\nRequest URL: {url}"
        super().__init__(message)


class DecodeError(ApiClientError):
    def __init__(self, content_type: str, message: str) -> None:
        self.content_type = content_type
        super().__init__(f"Failed to decode '{content_type}' response: {message}")


__all__ = [
    "ApiClientError",
    "InvalidURLError",
    "UnsupportedContentTypeError",
    "HTTPError",
    "DecodeError",
    "TransportError",
]
