import re
from typing import Mapping, Optional
from urllib.parse import urlencode, urlsplit, urlunsplit

from httpx import URL, InvalidURL

from ..models.exceptions import InvalidURLError
from ._endpoint import Endpoint

_FORBIDDEN_CHARS = re.compile(r"[\x00-\x20\x7f]")
_HTTP_SCHEMES = ("http", "https")


class ApiUrl:
    """The base URL of an API, able to resolve endpoints against itself.

    Relative endpoints are appended to the base URL so that its own path
    prefix is kept. Absolute http(s) endpoints are used as they are.

    >>> url = ApiUrl("https://api.example.com/v2")
    >>> url.join("/users/42", {"active": "true"})
    'https://api.example.com/v2/users/42?active=true'
    >>> url.join("items:batchGet")
    'https://api.example.com/v2/items:batchGet'

    Args:
        url (str): The base URL. Must be an absolute http(s) URL without a query
            string or fragment.

    Raises:
        InvalidURLError: If the base URL is not a valid absolute URL.
    """

    def __init__(self, url: str):
        self._url = url
        self._parsed = self._validate_base(url)

    def __str__(self):
        return self._url

    def __repr__(self):
        return f"ApiUrl({self._url})"

    def join(self, endpoint: str, query: Optional[Mapping[str, str]] = None) -> str:
        """Resolve `endpoint` and append `query` in the caller's order."""
        if _FORBIDDEN_CHARS.search(endpoint):
            raise InvalidURLError(endpoint, "whitespace or control characters")

        if self._is_relative_url(endpoint):
            # Split by hand: urlsplit reads "items:batchGet" as a scheme.
            rest, _, fragment = endpoint.partition("#")
            relative_path, _, relative_query = rest.partition("?")
            path = self._parsed.path.rstrip("/")
            if relative_path:
                path += Endpoint(relative_path)
            parts = self._parsed._replace(
                path=path, query=relative_query, fragment=fragment
            )
        else:
            parts = urlsplit(endpoint)
            if not parts.scheme:
                parts = parts._replace(scheme=self._parsed.scheme)
            if not parts.hostname:
                raise InvalidURLError(endpoint, "missing host")

        if query:
            encoded = urlencode(list(query.items()))
            parts = parts._replace(
                query=f"{parts.query}&{encoded}" if parts.query else encoded
            )

        url = urlunsplit(parts)
        try:
            URL(url)
        except InvalidURL as e:
            raise InvalidURLError(url, str(e)) from e

        return url

    @staticmethod
    def _validate_base(url: str):
        if not url or _FORBIDDEN_CHARS.search(url):
            raise InvalidURLError(url, "empty or contains whitespace")

        parsed = urlsplit(url)
        if parsed.scheme not in _HTTP_SCHEMES:
            raise InvalidURLError(url, "scheme must be http or https")
        if not parsed.hostname:
            raise InvalidURLError(url, "missing host")
        if parsed.query or parsed.fragment:
            raise InvalidURLError(url, "base URL cannot carry a query or fragment")

        try:
            parsed.port
        except ValueError as e:
            raise InvalidURLError(url, str(e)) from e

        return parsed

    def _is_relative_url(self, url: str) -> bool:
        # Empty URLs are considered relative
        if not url:
            return True

        # Protocol-relative URLs (starting with //) are not relative
        if url.startswith("//"):
            return False

        # Only http(s) URLs are absolute; "items:batchGet" is a path segment
        return urlsplit(url).scheme.lower() not in _HTTP_SCHEMES
