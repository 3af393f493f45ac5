from typing import Any, Mapping, Optional

from .._utils import RequestSpec
from .._utils.constants import (
    CONTENT_TYPE_JSON,
    AcceptType,
    ContentType,
    HttpMethod,
)
from ._base_service import BaseService
from ._request_builder import build_request


class ApiClient(BaseService):
    """Client for making authenticated HTTP requests to a single API.

    The base URL, the authentication scheme and the content negotiation
    defaults are fixed when the client is created. Switching credentials
    requires a new client.

    Examples:
        ```python
        import os

        from genapi import ApiClient, Config
        from genapi.models import ApiKeyAuth

        config = Config(
            base_url="https://api.example.com/v2",
            auth=ApiKeyAuth(key=os.environ["EXAMPLE_API_KEY"]),
        )
        with ApiClient(config) as client:
            user = client.request("/users/42", query={"active": "true"})
        ```
    """

    @property
    def default_content_type(self) -> ContentType:
        if self._config.defaults is not None:
            return self._config.defaults.content_type
        return CONTENT_TYPE_JSON

    def build_request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        content_type: ContentType = CONTENT_TYPE_JSON,
        accept: AcceptType = CONTENT_TYPE_JSON,
        body: Any = None,
        query: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RequestSpec:
        """Build the request for `endpoint` without sending it.

        See `genapi.build_request` for the header precedence and body rules.
        """
        return build_request(
            self._config,
            endpoint,
            method=method,
            content_type=content_type,
            accept=accept,
            body=body,
            query=query,
            headers=headers,
        )

    def request(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        accept: AcceptType = CONTENT_TYPE_JSON,
        body: Any = None,
        query: Optional[Mapping[str, str]] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Build and send a request, returning the decoded response body.

        Args:
            endpoint (str): Path relative to the base URL, or an absolute URL.
            method (HttpMethod): The HTTP method. Defaults to GET.
            accept (AcceptType): The Accept header. Client defaults take precedence.
            body (Any): The request body, serialized by the client's default
                Content-Type. Ignored for GET and HEAD.
            query (Optional[Mapping[str, str]]): Query parameters.
            extra_headers (Optional[Mapping[str, str]]): Headers applied last;
                they override every computed header, Accept included.

        Returns:
            Any: Parsed JSON for JSON responses, text for plain text and HTML.
        """
        spec = self._facade_spec(endpoint, method, accept, body, query, extra_headers)
        return self.execute(spec)

    async def request_async(
        self,
        endpoint: str,
        method: HttpMethod = "GET",
        accept: AcceptType = CONTENT_TYPE_JSON,
        body: Any = None,
        query: Optional[Mapping[str, str]] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Asynchronously build and send a request, returning the decoded response body.

        Args:
            endpoint (str): Path relative to the base URL, or an absolute URL.
            method (HttpMethod): The HTTP method. Defaults to GET.
            accept (AcceptType): The Accept header. Client defaults take precedence.
            body (Any): The request body, serialized by the client's default
                Content-Type. Ignored for GET and HEAD.
            query (Optional[Mapping[str, str]]): Query parameters.
            extra_headers (Optional[Mapping[str, str]]): Headers applied last;
                they override every computed header, Accept included.

        Returns:
            Any: Parsed JSON for JSON responses, text for plain text and HTML.
        """
        spec = self._facade_spec(endpoint, method, accept, body, query, extra_headers)
        return await self.execute_async(spec)

    def _facade_spec(
        self,
        endpoint: str,
        method: HttpMethod,
        accept: AcceptType,
        body: Any,
        query: Optional[Mapping[str, str]],
        extra_headers: Optional[Mapping[str, str]],
    ) -> RequestSpec:
        return self.build_request(
            endpoint,
            method=method,
            content_type=self.default_content_type,
            accept=accept,
            body=body,
            query=query,
            headers=extra_headers,
        )
