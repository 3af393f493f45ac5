from logging import getLogger
from typing import Any, Optional
from urllib.parse import urlsplit, urlunsplit

from httpx import (
    AsyncBaseTransport,
    AsyncClient,
    BaseTransport,
    Client,
    Headers,
    Response,
)
from opentelemetry import trace

from .._config import Config
from .._utils import RequestSpec, header_user_agent, redact_headers
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    CONTENT_TYPE_HTML,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_TEXT,
)
from ..models.exceptions import DecodeError, HTTPError, UnsupportedContentTypeError
from ..tracing import traced


def _url_for_trace(url: str) -> str:
    # Query strings may carry credentials.
    return urlunsplit(urlsplit(url)._replace(query="", fragment=""))


class BaseService:
    """Sends resolved requests and decodes their responses.

    Holds no per-call state: the configuration is immutable and every call
    builds its own request, so a single instance can serve concurrent calls.
    Timeouts and cancellation belong to the httpx transport.
    """

    def __init__(
        self,
        config: Config,
        *,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
    ) -> None:
        self._logger = getLogger("genapi")
        self._config = config

        default_client_kwargs = get_httpx_client_kwargs()

        client_kwargs = {
            **default_client_kwargs,  # SSL, proxy, timeout
            "headers": Headers(header_user_agent()),
        }

        self._client = Client(**client_kwargs, transport=transport)
        self._client_async = AsyncClient(**client_kwargs, transport=async_transport)

        super().__init__()

    @property
    def config(self) -> Config:
        return self._config

    @traced(name="genapi_execute", run_type="genapi")
    def execute(self, spec: RequestSpec) -> Any:
        """Send `spec` once and return the decoded body.

        Raises:
            HTTPError: On a non-2xx status. The body is not read.
            DecodeError: If a JSON body cannot be parsed.
            UnsupportedContentTypeError: If the response media type is not
                JSON, plain text or HTML.
            httpx.TransportError: On network failures, unchanged.
        """
        request = self._client.build_request(
            spec.method, spec.url, headers=spec.headers, content=spec.content
        )
        self._log_request(spec, request.headers)

        response = self._client.send(request, stream=True)
        try:
            self._raise_for_status(spec, response)
            response.read()
        finally:
            response.close()

        return self._decode(response)

    @traced(name="genapi_execute", run_type="genapi")
    async def execute_async(self, spec: RequestSpec) -> Any:
        """Asynchronously send `spec` once and return the decoded body.

        The await is the only suspension point. Cancelling the calling task
        cancels the in-flight request through httpx.

        Raises:
            HTTPError: On a non-2xx status. The body is not read.
            DecodeError: If a JSON body cannot be parsed.
            UnsupportedContentTypeError: If the response media type is not
                JSON, plain text or HTML.
            httpx.TransportError: On network failures, unchanged.
        """
        request = self._client_async.build_request(
            spec.method, spec.url, headers=spec.headers, content=spec.content
        )
        self._log_request(spec, request.headers)

        response = await self._client_async.send(request, stream=True)
        try:
            self._raise_for_status(spec, response)
            await response.aread()
        finally:
            await response.aclose()

        return self._decode(response)

    def close(self) -> None:
        self._client.close()

    async def aclose(self) -> None:
        await self._client_async.aclose()
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _log_request(self, spec: RequestSpec, headers: Headers) -> None:
        self._logger.debug(f"Request: {spec.method} {spec.url}")
        self._logger.debug(f"HEADERS: {redact_headers(headers)}")

        span = trace.get_current_span()
        span.set_attribute("http.request.method", spec.method)
        span.set_attribute("url.full", _url_for_trace(spec.url))

    def _raise_for_status(self, spec: RequestSpec, response: Response) -> None:
        self._logger.debug(f"Response: {response.status_code}")
        trace.get_current_span().set_attribute(
            "http.response.status_code", response.status_code
        )

        if not response.is_success:
            raise HTTPError(
                response.status_code, _url_for_trace(spec.url), response.reason_phrase
            )

    def _decode(self, response: Response) -> Any:
        content_type = response.headers.get("content-type")

        if content_type and CONTENT_TYPE_JSON in content_type:
            try:
                return response.json()
            except ValueError as e:
                raise DecodeError(content_type, str(e)) from e

        if content_type and (
            CONTENT_TYPE_TEXT in content_type or CONTENT_TYPE_HTML in content_type
        ):
            return response.text

        raise UnsupportedContentTypeError(content_type)
