from typing import Any, Mapping, Optional

from httpx import Headers

from .._config import Config
from .._utils import ApiUrl, RequestSpec, encode_body, resolve_auth_headers
from .._utils.constants import (
    BODYLESS_METHODS,
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_CONTENT_TYPE,
    AcceptType,
    ContentType,
    HttpMethod,
)


def build_request(
    config: Config,
    endpoint: str,
    method: HttpMethod = "GET",
    content_type: ContentType = CONTENT_TYPE_JSON,
    accept: AcceptType = CONTENT_TYPE_JSON,
    body: Any = None,
    query: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RequestSpec:
    """Build a transport-ready request. Performs no I/O.

    Headers are merged in this order, later values winning regardless of case:
    the per-call `content_type`/`accept`, the auth headers, `config.defaults`,
    then the explicit `headers`. The body is serialized according to the
    resulting Content-Type, and dropped for GET and HEAD.

    Args:
        config (Config): The client configuration.
        endpoint (str): Path relative to the base URL, or an absolute URL.
        method (HttpMethod): The HTTP method.
        content_type (ContentType): Per-call Content-Type.
        accept (AcceptType): Per-call Accept.
        body (Any): The request body, or None for no body.
        query (Optional[Mapping[str, str]]): Query parameters, sent in iteration order.
        headers (Optional[Mapping[str, str]]): Extra headers, applied last.

    Returns:
        RequestSpec: The resolved request.

    Raises:
        InvalidURLError: If base URL and endpoint do not form a valid absolute URL.
        UnsupportedContentTypeError: If a body is present and the effective
            Content-Type is not JSON, form or multipart.
    """
    method = method.upper()  # type: ignore[assignment]
    params = dict(query or {})

    merged = Headers({HEADER_CONTENT_TYPE: content_type, HEADER_ACCEPT: accept})
    merged.update(resolve_auth_headers(config.auth))
    if config.defaults is not None:
        merged.update(config.defaults.as_headers())
    if headers:
        merged.update(headers)

    url = ApiUrl(config.base_url).join(endpoint, params)

    content = None
    if body is not None and method not in BODYLESS_METHODS:
        content, effective_content_type = encode_body(
            merged.get(HEADER_CONTENT_TYPE), body
        )
        merged[HEADER_CONTENT_TYPE] = effective_content_type

    return RequestSpec(
        method=method,
        url=url,
        endpoint=endpoint,
        headers=merged,
        params=params,
        content=content,
    )
