from ._auth import resolve_auth_headers
from ._body import encode_body, media_type
from ._endpoint import Endpoint
from ._logs import redact_headers, setup_logging
from ._request_spec import RequestSpec
from ._url import ApiUrl
from ._user_agent import header_user_agent

__all__ = [
    "ApiUrl",
    "Endpoint",
    "RequestSpec",
    "encode_body",
    "header_user_agent",
    "media_type",
    "redact_headers",
    "resolve_auth_headers",
    "setup_logging",
]
