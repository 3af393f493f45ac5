from .auth import (
    ApiKeyAuth,
    AuthKind,
    AuthScheme,
    BasicAuth,
    BearerAuth,
    JwtAuth,
    NoAuth,
    OAuth2Auth,
    TokenAuth,
    auth_scheme_from_mapping,
)
from .errors import BaseUrlMissingError, CredentialsMissingError
from .exceptions import (
    ApiClientError,
    DecodeError,
    HTTPError,
    InvalidURLError,
    TransportError,
    UnsupportedContentTypeError,
)

__all__ = [
    "ApiKeyAuth",
    "AuthKind",
    "AuthScheme",
    "BasicAuth",
    "BearerAuth",
    "JwtAuth",
    "NoAuth",
    "OAuth2Auth",
    "TokenAuth",
    "auth_scheme_from_mapping",
    "BaseUrlMissingError",
    "CredentialsMissingError",
    "ApiClientError",
    "DecodeError",
    "HTTPError",
    "InvalidURLError",
    "TransportError",
    "UnsupportedContentTypeError",
]
