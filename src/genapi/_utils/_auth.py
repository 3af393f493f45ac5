import base64

from typing_extensions import assert_never

from ..models.auth import (
    ApiKeyAuth,
    AuthScheme,
    BasicAuth,
    BearerAuth,
    JwtAuth,
    NoAuth,
    OAuth2Auth,
    TokenAuth,
)
from .constants import HEADER_API_KEY, HEADER_AUTHORIZATION, HEADER_TOKEN


def resolve_auth_headers(scheme: AuthScheme) -> dict[str, str]:
    """Produce the headers required by an authentication scheme.

    Every scheme maps to exactly one header, except `none` which maps to no
    header at all. Adding a scheme means adding one case here.

    Examples:
        >>> resolve_auth_headers(JwtAuth(token="abc"))
        {'Authorization': 'JWT abc'}
        >>> resolve_auth_headers(NoAuth())
        {}
    """
    match scheme:
        case BasicAuth(username=username, password=password):
            credentials = f"{username}:{password.get_secret_value()}".encode("utf-8")
            encoded = base64.b64encode(credentials).decode("ascii")
            return {HEADER_AUTHORIZATION: f"Basic {encoded}"}
        case JwtAuth(token=token):
            return {HEADER_AUTHORIZATION: f"JWT {token.get_secret_value()}"}
        case BearerAuth(token=token) | OAuth2Auth(token=token):
            return {HEADER_AUTHORIZATION: f"Bearer {token.get_secret_value()}"}
        case ApiKeyAuth(key=key):
            return {HEADER_API_KEY: key.get_secret_value()}
        case TokenAuth(token=token):
            return {HEADER_TOKEN: token.get_secret_value()}
        case NoAuth():
            return {}
        case _:
            assert_never(scheme)
