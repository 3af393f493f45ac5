from typing import Literal

# Environment variables
ENV_BASE_URL = "GENAPI_URL"
ENV_AUTH_KIND = "GENAPI_AUTH_KIND"
ENV_USERNAME = "GENAPI_USERNAME"
ENV_PASSWORD = "GENAPI_PASSWORD"
ENV_TOKEN = "GENAPI_TOKEN"
ENV_API_KEY = "GENAPI_API_KEY"
ENV_CONTENT_TYPE = "GENAPI_CONTENT_TYPE"
ENV_ACCEPT = "GENAPI_ACCEPT"
ENV_DISABLE_SSL_VERIFY = "GENAPI_DISABLE_SSL_VERIFY"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_API_KEY = "x-api-key"
HEADER_TOKEN = "token"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"

SENSITIVE_HEADERS = frozenset(
    {"authorization", "proxy-authorization", HEADER_API_KEY, HEADER_TOKEN}
)

# Media types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data"
CONTENT_TYPE_XML = "application/xml"
CONTENT_TYPE_TEXT = "text/plain"
CONTENT_TYPE_HTML = "text/html"

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]
ContentType = Literal[
    "application/json",
    "application/x-www-form-urlencoded",
    "multipart/form-data",
]
AcceptType = Literal["application/json", "application/xml", "text/plain", "text/html"]

BODYLESS_METHODS = frozenset({"GET", "HEAD"})
