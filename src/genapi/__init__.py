"""Generic HTTP API client.

Given a base URL and an authentication scheme, builds fully resolved requests
(URL, headers, body) and executes them, decoding responses by content type.

Example:
```python
    # First set these environment variables:
    # export GENAPI_URL="https://api.example.com/v2"
    # export GENAPI_AUTH_KIND="apikey"
    # export GENAPI_API_KEY="your_**_key"

    from genapi import GenApi
    sdk = GenApi()
    sdk.api_client.request("/users/42", query={"active": "true"})
```
"""

from ._config import Config, NegotiationDefaults
from ._genapi import GenApi
from ._services import ApiClient, build_request
from ._utils import RequestSpec, resolve_auth_headers

__all__ = [
    "ApiClient",
    "Config",
    "GenApi",
    "NegotiationDefaults",
    "RequestSpec",
    "build_request",
    "resolve_auth_headers",
]
