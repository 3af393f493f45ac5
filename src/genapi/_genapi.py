from os import environ as env
from typing import Any, Optional

from dotenv import load_dotenv
from httpx import AsyncBaseTransport, BaseTransport
from pydantic import ValidationError

from ._config import Config, NegotiationDefaults
from ._services import ApiClient
from ._utils import setup_logging
from ._utils.constants import (
    ENV_ACCEPT,
    ENV_API_KEY,
    ENV_AUTH_KIND,
    ENV_BASE_URL,
    ENV_CONTENT_TYPE,
    ENV_PASSWORD,
    ENV_TOKEN,
    ENV_USERNAME,
)
from .models.auth import AuthScheme, auth_scheme_from_mapping
from .models.errors import BaseUrlMissingError, CredentialsMissingError


def auth_from_env() -> AuthScheme:
    """Build the auth scheme described by the GENAPI_* environment variables.

    Raises:
        CredentialsMissingError: If the kind is unknown or its credentials are
            missing.
    """
    kind = env.get(ENV_AUTH_KIND, "none").strip().lower()

    payload: dict[str, Any] = {}
    if kind == "basic":
        payload = {"username": env.get(ENV_USERNAME), "password": env.get(ENV_PASSWORD)}
    elif kind in ("jwt", "bearer", "oauth2", "token"):
        payload = {"token": env.get(ENV_TOKEN)}
    elif kind == "apikey":
        payload = {"key": env.get(ENV_API_KEY)}

    try:
        return auth_scheme_from_mapping(kind, **payload)
    except ValidationError as e:
        raise CredentialsMissingError() from e


def defaults_from_env() -> Optional[NegotiationDefaults]:
    content_type = env.get(ENV_CONTENT_TYPE)
    accept = env.get(ENV_ACCEPT)
    if content_type is None and accept is None:
        return None

    values = {}
    if content_type is not None:
        values["content_type"] = content_type
    if accept is not None:
        values["accept"] = accept
    return NegotiationDefaults.model_validate(values)


class GenApi:
    """Entry point that assembles an `ApiClient` from arguments or the environment.

    Arguments left out are read from the environment after `.env` is loaded.

    Examples:
        ```python
        # export GENAPI_URL="https://api.example.com/v2"
        # export GENAPI_AUTH_KIND="bearer"
        # export GENAPI_TOKEN="..."

        from genapi import GenApi

        sdk = GenApi()
        sdk.api_client.request("/users/42")
        ```
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        auth: Optional[AuthScheme] = None,
        defaults: Optional[NegotiationDefaults] = None,
        debug: bool = False,
        transport: Optional[BaseTransport] = None,
        async_transport: Optional[AsyncBaseTransport] = None,
    ) -> None:
        load_dotenv()

        base_url_value = base_url or env.get(ENV_BASE_URL)
        auth_value = auth if auth is not None else auth_from_env()
        defaults_value = defaults if defaults is not None else defaults_from_env()

        try:
            self._config = Config(
                base_url=base_url_value,  # type: ignore
                auth=auth_value,
                defaults=defaults_value,
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"][0] == "base_url":
                    raise BaseUrlMissingError() from e
                elif error["loc"][0] == "auth":
                    raise CredentialsMissingError() from e
            raise

        self._transport = transport
        self._async_transport = async_transport

        setup_logging(debug)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def api_client(self) -> ApiClient:
        return ApiClient(
            self._config,
            transport=self._transport,
            async_transport=self._async_transport,
        )
