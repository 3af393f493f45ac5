from typing import Callable, Iterator

import httpx
import pytest

from genapi import ApiClient, Config, NegotiationDefaults
from genapi.models import NoAuth

ENV_VARS = [
    "GENAPI_URL",
    "GENAPI_AUTH_KIND",
    "GENAPI_USERNAME",
    "GENAPI_PASSWORD",
    "GENAPI_TOKEN",
    "GENAPI_API_KEY",
    "GENAPI_CONTENT_TYPE",
    "GENAPI_ACCEPT",
    "GENAPI_DISABLE_SSL_VERIFY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.example.com/v2"


@pytest.fixture
def config(base_url: str) -> Config:
    return Config(base_url=base_url, auth=NoAuth())


@pytest.fixture
def json_defaults() -> NegotiationDefaults:
    return NegotiationDefaults(content_type="application/json", accept="application/json")


class Recorder:
    """Collects the requests seen by a mock transport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(
    recorder: Recorder,
) -> Iterator[Callable[..., ApiClient]]:
    clients: list[ApiClient] = []

    def _make(
        config: Config, handler: Callable[[httpx.Request], httpx.Response]
    ) -> ApiClient:
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            return handler(request)

        transport = httpx.MockTransport(_recording_handler)
        client = ApiClient(config, transport=transport, async_transport=transport)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
