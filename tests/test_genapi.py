import httpx
import pytest

from genapi import ApiClient, GenApi, NegotiationDefaults
from genapi.models import (
    ApiKeyAuth,
    BaseUrlMissingError,
    BasicAuth,
    CredentialsMissingError,
    NoAuth,
    OAuth2Auth,
)


class TestGenApi:
    def test_arguments(self):
        sdk = GenApi(base_url="https://api.example.com", auth=ApiKeyAuth(key="XYZ"))

        assert sdk.config.base_url == "https://api.example.com"
        assert sdk.config.auth == ApiKeyAuth(key="XYZ")
        assert sdk.config.defaults is None

    def test_missing_base_url(self):
        with pytest.raises(BaseUrlMissingError):
            GenApi()

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("GENAPI_URL", "https://api.example.com/v2")
        monkeypatch.setenv("GENAPI_AUTH_KIND", "basic")
        monkeypatch.setenv("GENAPI_USERNAME", "user")
        monkeypatch.setenv("GENAPI_PASSWORD", "pass")
        monkeypatch.setenv("GENAPI_ACCEPT", "text/plain")

        sdk = GenApi()

        assert sdk.config.base_url == "https://api.example.com/v2"
        assert isinstance(sdk.config.auth, BasicAuth)
        assert sdk.config.auth.username == "user"
        assert sdk.config.defaults == NegotiationDefaults(
            content_type="application/json", accept="text/plain"
        )

    def test_token_kinds_read_token(self, monkeypatch):
        monkeypatch.setenv("GENAPI_URL", "https://api.example.com")
        monkeypatch.setenv("GENAPI_AUTH_KIND", "OAuth2")
        monkeypatch.setenv("GENAPI_TOKEN", "abc")

        auth = GenApi().config.auth

        assert isinstance(auth, OAuth2Auth)
        assert auth.token.get_secret_value() == "abc"

    def test_no_auth_by_default(self, monkeypatch):
        monkeypatch.setenv("GENAPI_URL", "https://api.example.com")

        assert GenApi().config.auth == NoAuth()

    def test_missing_credentials(self, monkeypatch):
        monkeypatch.setenv("GENAPI_URL", "https://api.example.com")
        monkeypatch.setenv("GENAPI_AUTH_KIND", "apikey")

        with pytest.raises(CredentialsMissingError):
            GenApi()

    def test_unknown_auth_kind(self, monkeypatch):
        monkeypatch.setenv("GENAPI_URL", "https://api.example.com")
        monkeypatch.setenv("GENAPI_AUTH_KIND", "digest")

        with pytest.raises(CredentialsMissingError):
            GenApi()

    def test_arguments_win_over_environment(self, monkeypatch):
        monkeypatch.setenv("GENAPI_URL", "https://env.example.com")

        sdk = GenApi(base_url="https://arg.example.com")

        assert sdk.config.base_url == "https://arg.example.com"

    def test_api_client_uses_transport(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"url": str(request.url)})
        )
        sdk = GenApi(base_url="https://api.example.com", transport=transport)

        with sdk.api_client as client:
            assert isinstance(client, ApiClient)
            assert client.request("/ping") == {"url": "https://api.example.com/ping"}
