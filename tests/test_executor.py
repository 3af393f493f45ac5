import httpx
import pytest

from genapi import Config
from genapi.models import (
    BearerAuth,
    DecodeError,
    HTTPError,
    TransportError,
    UnsupportedContentTypeError,
)


class UnreadableStream(httpx.SyncByteStream, httpx.AsyncByteStream):
    """A response body that fails the test if anything reads it."""

    def __iter__(self):
        raise AssertionError("response body was read")

    async def __aiter__(self):
        raise AssertionError("response body was read")
        yield b""  # pragma: no cover


def json_response(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"id": 42, "active": True})


class TestExecuteAsync:
    @pytest.mark.asyncio
    async def test_decodes_json(self, config, make_client, recorder):
        client = make_client(config, json_response)
        spec = client.build_request("/users/42", query={"active": "true"})

        result = await client.execute_async(spec)

        assert result == {"id": 42, "active": True}
        assert len(recorder.requests) == 1
        assert str(recorder.last.url) == "https://api.example.com/v2/users/42?active=true"
        assert recorder.last.method == "GET"

    @pytest.mark.asyncio
    async def test_returns_html_unchanged(self, config, make_client):
        html = "<html><body><p>Hello &amp; welcome</p></body></html>"
        client = make_client(
            config,
            lambda request: httpx.Response(
                200,
                content=html.encode("utf-8"),
                headers={"Content-Type": "text/html; charset=utf-8"},
            ),
        )

        result = await client.execute_async(client.build_request("/page"))

        assert result == html

    @pytest.mark.asyncio
    async def test_returns_plain_text(self, config, make_client):
        client = make_client(
            config,
            lambda request: httpx.Response(
                200, content=b"pong", headers={"Content-Type": "text/plain"}
            ),
        )

        assert await client.execute_async(client.build_request("/ping")) == "pong"

    @pytest.mark.asyncio
    async def test_http_error_does_not_read_body(self, config, make_client):
        client = make_client(
            config,
            lambda request: httpx.Response(
                404,
                headers={"Content-Type": "application/json"},
                stream=UnreadableStream(),
            ),
        )

        with pytest.raises(HTTPError) as exc_info:
            await client.execute_async(client.build_request("/users/404"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == "https://api.example.com/v2/users/404"
        assert "404" in str(exc_info.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [301, 400, 401, 500, 503])
    async def test_non_2xx_is_an_error(self, config, make_client, status):
        client = make_client(config, lambda request: httpx.Response(status, json={}))

        with pytest.raises(HTTPError) as exc_info:
            await client.execute_async(client.build_request("/x"))

        assert exc_info.value.status_code == status

    @pytest.mark.asyncio
    async def test_http_error_url_omits_query(self, config, make_client):
        client = make_client(config, lambda request: httpx.Response(403))

        with pytest.raises(HTTPError) as exc_info:
            await client.execute_async(
                client.build_request("/x", query={"api_key": "secret"})
            )

        assert "secret" not in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_invalid_json_is_a_decode_error(self, config, make_client):
        client = make_client(
            config,
            lambda request: httpx.Response(
                200, content=b"{not json", headers={"Content-Type": "application/json"}
            ),
        )

        with pytest.raises(DecodeError):
            await client.execute_async(client.build_request("/x"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "headers",
        [{"Content-Type": "application/xml"}, {"Content-Type": "image/png"}, {}],
    )
    async def test_unsupported_response_content_type(self, config, make_client, headers):
        client = make_client(
            config, lambda request: httpx.Response(200, content=b"<a/>", headers=headers)
        )

        with pytest.raises(UnsupportedContentTypeError):
            await client.execute_async(client.build_request("/x"))

    @pytest.mark.asyncio
    async def test_transport_error_is_unchanged(self, config, make_client):
        error = httpx.ConnectError("connection refused")

        def handler(request):
            raise error

        client = make_client(config, handler)

        with pytest.raises(TransportError) as exc_info:
            await client.execute_async(client.build_request("/x"))

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_sends_headers_and_body(self, base_url, make_client, recorder):
        config = Config(base_url=base_url, auth=BearerAuth(token="abc"))
        client = make_client(config, json_response)

        await client.execute_async(client.build_request("/users", "POST", body={"a": 1}))

        sent = recorder.last
        assert sent.method == "POST"
        assert sent.headers["Authorization"] == "Bearer abc"
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.headers["User-Agent"].startswith("genapi-client/")
        assert sent.content == b'{"a":1}'

    @pytest.mark.asyncio
    async def test_descriptor_user_agent_wins(self, config, make_client, recorder):
        client = make_client(config, json_response)

        await client.execute_async(
            client.build_request("/x", headers={"User-Agent": "custom/1.0"})
        )

        assert recorder.last.headers["User-Agent"] == "custom/1.0"

    @pytest.mark.asyncio
    async def test_get_sends_no_body(self, config, make_client, recorder):
        client = make_client(config, json_response)

        await client.execute_async(client.build_request("/x", "GET", body={"a": 1}))

        assert recorder.last.content == b""


class TestExecute:
    def test_decodes_json(self, config, make_client):
        client = make_client(config, json_response)

        assert client.execute(client.build_request("/users/42")) == {
            "id": 42,
            "active": True,
        }

    def test_http_error_does_not_read_body(self, config, make_client):
        client = make_client(
            config,
            lambda request: httpx.Response(
                404,
                headers={"Content-Type": "application/json"},
                stream=UnreadableStream(),
            ),
        )

        with pytest.raises(HTTPError) as exc_info:
            client.execute(client.build_request("/users/404"))

        assert exc_info.value.status_code == 404

    def test_redirect_is_not_followed(self, config, make_client, recorder):
        client = make_client(
            config,
            lambda request: httpx.Response(
                302, headers={"Location": "https://elsewhere.example.com/users/42"}
            ),
        )

        with pytest.raises(HTTPError) as exc_info:
            client.execute(client.build_request("/users/42"))

        assert exc_info.value.status_code == 302
        assert len(recorder.requests) == 1

    def test_empty_json_body_is_a_decode_error(self, config, make_client):
        client = make_client(
            config,
            lambda request: httpx.Response(
                200, content=b"", headers={"Content-Type": "application/json"}
            ),
        )

        with pytest.raises(DecodeError):
            client.execute(client.build_request("/x"))
