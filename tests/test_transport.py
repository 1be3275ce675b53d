"""Tests for the httpx transport and the transport registry."""

import asyncio
import json
from unittest.mock import patch

import httpx
import pytest

from milvus_rest.config import Settings, get_settings
from milvus_rest.exceptions import TransportError, TransportTimeout
from milvus_rest.transport import factory
from milvus_rest.transport.base import Transport, TransportResponse
from milvus_rest.transport.httpx_transport import HttpxTransport


def _transport(handler, **kwargs) -> HttpxTransport:
    kwargs.setdefault("max_retries", 1)
    return HttpxTransport(
        url="http://milvus.test:19530",
        http_transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestHttpxTransport:
    @pytest.mark.asyncio
    async def test_posts_json_to_api_path(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"code": 0, "data": {"has": True}})

        transport = _transport(handler)
        await transport.connect()
        try:
            response = await transport.post("collections/has", {"collectionName": "c"})
        finally:
            await transport.close()

        assert response == TransportResponse(
            status_code=200, body={"code": 0, "data": {"has": True}}
        )
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "http://milvus.test:19530/v2/vectordb/collections/has"
        assert json.loads(request.content) == {"collectionName": "c"}
        assert request.headers["content-type"] == "application/json"
        assert "authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_bearer_token(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"code": 0})

        transport = _transport(handler, token="root:Milvus")
        await transport.connect()
        await transport.post("databases/list", {})
        await transport.close()
        assert seen[0].headers["authorization"] == "Bearer root:Milvus"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", [b"", b"  \n"])
    async def test_blank_body_decodes_to_none(self, content):
        transport = _transport(lambda request: httpx.Response(200, content=content))
        await transport.connect()
        response = await transport.post("collections/drop", {"collectionName": "c"})
        await transport.close()
        assert response.body is None
        assert response.ok

    @pytest.mark.asyncio
    async def test_non_json_body_passed_as_text(self):
        transport = _transport(lambda request: httpx.Response(502, text="Bad Gateway"))
        await transport.connect()
        response = await transport.post("collections/drop", {"collectionName": "c"})
        await transport.close()
        assert response.status_code == 502
        assert response.body == "Bad Gateway"
        assert not response.ok

    @pytest.mark.asyncio
    async def test_read_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        transport = _transport(handler)
        await transport.connect()
        with pytest.raises(TransportTimeout) as exc_info:
            await transport.post("entities/search", {"collectionName": "c"})
        await transport.close()
        assert exc_info.value.path == "entities/search"

    @pytest.mark.asyncio
    async def test_connect_error_after_retries(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        transport = _transport(handler, max_retries=2)
        await transport.connect()
        with pytest.raises(TransportError) as exc_info:
            await transport.post("collections/list", {})
        await transport.close()
        assert not isinstance(exc_info.value, TransportTimeout)
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_connect_error_retried_then_succeeds(self):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ConnectError("refused", request=request)
            return httpx.Response(200, json={"code": 0, "data": []})

        transport = _transport(handler, max_retries=2)
        await transport.connect()
        response = await transport.post("collections/list", {})
        await transport.close()
        assert response.body == {"code": 0, "data": []}
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_read_errors_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ReadError("reset", request=request)

        transport = _transport(handler, max_retries=3)
        await transport.connect()
        with pytest.raises(TransportError):
            await transport.post("entities/insert", {"collectionName": "c", "data": []})
        await transport.close()
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_cancellation_not_translated_or_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise asyncio.CancelledError()

        transport = _transport(handler, max_retries=3)
        await transport.connect()
        try:
            with pytest.raises(asyncio.CancelledError):
                await transport.post("entities/search", {"collectionName": "c"})
        finally:
            await transport.close()
        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_post_before_connect(self):
        transport = _transport(lambda request: httpx.Response(200))
        with pytest.raises(TransportError, match="not connected"):
            await transport.post("collections/list", {})

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        transport = _transport(lambda request: httpx.Response(200))
        await transport.close()
        await transport.connect()
        await transport.close()
        await transport.close()
        assert transport.client is None

    def test_defaults_from_settings(self):
        settings = Settings(
            milvus_url="http://db:19530/",
            milvus_api_prefix="/v2/vectordb/",
            milvus_token="secret",
            milvus_timeout=5.0,
            milvus_max_retries=7,
        )
        with patch(
            "milvus_rest.transport.httpx_transport.get_settings", return_value=settings
        ):
            transport = HttpxTransport()
        assert transport.base_url == "http://db:19530/v2/vectordb/"
        assert transport.token == "secret"
        assert transport.timeout == 5.0
        assert transport.max_retries == 7

    def test_explicit_empty_token_overrides_settings(self):
        settings = Settings(milvus_token="secret")
        with patch(
            "milvus_rest.transport.httpx_transport.get_settings", return_value=settings
        ):
            transport = HttpxTransport(token="")
        assert transport.token == ""


class FakeTransport(Transport):
    async def connect(self):
        pass

    async def close(self):
        pass

    async def post(self, path, payload):
        return TransportResponse(status_code=200)


@pytest.fixture
def fresh_settings():
    """Clear the cached settings around a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestTransportFactory:
    def test_httpx_registered(self):
        assert "httpx" in factory.list_transports()

    def test_get_transport_default(self, monkeypatch, fresh_settings):
        monkeypatch.delenv("TRANSPORT_BACKEND", raising=False)
        assert isinstance(factory.get_transport(), HttpxTransport)

    def test_unknown_transport_from_environment(self, monkeypatch, fresh_settings):
        monkeypatch.setenv("TRANSPORT_BACKEND", "grpc")
        with pytest.raises(ValueError, match="not registered"):
            factory.get_transport()

    def test_registered_transport_selected_from_environment(
        self, monkeypatch, fresh_settings
    ):
        factory.register_transport("Fake", FakeTransport)
        monkeypatch.setenv("TRANSPORT_BACKEND", "FAKE")
        try:
            assert isinstance(factory.get_transport(), FakeTransport)
            assert "fake" in factory.list_transports()
        finally:
            factory._transports.pop("fake", None)
