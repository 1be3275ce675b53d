"""Tests for response normalisation."""

import logging

import pytest

from milvus_rest.exceptions import ServerError
from milvus_rest.models.operation import Operation
from milvus_rest.models.result import ACKNOWLEDGED, Acknowledged, Body
from milvus_rest.response import is_empty, normalize
from milvus_rest.transport.base import TransportResponse

DROP = Operation(family="collection", action="drop", required=("collection_name",), mutating=True)
DESCRIBE = Operation(family="collection", action="describe", required=("collection_name",))


class TestIsEmpty:
    @pytest.mark.parametrize("body", [None, "", b"", {}, []])
    def test_empty(self, body):
        assert is_empty(body) is True

    @pytest.mark.parametrize("body", [{"code": 0}, [1], "ok", 0, False])
    def test_not_empty(self, body):
        assert is_empty(body) is False


class TestNormalize:
    def test_body_returned_verbatim(self):
        body = {"code": 0, "data": {"collectionName": "c"}}
        result = normalize(DESCRIBE, TransportResponse(status_code=200, body=body))
        assert isinstance(result, Body)
        assert result.content == body
        assert result.unwrap() == body

    @pytest.mark.parametrize("body", [None, {}, ""])
    def test_empty_body_acknowledged(self, body):
        result = normalize(DROP, TransportResponse(status_code=200, body=body))
        assert result is ACKNOWLEDGED
        assert isinstance(result, Acknowledged)
        assert result.unwrap() is True

    def test_read_only_empty_body_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="milvus_rest.response"):
            result = normalize(DESCRIBE, TransportResponse(status_code=200, body=None))
        assert result is ACKNOWLEDGED
        assert "collections/describe" in caplog.text

    def test_mutating_empty_body_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="milvus_rest.response"):
            normalize(DROP, TransportResponse(status_code=200, body=None))
        assert caplog.text == ""

    def test_legacy_success_code(self):
        body = {"code": 200, "data": []}
        assert normalize(DESCRIBE, TransportResponse(status_code=200, body=body)).unwrap() == body

    def test_error_code_raises(self):
        body = {"code": 100, "message": "collection not found[collection=c]"}
        with pytest.raises(ServerError) as exc_info:
            normalize(DESCRIBE, TransportResponse(status_code=200, body=body))
        err = exc_info.value
        assert err.body == body
        assert err.code == 100
        assert err.message == "collection not found[collection=c]"
        assert err.path == "collections/describe"
        assert err.status_code == 200

    def test_non_2xx_raises(self):
        with pytest.raises(ServerError) as exc_info:
            normalize(DROP, TransportResponse(status_code=503, body="upstream unavailable"))
        err = exc_info.value
        assert err.status_code == 503
        assert err.body == "upstream unavailable"
        assert err.code is None
        assert "upstream unavailable" in str(err)

    def test_non_2xx_empty_body_is_not_acknowledged(self):
        with pytest.raises(ServerError):
            normalize(DROP, TransportResponse(status_code=500, body=None))

    @pytest.mark.parametrize("code", [{"x": 1}, [1100], "fail"])
    def test_non_scalar_error_code_raises_server_error(self, code):
        body = {"code": code, "message": "malformed"}
        with pytest.raises(ServerError) as exc_info:
            normalize(DESCRIBE, TransportResponse(status_code=200, body=body))
        assert exc_info.value.body == body
        assert exc_info.value.code == code
