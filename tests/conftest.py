"""Shared fixtures: an AsyncMock transport that records every POST."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from milvus_rest.transport.base import Transport, TransportResponse


def _make_transport(body: Any = None, status_code: int = 200) -> MagicMock:
    """Return a Transport whose post() answers with *body* / *status_code*."""
    transport = MagicMock(spec=Transport)
    transport.connect = AsyncMock()
    transport.close = AsyncMock()
    transport.post = AsyncMock(
        return_value=TransportResponse(status_code=status_code, body=body)
    )
    return transport


@pytest.fixture
def make_transport():
    return _make_transport


@pytest.fixture
def transport():
    """Transport answering ``{"code": 0, "data": {}}``."""
    return _make_transport({"code": 0, "data": {}})


def _sent(transport: MagicMock) -> tuple[str, dict[str, Any]]:
    """Return the (path, payload) of the last POST as plain values."""
    path, payload = transport.post.call_args.args
    return path, dict(payload)


@pytest.fixture
def sent():
    return _sent
