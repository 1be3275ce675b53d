"""HTTP transports with pluggable backend support."""

from milvus_rest.transport.base import Transport, TransportResponse
from milvus_rest.transport.factory import (
    get_transport,
    list_transports,
    register_transport,
)
from milvus_rest.transport.httpx_transport import HttpxTransport

__all__ = [
    "Transport",
    "TransportResponse",
    "HttpxTransport",
    "get_transport",
    "list_transports",
    "register_transport",
]
