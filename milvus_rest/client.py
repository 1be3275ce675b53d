"""Milvus client: one transport shared by the three endpoint families.

Usage::

    client = MilvusClient()
    await client.connect()
    try:
        await client.collections.load(collection_name="docs")
        result = await client.entities.query(
            collection_name="docs", filter="id > 0", limit=10
        )
    finally:
        await client.close()

or, equivalently, ``async with MilvusClient() as client: ...``.
"""

import logging
from typing import Optional

from milvus_rest.endpoints import Collections, Databases, Entities
from milvus_rest.transport.base import Transport
from milvus_rest.transport.factory import get_transport

logger = logging.getLogger(__name__)


class MilvusClient:
    """Entry point exposing :attr:`databases`, :attr:`collections` and
    :attr:`entities`.

    Args:
        transport: Transport to use; defaults to the one selected by
                   :func:`~milvus_rest.transport.factory.get_transport`.
    """

    def __init__(self, transport: Optional[Transport] = None):
        self._transport = transport if transport is not None else get_transport()
        self.databases = Databases(self._transport)
        self.collections = Collections(self._transport)
        self.entities = Entities(self._transport)

    @property
    def transport(self) -> Transport:
        return self._transport

    async def connect(self):
        """Open the transport."""
        await self._transport.connect()

    async def close(self):
        """Close the transport."""
        await self._transport.close()

    async def __aenter__(self) -> "MilvusClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()
