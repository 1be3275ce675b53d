"""Shared plumbing for the resource-family endpoints."""

import logging
from typing import Any

from milvus_rest.models.operation import PATHS, Operation
from milvus_rest.models.result import Result
from milvus_rest.request import Payload, build_payload
from milvus_rest.response import normalize
from milvus_rest.transport.base import Transport

logger = logging.getLogger(__name__)


class Endpoint:
    """Base for one resource family: a path constant plus the transport.

    Subclasses set :attr:`FAMILY`; :attr:`PATH` is derived from it.  The
    transport reference is fixed at construction.
    """

    FAMILY: str = ""
    PATH: str = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.PATH = PATHS[cls.FAMILY]

    def __init__(self, transport: Transport):
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    async def _send(self, operation: Operation, payload: Payload) -> Result:
        path = f"{self.PATH}/{operation.action}"
        logger.debug("POST %s", path)
        response = await self._transport.post(path, payload)
        return normalize(operation, response)

    async def _request(self, operation: Operation, **arguments: Any) -> Result:
        return await self._send(operation, build_payload(operation, arguments))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.PATH!r})"
