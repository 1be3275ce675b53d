"""Abstract transport interface.

A transport performs one HTTP ``POST`` of a JSON body to a path relative to
the API root and hands back the status code and parsed body.  It owns
connection handling, authentication, timeouts and retries; endpoint code
only builds bodies and reads results.

New transports are registered via
:func:`~milvus_rest.transport.factory.register_transport` and selected
through the ``TRANSPORT_BACKEND`` configuration key.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class TransportResponse(BaseModel):
    """Raw reply: HTTP status plus the decoded body (``None`` when empty)."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(ABC):
    """Interface for HTTP transport implementations.

    A single instance is shared by every endpoint of a client and may be
    called from concurrent tasks; implementations must allow that.  Call
    :meth:`connect` before :meth:`post` and :meth:`close` when done.
    """

    @abstractmethod
    async def connect(self):
        """Open the underlying connection pool."""
        pass

    @abstractmethod
    async def close(self):
        """Release the underlying connection pool."""
        pass

    @abstractmethod
    async def post(self, path: str, payload: Mapping[str, Any]) -> TransportResponse:
        """POST *payload* as JSON to *path* (e.g. ``"collections/has"``).

        Args:
            path:    Path relative to the API root.
            payload: Request body; must not be modified.

        Returns:
            The status code and decoded body.

        Raises:
            TransportError:   If the request could not be completed.
            TransportTimeout: If the request timed out.
        """
        pass
