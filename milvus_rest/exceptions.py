"""Error taxonomy.

================  ====================================================
Exception         Raised when
================  ====================================================
MissingArgument   a required parameter is absent; before any I/O
TransportError    the HTTP exchange itself failed
TransportTimeout  the HTTP exchange timed out
ServerError       the server answered non-2xx or with an error code
================  ====================================================

Nothing in this package recovers from these; they reach the caller as
raised.
"""

from typing import Any, Optional


class MilvusError(Exception):
    """Base class for every error raised by milvus-rest."""


class MissingArgument(MilvusError, ValueError):
    """A required operation parameter was not supplied (or was ``None``)."""

    def __init__(self, path: str, names: tuple[str, ...]):
        self.path = path
        self.names = tuple(names)
        super().__init__(
            f"{path}: missing required argument(s): {', '.join(self.names)}"
        )


class TransportError(MilvusError):
    """Network or connection failure reported by the transport."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class TransportTimeout(TransportError):
    """The request did not complete within the configured timeout."""


class ServerError(MilvusError):
    """The server replied with a non-2xx status or an error-coded envelope.

    The body is kept exactly as received; :attr:`code` and :attr:`message`
    are read from it when it is a JSON object.
    """

    def __init__(self, path: str, status_code: int, body: Any):
        self.path = path
        self.status_code = status_code
        self.body = body
        envelope = body if isinstance(body, dict) else {}
        self.code = envelope.get("code")
        self.message = envelope.get("message")
        detail = self.message or (body if isinstance(body, str) else "")
        super().__init__(
            f"{path}: server error (status={status_code}, code={self.code})"
            + (f": {detail}" if detail else "")
        )
