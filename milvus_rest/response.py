"""Response normalisation.

Turns a :class:`~milvus_rest.transport.base.TransportResponse` into a
:data:`~milvus_rest.models.result.Result`, or raises
:class:`~milvus_rest.exceptions.ServerError`.  The same rule applies to
every operation:

- non-2xx status, or a JSON envelope whose ``code`` is not a success
  code → :class:`ServerError` carrying the body as received;
- empty body → :data:`~milvus_rest.models.result.ACKNOWLEDGED`;
- anything else → :class:`~milvus_rest.models.result.Body`.
"""

import logging
from typing import Any

from milvus_rest.exceptions import ServerError
from milvus_rest.models.operation import Operation
from milvus_rest.models.result import ACKNOWLEDGED, Body, Result
from milvus_rest.transport.base import TransportResponse

logger = logging.getLogger(__name__)

# v2 endpoints answer 0 on success, some older ones 200.  Compared by
# equality: a malformed envelope may carry an unhashable code.
SUCCESS_CODES = (0, 200)


def is_empty(body: Any) -> bool:
    """Return ``True`` for a syntactically empty body."""
    if body is None:
        return True
    if isinstance(body, (str, bytes, dict, list)):
        return len(body) == 0
    return False


def _error_code(body: Any) -> Any:
    if isinstance(body, dict):
        code = body.get("code")
        if code is not None and code not in SUCCESS_CODES:
            return code
    return None


def normalize(operation: Operation, response: TransportResponse) -> Result:
    """Map a raw reply to :class:`Body` / :class:`Acknowledged`.

    Raises:
        ServerError: On a non-2xx status or an error-coded envelope.
    """
    body = response.body
    if not response.ok or _error_code(body) is not None:
        raise ServerError(operation.path, response.status_code, body)

    if is_empty(body):
        if not operation.mutating:
            logger.warning("Empty body from read-only operation %s", operation.path)
        return ACKNOWLEDGED
    return Body(content=body)
