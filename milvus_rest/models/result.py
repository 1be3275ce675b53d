"""Tagged result returned by every endpoint operation.

The server answers successful calls either with a JSON document or with an
empty body.  Both are successes; they are kept apart as two types instead of
overloading one return value:

- :class:`Body` wraps the parsed JSON exactly as received.
- :class:`Acknowledged` means "done, nothing to return".

``result.unwrap()`` collapses the two into the plain shape (the JSON value,
or ``True``) for callers that do not care about the distinction.
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict


class Body(BaseModel):
    """Successful reply carrying a parsed JSON body."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["body"] = "body"
    content: Any

    def unwrap(self) -> Any:
        return self.content


class Acknowledged(BaseModel):
    """Successful reply whose body was empty."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["acknowledged"] = "acknowledged"

    def unwrap(self) -> bool:
        return True


Result = Union[Body, Acknowledged]

ACKNOWLEDGED = Acknowledged()
