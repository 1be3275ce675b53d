"""Database endpoints (``databases/*``)."""

from typing import Any, Optional

from milvus_rest.endpoints.base import Endpoint
from milvus_rest.models.operation import Operation
from milvus_rest.models.result import Result

CREATE = Operation(
    family="database",
    action="create",
    required=("db_name",),
    optional=("properties",),
    mutating=True,
)
ALTER = Operation(
    family="database",
    action="alter",
    required=("db_name", "properties"),
    mutating=True,
)
DESCRIBE = Operation(family="database", action="describe", required=("db_name",))
LIST = Operation(family="database", action="list")
DROP = Operation(family="database", action="drop", required=("db_name",), mutating=True)


class Databases(Endpoint):
    """Create, alter, inspect and drop databases."""

    FAMILY = "database"

    async def create(
        self, *, db_name: str = None, properties: Optional[dict[str, Any]] = None
    ) -> Result:
        """Create a database.

        Args:
            db_name:    Name of the database to create.
            properties: Database properties (e.g. ``{"database.replica.number": 1}``),
                        passed through as given.
        """
        return await self._request(CREATE, db_name=db_name, properties=properties)

    async def alter(
        self, *, db_name: str = None, properties: dict[str, Any] = None
    ) -> Result:
        """Replace properties of an existing database."""
        return await self._request(ALTER, db_name=db_name, properties=properties)

    async def describe(self, *, db_name: str = None) -> Result:
        return await self._request(DESCRIBE, db_name=db_name)

    async def list(self) -> Result:
        """List all databases."""
        return await self._request(LIST)

    async def drop(self, *, db_name: str = None) -> Result:
        """Drop a database and every collection in it."""
        return await self._request(DROP, db_name=db_name)
