"""Collection endpoints (``collections/*``)."""

from typing import Any, Optional

from milvus_rest.endpoints.base import Endpoint
from milvus_rest.models.operation import Operation
from milvus_rest.models.result import Result
from milvus_rest.request import build_create_collection_payload

HAS = Operation(
    family="collection", action="has", required=("collection_name",), optional=("db_name",)
)
RENAME = Operation(
    family="collection",
    action="rename",
    required=("collection_name", "new_collection_name"),
    optional=("db_name", "new_db_name"),
    mutating=True,
)
GET_STATS = Operation(
    family="collection",
    action="get_stats",
    required=("collection_name",),
    optional=("db_name",),
)
CREATE = Operation(
    family="collection",
    action="create",
    required=("collection_name", "auto_id", "fields"),
    optional=("db_name", "functions"),
    mutating=True,
)
DESCRIBE = Operation(
    family="collection",
    action="describe",
    required=("collection_name",),
    optional=("db_name",),
)
LIST = Operation(family="collection", action="list", optional=("db_name",))
DROP = Operation(
    family="collection",
    action="drop",
    required=("collection_name",),
    optional=("db_name",),
    mutating=True,
)
LOAD = Operation(
    family="collection",
    action="load",
    required=("collection_name",),
    optional=("db_name",),
    mutating=True,
)
GET_LOAD_STATE = Operation(
    family="collection",
    action="get_load_state",
    required=("collection_name",),
    optional=("db_name", "partition_names"),
)
RELEASE = Operation(
    family="collection",
    action="release",
    required=("collection_name",),
    optional=("db_name",),
    mutating=True,
)


class Collections(Endpoint):
    """Manage collections: schema, lifecycle and memory residency.

    Every method takes an optional ``db_name``; when omitted the server
    uses the default database.
    """

    FAMILY = "collection"

    async def has(self, *, collection_name: str = None, db_name: Optional[str] = None) -> Result:
        """Check whether a collection exists."""
        return await self._request(HAS, collection_name=collection_name, db_name=db_name)

    async def rename(
        self,
        *,
        collection_name: str = None,
        new_collection_name: str = None,
        db_name: Optional[str] = None,
        new_db_name: Optional[str] = None,
    ) -> Result:
        """Rename a collection, optionally moving it to another database.

        Args:
            collection_name:     Current name.
            new_collection_name: New name.
            db_name:             Database currently holding the collection.
            new_db_name:         Database to move the collection into.
        """
        return await self._request(
            RENAME,
            collection_name=collection_name,
            new_collection_name=new_collection_name,
            db_name=db_name,
            new_db_name=new_db_name,
        )

    async def get_stats(
        self, *, collection_name: str = None, db_name: Optional[str] = None
    ) -> Result:
        """Return collection statistics, including the entity count."""
        return await self._request(
            GET_STATS, collection_name=collection_name, db_name=db_name
        )

    async def create(
        self,
        *,
        collection_name: str = None,
        auto_id: bool = None,
        fields: list[dict[str, Any]] = None,
        db_name: Optional[str] = None,
        functions: Optional[list[dict[str, Any]]] = None,
    ) -> Result:
        """Create a collection from a schema.

        Args:
            collection_name: Name of the new collection.
            auto_id:         Whether the server generates primary keys.
            fields:          Field definitions, sent as given (e.g.
                             ``{"fieldName": "vec", "dataType": "FloatVector",
                             "elementTypeParams": {"dim": 768}}``).
            db_name:         Database to create the collection in.
            functions:       Schema functions such as BM25 (optional).
        """
        arguments = {
            "collection_name": collection_name,
            "auto_id": auto_id,
            "fields": fields,
            "db_name": db_name,
            "functions": functions,
        }
        return await self._send(CREATE, build_create_collection_payload(CREATE, arguments))

    async def describe(
        self, *, collection_name: str = None, db_name: Optional[str] = None
    ) -> Result:
        return await self._request(DESCRIBE, collection_name=collection_name, db_name=db_name)

    async def drop(self, *, collection_name: str = None, db_name: Optional[str] = None) -> Result:
        """Drop a collection and all of its data."""
        return await self._request(DROP, collection_name=collection_name, db_name=db_name)

    async def load(self, *, collection_name: str = None, db_name: Optional[str] = None) -> Result:
        """Load a collection into memory so it can be searched or queried."""
        return await self._request(LOAD, collection_name=collection_name, db_name=db_name)

    async def get_load_state(
        self,
        *,
        collection_name: str = None,
        db_name: Optional[str] = None,
        partition_names: Optional[list[str]] = None,
    ) -> Result:
        """Return the load state of a collection or some of its partitions."""
        return await self._request(
            GET_LOAD_STATE,
            collection_name=collection_name,
            db_name=db_name,
            partition_names=partition_names,
        )

    async def release(
        self, *, collection_name: str = None, db_name: Optional[str] = None
    ) -> Result:
        """Release a collection from memory."""
        return await self._request(RELEASE, collection_name=collection_name, db_name=db_name)

    # Defined last: the name shadows the builtin in the class body.
    async def list(self, *, db_name: Optional[str] = None) -> Result:
        """List the collections of a database."""
        return await self._request(LIST, db_name=db_name)
