"""Entity endpoints (``entities/*``): writes, scalar queries and vector search."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from milvus_rest.endpoints.base import Endpoint
from milvus_rest.models.operation import Operation
from milvus_rest.models.result import Result
from milvus_rest.models.search import Rerank, SearchRequest

INSERT = Operation(
    family="entity",
    action="insert",
    required=("collection_name", "data"),
    optional=("db_name", "partition_name"),
    mutating=True,
)
DELETE = Operation(
    family="entity",
    action="delete",
    required=("collection_name", "filter"),
    optional=("db_name", "partition_name"),
    mutating=True,
)
QUERY = Operation(
    family="entity",
    action="query",
    required=("collection_name", "filter"),
    optional=("output_fields", "limit", "offset", "db_name", "partition_names"),
)
UPSERT = Operation(
    family="entity",
    action="upsert",
    required=("collection_name", "data"),
    optional=("db_name", "partition_name"),
    mutating=True,
)
GET = Operation(
    family="entity",
    action="get",
    required=("collection_name", "id"),
    optional=("db_name", "output_fields", "partition_names"),
)
SEARCH = Operation(
    family="entity",
    action="search",
    required=("collection_name", "data", "anns_field"),
    optional=(
        "db_name",
        "filter",
        "limit",
        "offset",
        "grouping_field",
        "output_fields",
        "search_params",
        "partition_names",
    ),
)
HYBRID_SEARCH = Operation(
    family="entity",
    action="hybrid_search",
    required=("collection_name", "search", "rerank"),
    optional=("db_name", "limit", "output_fields", "partition_names"),
)


def _to_wire(value: Any) -> Any:
    """Return *value* as a plain mapping if it is one of the search models."""
    if isinstance(value, (SearchRequest, Rerank)):
        return value.to_wire()
    return value


class Entities(Endpoint):
    """Insert, delete, fetch, query and search the entities of a collection.

    ``filter`` arguments are Milvus boolean expressions (e.g.
    ``'color in ["red", "green"] and likes > 10'``); they are sent as given
    and validated by the server.
    """

    FAMILY = "entity"

    async def insert(
        self,
        *,
        collection_name: str = None,
        data: list[dict[str, Any]] = None,
        partition_name: Optional[str] = None,
        db_name: Optional[str] = None,
    ) -> Result:
        """Insert entities into a collection.

        Args:
            collection_name: Target collection.
            data:            Entities as field name → value mappings.
            partition_name:  Partition to insert into (optional).
            db_name:         Database holding the collection (optional).
        """
        return await self._request(
            INSERT,
            collection_name=collection_name,
            data=data,
            partition_name=partition_name,
            db_name=db_name,
        )

    async def delete(
        self,
        *,
        collection_name: str = None,
        filter: str = None,
        db_name: Optional[str] = None,
        partition_name: Optional[str] = None,
    ) -> Result:
        """Delete the entities matching *filter* (e.g. ``"id in [1, 2]"``)."""
        return await self._request(
            DELETE,
            collection_name=collection_name,
            filter=filter,
            db_name=db_name,
            partition_name=partition_name,
        )

    async def query(
        self,
        *,
        collection_name: str = None,
        filter: str = None,
        output_fields: Optional[list[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        db_name: Optional[str] = None,
        partition_names: Optional[list[str]] = None,
    ) -> Result:
        """Return entities matching a scalar filter.

        Args:
            collection_name: Collection to query.
            filter:          Boolean filter expression.
            output_fields:   Fields to return (default: server default).
            limit:           Maximum number of entities.
            offset:          Entities to skip, for pagination.
            db_name:         Database holding the collection.
            partition_names: Restrict the query to these partitions.
        """
        return await self._request(
            QUERY,
            collection_name=collection_name,
            filter=filter,
            output_fields=output_fields,
            limit=limit,
            offset=offset,
            db_name=db_name,
            partition_names=partition_names,
        )

    async def upsert(
        self,
        *,
        collection_name: str = None,
        data: list[dict[str, Any]] = None,
        db_name: Optional[str] = None,
        partition_name: Optional[str] = None,
    ) -> Result:
        """Insert entities, replacing those whose primary key already exists."""
        return await self._request(
            UPSERT,
            collection_name=collection_name,
            data=data,
            db_name=db_name,
            partition_name=partition_name,
        )

    async def get(
        self,
        *,
        collection_name: str = None,
        id: Union[int, str, list[Union[int, str]]] = None,
        db_name: Optional[str] = None,
        output_fields: Optional[list[str]] = None,
        partition_names: Optional[list[str]] = None,
    ) -> Result:
        """Fetch entities by primary key (one ID or a list of IDs)."""
        return await self._request(
            GET,
            collection_name=collection_name,
            id=id,
            db_name=db_name,
            output_fields=output_fields,
            partition_names=partition_names,
        )

    async def search(
        self,
        *,
        collection_name: str = None,
        data: list[Any] = None,
        anns_field: str = None,
        db_name: Optional[str] = None,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        grouping_field: Optional[str] = None,
        output_fields: Optional[list[str]] = None,
        search_params: Optional[dict[str, Any]] = None,
        partition_names: Optional[list[str]] = None,
    ) -> Result:
        """Vector similarity search with an optional scalar pre-filter.

        Args:
            collection_name: Collection to search.
            data:            Query vector(s), e.g. ``[[0.1, 0.2]]``.
            anns_field:      Vector field to search.
            db_name:         Database holding the collection.
            filter:          Scalar filter applied before scoring.
            limit:           Maximum hits per query vector.
            offset:          Hits to skip.
            grouping_field:  Return at most one hit per value of this field.
            output_fields:   Fields to return with each hit.
            search_params:   Index tuning, e.g. ``{"params": {"nprobe": 10}}``.
            partition_names: Restrict the search to these partitions.
        """
        return await self._request(
            SEARCH,
            collection_name=collection_name,
            data=data,
            anns_field=anns_field,
            db_name=db_name,
            filter=filter,
            limit=limit,
            offset=offset,
            grouping_field=grouping_field,
            output_fields=output_fields,
            search_params=search_params,
            partition_names=partition_names,
        )

    async def hybrid_search(
        self,
        *,
        collection_name: str = None,
        search: list[Union[SearchRequest, Mapping[str, Any]]] = None,
        rerank: Union[Rerank, Mapping[str, Any]] = None,
        db_name: Optional[str] = None,
        limit: Optional[int] = None,
        output_fields: Optional[list[str]] = None,
        partition_names: Optional[list[str]] = None,
    ) -> Result:
        """Run several vector searches and fuse their rankings.

        Args:
            collection_name: Collection to search.
            search:          Sub-searches, as :class:`SearchRequest` or
                             wire-shaped mappings.
            rerank:          Fusion strategy, as :class:`Rerank` or a mapping
                             like ``{"strategy": "rrf", "params": {"k": 60}}``.
            db_name:         Database holding the collection.
            limit:           Maximum hits after reranking.
            output_fields:   Fields to return with each hit.
            partition_names: Restrict every sub-search to these partitions.
        """
        if search is not None:
            search = [_to_wire(spec) for spec in search]
        return await self._request(
            HYBRID_SEARCH,
            collection_name=collection_name,
            search=search,
            rerank=_to_wire(rerank),
            db_name=db_name,
            limit=limit,
            output_fields=output_fields,
            partition_names=partition_names,
        )
