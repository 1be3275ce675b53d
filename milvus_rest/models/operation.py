"""Operation descriptors and the wire-name table.

Every remote call is described by an :class:`Operation`: the resource family
it belongs to, the action appended to the family's base path, and which
caller-facing parameters are required or optional.  Caller-facing names are
snake_case; the server expects camelCase.  :data:`WIRE_NAMES` is the one
place that translation lives.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

Family = Literal["database", "collection", "entity"]

#: Resource family → base path under the API prefix.
PATHS: dict[str, str] = {
    "database": "databases",
    "collection": "collections",
    "entity": "entities",
}

#: Caller-facing parameter name → wire (JSON) field name.
WIRE_NAMES: dict[str, str] = {
    "db_name": "dbName",
    "new_db_name": "newDbName",
    "collection_name": "collectionName",
    "new_collection_name": "newCollectionName",
    "partition_name": "partitionName",
    "partition_names": "partitionNames",
    "output_fields": "outputFields",
    "search_params": "searchParams",
    "grouping_field": "groupingField",
    "anns_field": "annsField",
    "auto_id": "autoId",
    "properties": "properties",
    "fields": "fields",
    "functions": "functions",
    "data": "data",
    "id": "id",
    "filter": "filter",
    "limit": "limit",
    "offset": "offset",
    "search": "search",
    "rerank": "rerank",
    "params": "params",
}


def wire_name(name: str) -> str:
    """Return the wire field name for the caller-facing *name*.

    Raises:
        KeyError: If *name* has no entry in :data:`WIRE_NAMES`.
    """
    return WIRE_NAMES[name]


class Operation(BaseModel):
    """Immutable description of one remote operation.

    Attributes:
        family:   Resource family (``"database"``, ``"collection"`` or
                  ``"entity"``).
        action:   Action name appended to the family path (``"create"``,
                  ``"hybrid_search"``, ...).
        required: Parameters that must be supplied and are always emitted.
        optional: Parameters emitted only when present (see
                  :func:`~milvus_rest.request.is_present`).
        mutating: ``True`` for operations that change server state; these
                  routinely answer with an empty body.
    """

    model_config = ConfigDict(frozen=True)

    family: Family
    action: str
    required: tuple[str, ...] = ()
    optional: tuple[str, ...] = ()
    mutating: bool = False

    @model_validator(mode="after")
    def _check_wire_names(self) -> "Operation":
        unmapped = [name for name in self.parameters if name not in WIRE_NAMES]
        if unmapped:
            raise ValueError(
                f"No wire name for parameter(s) {unmapped} of {self.family}/{self.action}"
            )
        return self

    @property
    def parameters(self) -> tuple[str, ...]:
        return self.required + self.optional

    @property
    def path(self) -> str:
        """Relative request path, e.g. ``"collections/has"``."""
        return f"{PATHS[self.family]}/{self.action}"
