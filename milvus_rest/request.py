"""Request body construction.

Every operation body is assembled the same way:

1. Required parameters are checked first; any that are missing raise
   :class:`~milvus_rest.exceptions.MissingArgument` before the transport is
   touched.
2. Required parameters are always emitted under their wire name.
3. Optional parameters are emitted only when :func:`is_present` says there
   is something to send.  An absent key tells the server to use its
   default, so ``None`` and empty collections are left out rather than
   serialised as ``null`` or ``[]``.

The result is a fresh read-only mapping owned by the call that built it.
"""

from collections.abc import Mapping
from functools import singledispatch
from types import MappingProxyType
from typing import Any

from milvus_rest.exceptions import MissingArgument
from milvus_rest.models.operation import Operation, wire_name

Payload = Mapping[str, Any]


@singledispatch
def is_present(value: Any) -> bool:
    """Return ``True`` if an optional *value* should be sent.

    Scalars (including ``""``, ``0`` and ``False``) are present unless
    ``None``; collections are present only when non-empty.
    """
    return True


@is_present.register(type(None))
def _(value: None) -> bool:
    return False


@is_present.register(list)
@is_present.register(tuple)
@is_present.register(set)
@is_present.register(frozenset)
@is_present.register(Mapping)
def _(value) -> bool:
    return len(value) > 0


def check_required(operation: Operation, arguments: Mapping[str, Any]) -> None:
    """Raise :class:`MissingArgument` if a required parameter is ``None``."""
    missing = tuple(
        name for name in operation.required if arguments.get(name) is None
    )
    if missing:
        raise MissingArgument(operation.path, missing)


def build_fields(
    required: Mapping[str, Any], optional: Mapping[str, Any]
) -> dict[str, Any]:
    """Translate names and apply the presence rule.

    Args:
        required: Caller-facing name → value, always emitted.
        optional: Caller-facing name → value, emitted when present.

    Returns:
        A new ``dict`` keyed by wire names.
    """
    fields = {wire_name(name): value for name, value in required.items()}
    for name, value in optional.items():
        if is_present(value):
            fields[wire_name(name)] = value
    return fields


def _split(
    operation: Operation, arguments: Mapping[str, Any]
) -> tuple[dict[str, Any], dict[str, Any]]:
    unexpected = sorted(set(arguments) - set(operation.parameters))
    if unexpected:
        raise TypeError(
            f"{operation.path}: unexpected argument(s): {', '.join(unexpected)}"
        )
    check_required(operation, arguments)
    required = {name: arguments[name] for name in operation.required}
    optional = {name: arguments.get(name) for name in operation.optional}
    return required, optional


def build_payload(operation: Operation, arguments: Mapping[str, Any]) -> Payload:
    """Build the body for a flat (non-nested) operation.

    Args:
        operation: Descriptor of the operation being called.
        arguments: Caller-facing name → value.  Optional parameters may be
                   missing from the mapping entirely.

    Returns:
        A read-only mapping from wire name to value.

    Raises:
        MissingArgument: If a required parameter is ``None`` or missing.
        TypeError:       If *arguments* names a parameter the operation
                         does not declare.
    """
    required, optional = _split(operation, arguments)
    return MappingProxyType(build_fields(required, optional))


def build_create_collection_payload(
    operation: Operation, arguments: Mapping[str, Any]
) -> Payload:
    """Build the ``collections/create`` body with its nested schema.

    Shape::

        {
            "collectionName": ...,
            "dbName": ...,              # optional
            "schema": {
                "autoId": ...,
                "fields": [...],
                "name": ...,            # always the collection name
                "functions": [...],     # optional
            },
        }

    ``schema.name`` repeats ``collectionName`` because older servers read
    the name from the schema.
    """
    required, optional = _split(operation, arguments)
    collection_name = required["collection_name"]

    schema = build_fields(
        required={"auto_id": required["auto_id"], "fields": required["fields"]},
        optional={"functions": optional.get("functions")},
    )
    schema["name"] = collection_name

    body = build_fields(
        required={"collection_name": collection_name},
        optional={"db_name": optional.get("db_name")},
    )
    body["schema"] = schema
    return MappingProxyType(body)
