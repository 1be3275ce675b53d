"""Endpoint modules, one per resource family."""

from milvus_rest.endpoints.base import Endpoint
from milvus_rest.endpoints.collections import Collections
from milvus_rest.endpoints.databases import Databases
from milvus_rest.endpoints.entities import Entities

__all__ = ["Endpoint", "Collections", "Databases", "Entities"]
