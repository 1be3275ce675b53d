"""
milvus-rest - async client for the Milvus RESTful vector database API.

Builds the JSON request bodies for database, collection and entity
operations and normalizes the server's replies into a tagged result.
"""

__version__ = "0.1.0"
__title__ = "milvus-rest"
__description__ = "Async client for the Milvus RESTful (v2) vector database API"

from milvus_rest.client import MilvusClient
from milvus_rest.exceptions import (
    MilvusError,
    MissingArgument,
    ServerError,
    TransportError,
    TransportTimeout,
)
from milvus_rest.models.result import ACKNOWLEDGED, Acknowledged, Body, Result
from milvus_rest.models.search import Rerank, SearchRequest

__all__ = [
    "MilvusClient",
    "MilvusError",
    "MissingArgument",
    "ServerError",
    "TransportError",
    "TransportTimeout",
    "ACKNOWLEDGED",
    "Acknowledged",
    "Body",
    "Result",
    "Rerank",
    "SearchRequest",
]
