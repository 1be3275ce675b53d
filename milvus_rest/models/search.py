"""Typed building blocks for ``entities/hybrid_search``.

A hybrid search nests several independent vector searches under one request
and fuses their rankings with a rerank strategy.  Plain dicts are accepted
by :meth:`~milvus_rest.endpoints.entities.Entities.hybrid_search` as well;
these models only save callers from spelling the wire names by hand.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from milvus_rest.request import build_fields


class SearchRequest(BaseModel):
    """One sub-search of a hybrid search.

    Attributes:
        data:           Query vector(s).
        anns_field:     Vector field searched by this request.
        filter:         Scalar pre-filter expression.
        limit:          Results kept from this sub-search before reranking.
        offset:         Results skipped.
        grouping_field: Field used to group (deduplicate) hits.
        params:         Index-specific tuning such as ``{"nprobe": 10}``.

    Unset options are inherited from the outer request on the server side.
    """

    model_config = ConfigDict(frozen=True)

    data: list[Any]
    anns_field: str
    filter: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    grouping_field: Optional[str] = None
    params: dict[str, Any] = Field(default_factory=dict)

    def to_wire(self) -> dict[str, Any]:
        """Return the camelCase mapping sent inside ``search``."""
        return build_fields(
            required={"data": self.data, "anns_field": self.anns_field},
            optional={
                "filter": self.filter,
                "limit": self.limit,
                "offset": self.offset,
                "grouping_field": self.grouping_field,
                "params": self.params,
            },
        )


class Rerank(BaseModel):
    """Fusion strategy combining the ranked lists of each sub-search."""

    model_config = ConfigDict(frozen=True)

    strategy: str
    params: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def rrf(cls, k: int = 60) -> "Rerank":
        """Reciprocal rank fusion with smoothing constant *k*."""
        return cls(strategy="rrf", params={"k": k})

    @classmethod
    def weighted(cls, *weights: float) -> "Rerank":
        """Weighted score fusion, one weight per sub-search in order."""
        return cls(strategy="weighted", params={"weights": list(weights)})

    def to_wire(self) -> dict[str, Any]:
        return {"strategy": self.strategy, "params": dict(self.params)}
