"""
edge.py — Graph Edge
====================
Connects two nodes with an optional non-negative weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - A missing / null weight means 1.  The raw value is kept so an
    imported graph round-trips unchanged; `cost` is what algorithms read.
  - Direction is not stored here: the adjacency adapter decides how an
    edge is traversed by looking at the whole edge list.
"""

import math
from typing import Optional, Dict, Any


class Edge:
    """
    Attributes:
        id      : Identifier, "<source>-<target>" unless supplied.
        source  : ID of the tail node.
        target  : ID of the head node.
        weight  : Numeric cost as given (None when absent).
        extra   : Display-only fields carried through import / export.
    """

    __slots__ = ("id", "source", "target", "weight", "extra")

    def __init__(
        self,
        source: str,
        target: str,
        weight: Optional[float] = None,
        edge_id: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.source: str               = str(source)
        self.target: str               = str(target)
        self.weight: Optional[float]   = weight
        self.id: str                   = edge_id or f"{self.source}-{self.target}"
        self.extra: Dict[str, Any]     = dict(extra or {})

    @property
    def cost(self) -> float:
        """Traversal cost: the weight, or 1 when none was given."""
        return 1 if self.weight is None else self.weight

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a and node_b in either direction."""
        return {self.source, self.target} == {node_a, node_b}

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = dict(self.extra)
        data["id"]     = self.id
        data["source"] = self.source
        data["target"] = self.target
        if self.weight is not None:
            data["weight"] = self.weight
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        if not isinstance(data, dict) or data.get("source") is None or data.get("target") is None:
            raise ValueError(f"edge entry must have 'source' and 'target': {data!r}")
        weight = data.get("weight")
        if weight is not None:
            weight = float(weight)
            if not math.isfinite(weight):
                raise ValueError(f"edge weight must be a finite number: {data!r}")
            if weight < 0:
                raise ValueError(f"negative edge weights are not supported: {data!r}")
            if weight.is_integer():
                weight = int(weight)
        extra = {k: v for k, v in data.items() if k not in ("id", "source", "target", "weight")}
        return cls(
            source=data["source"],
            target=data["target"],
            weight=weight,
            edge_id=data.get("id"),
            extra=extra,
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.cost})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
