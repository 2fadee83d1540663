"""
node.py — Graph Node
=====================
A node is an opaque string id plus whatever display-only fields the
uploader attached (label, fill colour, coordinates, …).

Design decisions:
  - The id is never assumed numeric.  Generated graphs use "0", "1", …
    but uploaded graphs may use any string.
  - Display fields live in `extra` untouched, so an imported graph
    exports back exactly as it came in.  The search engine never reads them.
"""

from typing import Optional, Dict, Any


class Node:
    """
    Attributes:
        id     : Unique identifier within the graph.
        label  : Human-readable name (defaults to the id).
        extra  : Display-only fields carried through import / export.
    """

    __slots__ = ("id", "label", "extra")

    def __init__(
        self,
        node_id: str,
        label: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ):
        self.id: str               = str(node_id)
        self.label: str            = label if label is not None else self.id
        self.extra: Dict[str, Any] = dict(extra or {})

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        data = dict(self.extra)
        data["id"]    = self.id
        data["label"] = self.label
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        if not isinstance(data, dict) or data.get("id") is None:
            raise ValueError(f"node entry must be an object with an 'id': {data!r}")
        extra = {k: v for k, v in data.items() if k not in ("id", "label")}
        return cls(node_id=data["id"], label=data.get("label"), extra=extra)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
