"""
step.py — Algorithm Step Snapshots
===================================
Every strategy is a generator that yields Step objects.  A Step is a
frozen-in-time picture of the algorithm's internal state, enough to
draw one frame of the animation and narrate it:

    • which node is being processed (`active`) and which neighbour is
      being examined (`looking_at`)
    • the frontier (`open_list`) and the visited set / current branch
    • tentative distances (Dijkstra) or the cost bound (IDA*)
    • which pseudocode line is executing (`line`, 1-based, 0 = none)
    • a plain-English `description` of what just happened

Design decisions:
  - One variant per algorithm (BfsStep, DfsStep, UniformCostStep,
    IdaStep) on top of a common base.  The base carries what every
    consumer relies on: active node, description, final path, success.
  - Steps are SNAPSHOTS.  Strategies copy their collections into each
    Step; nothing holds a reference back into live algorithm state.
  - `to_dict()` produces the wire format (camelCase keys, infinite
    distances as null) so the JSON API never has to know the variants.
"""

import math
from dataclasses import dataclass, field
from typing import ClassVar, Dict, List, Optional, Tuple


def format_cost(value: Optional[float]) -> str:
    """3.0 → "3", inf → "∞"."""
    if value is None:
        return "-"
    if math.isinf(value):
        return "∞"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def _finite(value: Optional[float]) -> Optional[float]:
    if value is None or math.isinf(value):
        return None
    return value


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        description : Narration of the step; never empty.
        active      : Node currently being processed (or None).
        line        : 1-based pseudocode line executing now, 0 when none applies.
        final_path  : start → goal path, only on the terminal success step.
        success     : True only on the terminal success step.
        cost        : Accumulated path cost, only on the terminal success step.
    """

    algorithm: ClassVar[str] = ""

    description: str
    active:      Optional[str]   = None
    line:        int             = 0
    final_path:  List[str]       = field(default_factory=list)
    success:     bool            = False
    cost:        Optional[float] = None

    def __post_init__(self):
        if not self.description:
            raise ValueError("every Step needs a description")

    def to_dict(self) -> dict:
        data = {
            "algorithm":   self.algorithm,
            "active":      self.active,
            "line":        self.line,
            "description": self.description,
            "success":     self.success,
        }
        if self.final_path:
            data["finalPath"] = list(self.final_path)
        if self.cost is not None:
            data["cost"] = self.cost
        data.update(self._variant_fields())
        return data

    def _variant_fields(self) -> dict:
        return {}


# ---------------------------------------------------------------------------
# BFS / DFS
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TraversalStep(Step):
    visited:    List[str]     = field(default_factory=list)   # cumulative, discovery order
    open_list:  List[str]     = field(default_factory=list)   # queue or stack, front first
    looking_at: Optional[str] = None

    def _variant_fields(self) -> dict:
        return {
            "visited":   list(self.visited),
            "openList":  list(self.open_list),
            "lookingAt": self.looking_at,
        }


@dataclass(frozen=True)
class BfsStep(TraversalStep):
    algorithm: ClassVar[str] = "BFS"


@dataclass(frozen=True)
class DfsStep(TraversalStep):
    algorithm: ClassVar[str] = "DFS"


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class UniformCostStep(Step):
    algorithm: ClassVar[str] = "Dijkstra"

    visited:    List[str]                = field(default_factory=list)
    open_list:  List[Tuple[str, float]]  = field(default_factory=list)   # (node, tentative dist), min first
    looking_at: Optional[str]            = None
    distances:  Dict[str, float]         = field(default_factory=dict)

    def _variant_fields(self) -> dict:
        return {
            "visited":   list(self.visited),
            "openList":  [{"id": n, "dist": d} for n, d in self.open_list],
            "lookingAt": self.looking_at,
            "distances": {n: _finite(d) for n, d in self.distances.items()},
        }


# ---------------------------------------------------------------------------
# IDA*
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class IdaStep(Step):
    algorithm: ClassVar[str] = "IDA*"

    path:      List[str]       = field(default_factory=list)   # current depth-first branch
    threshold: Optional[float] = None
    g:         Optional[float] = None
    f:         Optional[float] = None

    @property
    def open_list(self) -> List[str]:
        """The probe's cost bookkeeping, shown where other algorithms show a frontier."""
        if self.g is None:
            return []
        return [f"g={format_cost(self.g)}", f"f={format_cost(self.f)}", f"bound={format_cost(self.threshold)}"]

    def _variant_fields(self) -> dict:
        return {
            "path":      list(self.path),
            "threshold": _finite(self.threshold),
            "openList":  self.open_list,
        }
