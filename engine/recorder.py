"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete search run (all Steps) under a step budget, then
computes the summary metrics the UI shows next to the animation.

Usage:
    rec = Recorder()
    rec.start(algo_key="Dijkstra", source="0", target="3", graph=g)
    rec.run_to_completion()          # pulls steps until done or budget hit
    rec.metrics                      # the analytics card
    rec.export()                     # serialisable snapshot
    rec.report()                     # plain-text narration log

Budget:
    The search engine itself never stops early.  The recorder is the
    wrapper that does: it pulls one Step at a time and, once `max_steps`
    have been recorded, closes the generator and marks the run truncated.
    A truncated trace has no terminal step.
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any

import config
from graph import Graph
from algorithms import AlgoInfo, get_algorithm, iter_steps
from algorithms.trace import Trace

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics card shows
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str             = ""
    algo_label:      str             = ""
    source:          str             = ""
    target:          str             = ""
    nodes_visited:   int             = 0          # size of the visited set / branch on the last step
    path_length:     int             = 0          # number of edges on the final path
    path_cost:       Optional[float] = None       # accumulated cost reported by the success step
    total_steps:     int             = 0
    wall_time_ms:    float           = 0.0
    path_found:      bool            = False
    truncated:       bool            = False      # stopped by the step budget


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        trace    : The recorded Trace.
        metrics  : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self, max_steps: Optional[int] = None):
        self.trace:     Trace                = Trace()
        self.metrics:   Optional[RunMetrics] = None
        self.max_steps: int                  = config.MAX_TRACE_STEPS if max_steps is None else max_steps

        self._algo_info:  Optional[AlgoInfo] = None
        self._algo_key:   str                = ""
        self._source:     str                = ""
        self._target:     str                = ""
        self._graph:      Optional[Graph]    = None
        self._started:    bool               = False

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, source: str, target: str, graph: Graph) -> None:
        """Remember what to run.  Unknown algorithms record an empty trace."""
        self._algo_info = get_algorithm(algo_key)
        self._algo_key  = algo_key
        self._source    = source
        self._target    = target
        self._graph     = graph
        self._started   = True
        self.trace      = Trace()
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Pull every step (up to the budget), record it, compute metrics."""
        if not self._started:
            raise RuntimeError("Call start() first.")

        started   = time.monotonic()
        truncated = False
        steps     = iter_steps(self._algo_key, self._graph.adjacency(), self._source, self._target)

        for step in steps:
            if len(self.trace) >= self.max_steps:
                truncated = True
                break
            self.trace.append(step)

        if truncated:
            close = getattr(steps, "close", None)
            if close is not None:
                close()
            logger.warning(
                f"{self._algo_key} {self._source} → {self._target} stopped after "
                f"{self.max_steps} steps without finishing"
            )

        wall_ms = (time.monotonic() - started) * 1000
        self.metrics = self._compute_metrics(wall_ms, truncated)

        logger.info(
            f"Recorded {self._algo_key} {self._source} → {self._target}: "
            f"{self.metrics.total_steps} steps, path_found={self.metrics.path_found}, "
            f"{self.metrics.wall_time_ms} ms"
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algorithm": self._algo_key,
            "source":    self._source,
            "target":    self._target,
            "metrics":   asdict(self.metrics) if self.metrics else {},
            "steps":     self.trace.to_list(),
        }

    def report(self) -> str:
        """Header line followed by the numbered step descriptions."""
        header = f"{self._algo_key}: {self._source} → {self._target}"
        body   = self.trace.report()
        return f"{header}\n{body}" if body else header

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float, truncated: bool) -> RunMetrics:
        info = self._algo_info
        last = self.trace.final_step
        path = self.trace.final_path

        nodes_visited = 0
        if last is not None:
            nodes_visited = len(getattr(last, "visited", None) or getattr(last, "path", None) or [])

        return RunMetrics(
            algo_key=info.key if info else self._algo_key,
            algo_label=info.label if info else "",
            source=self._source,
            target=self._target,
            nodes_visited=nodes_visited,
            path_length=len(path) - 1 if len(path) > 1 else 0,
            path_cost=self.trace.cost,
            total_steps=len(self.trace),
            wall_time_ms=round(wall_ms, 2),
            path_found=self.trace.succeeded,
            truncated=truncated,
        )
