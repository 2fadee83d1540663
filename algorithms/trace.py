"""
trace.py — The Run Trace
=========================
Ordered, append-only sequence of Steps produced by one search run.

Invariants the strategies uphold (and the tests check):
  - steps are only ever appended, never replaced
  - a successful run ends with exactly one `success` step carrying the path
  - a failed run ends with a step saying no path exists
"""

from typing import Iterable, Iterator, List, Optional

from algorithms.step import Step


class Trace:

    def __init__(self, steps: Iterable[Step] = ()):
        self._steps: List[Step] = []
        for step in steps:
            self.append(step)

    def append(self, step: Step) -> None:
        self._steps.append(step)

    # ------------------------------------------------------------------
    # Sequence protocol (read-only)
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __getitem__(self, idx):
        return self._steps[idx]

    def __repr__(self) -> str:
        return f"Trace(steps={len(self)}, succeeded={self.succeeded})"

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------
    @property
    def final_step(self) -> Optional[Step]:
        return self._steps[-1] if self._steps else None

    @property
    def succeeded(self) -> bool:
        last = self.final_step
        return bool(last and last.success)

    @property
    def final_path(self) -> List[str]:
        return list(self.final_step.final_path) if self.succeeded else []

    @property
    def cost(self) -> Optional[float]:
        return self.final_step.cost if self.succeeded else None

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def descriptions(self) -> List[str]:
        return [s.description for s in self._steps]

    def to_list(self) -> List[dict]:
        return [s.to_dict() for s in self._steps]

    def report(self) -> str:
        """Plain-text log, one "<n> <description>" line per step (1-based)."""
        return "\n".join(f"{i} {d}" for i, d in enumerate(self.descriptions(), start=1))
