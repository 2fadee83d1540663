"""
engine/
-------
Recording & playback layer on top of the search strategies.

    from engine import Recorder, Stepper
"""

from engine.stepper  import Stepper, StepperState
from engine.recorder import Recorder, RunMetrics

__all__ = [
    "Stepper",
    "StepperState",
    "Recorder",
    "RunMetrics",
]
