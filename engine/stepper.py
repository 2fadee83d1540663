"""
stepper.py — Step-by-Step Playback
===================================
Cursor over a fully materialised Trace.  Playback never talks to the
search engine: every move is plain indexing into the recorded steps.

State machine:
    IDLE  →  load()   →  PAUSED
    PAUSED  →  play()   →  PLAYING
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last step shown) → FINISHED
    any     →  reset()  →  IDLE

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread (or an
  event loop's timer callback).
"""

import time
from enum import Enum
from typing import Optional, Callable

import config
from algorithms.step import Step
from algorithms.trace import Trace


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        trace       : The Trace being played back.
        current_idx : Index into `trace` currently displayed (-1 before load).
        speed_ms    : Milliseconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time the current step changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.trace:       Trace        = Trace()
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.speed_ms:    int          = config.PLAYBACK_SPEED_MS
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, trace: Trace) -> bool:
        """Attach a trace and show its first step.  False for an empty trace."""
        self.trace       = trace
        self.current_idx = -1
        if len(trace) == 0:
            self.state = StepperState.IDLE
            return False
        self.state = StepperState.PAUSED
        self._goto(0)
        return True

    def reset(self) -> None:
        self.trace       = Trace()
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        if self.current_idx + 1 >= len(self.trace):
            if len(self.trace):
                self.state = StepperState.FINISHED
            return False
        self._goto(self.current_idx + 1)
        if self.current_idx == len(self.trace) - 1:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        if not 0 <= idx < len(self.trace):
            return False
        self._goto(idx)
        if self.state == StepperState.FINISHED and idx < len(self.trace) - 1:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Jump back to step 0."""
        self.goto_step(0)

    def jump_to_end(self) -> None:
        if len(self.trace):
            self._goto(len(self.trace) - 1)
            self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state in (StepperState.IDLE, StepperState.FINISHED):
            return
        self.state      = StepperState.PLAYING
        self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> bool:
        """
        Call periodically.  If playing and `speed_ms` has elapsed since the
        last advance, moves one step forward.  Returns True if a step was taken.
        `now` is a time.monotonic() reading, injectable for tests.
        """
        if self.state != StepperState.PLAYING:
            return False
        now = time.monotonic() if now is None else now
        if (now - self._last_tick) * 1000 < self.speed_ms:
            return False
        self._last_tick = now
        return self.next_step()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, ms: int) -> None:
        self.speed_ms = max(config.PLAYBACK_SPEED_MIN_MS, min(config.PLAYBACK_SPEED_MAX_MS, int(ms)))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.trace):
            return self.trace[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.trace)

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.trace[idx])
