"""Countdown timers driven by frame time deltas."""

from __future__ import annotations

import math
from enum import Enum

_NANOS = 1_000_000_000
_MAX_TIMES = 2**32 - 1


def _to_nanos(seconds: float) -> int:
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"duration must be a finite non-negative number, got {seconds!r}")
    return round(seconds * _NANOS)


class TimerMode(Enum):
    ONCE = "once"
    REPEATING = "repeating"


class Timer:
    """A timer that finishes once its elapsed time reaches its duration."""

    def __init__(self, duration: float, mode: TimerMode = TimerMode.ONCE) -> None:
        self._duration = _to_nanos(duration)
        self.mode = mode
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0

    @property
    def duration(self) -> float:
        return self._duration / _NANOS

    @property
    def elapsed(self) -> float:
        return self._elapsed / _NANOS

    @property
    def times_finished_this_tick(self) -> int:
        return self._times_finished

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        step = _to_nanos(delta)
        if self.mode is not TimerMode.REPEATING and self._finished:
            self._times_finished = 0
            return self
        self._elapsed += step
        self._finished = self._elapsed >= self._duration
        if not self._finished:
            self._times_finished = 0
        elif self.mode is TimerMode.REPEATING:
            if self._duration == 0:
                self._times_finished = _MAX_TIMES
                self._elapsed = 0
            else:
                self._times_finished = min(self._elapsed // self._duration, _MAX_TIMES)
                self._elapsed %= self._duration
        else:
            self._times_finished = 1
            self._elapsed = self._duration
        return self

    def reset(self) -> None:
        self._elapsed = 0
        self._finished = False
        self._times_finished = 0

    def set_duration(self, duration: float) -> None:
        """Change the duration; elapsed time is kept."""
        self._duration = _to_nanos(duration)

    def remaining(self) -> float:
        return max(self._duration - self._elapsed, 0) / _NANOS

    def finished(self) -> bool:
        return self._finished

    def just_finished(self) -> bool:
        return self._times_finished > 0