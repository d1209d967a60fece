"""Stopwatch timers over wall-clock, process CPU or user/system time, with run statistics."""

from __future__ import annotations

import math
import os
import time
from enum import Enum
from types import TracebackType


class TimerKind(Enum):
    """Which clock a :class:`Timer` reads."""

    HOST = 0
    """Wall (real) clock time."""
    CPU = 1
    """CPU time of the current process."""
    SYS = 2
    """User plus kernel time of the current process."""


class TimeUnit(Enum):
    """Precision in which a :class:`Timer` reports durations."""

    MICRO = (1e-6, "us")
    MILLI = (1e-3, "ms")
    SECONDS = (1.0, "s")
    MINUTES = (60.0, "min")
    HOURS = (3600.0, "h")

    @property
    def seconds(self) -> float:
        """Length of one unit in seconds."""
        return self.value[0]

    @property
    def suffix(self) -> str:
        """Short name printed after a duration."""
        return self.value[1]


def _read_clock(kind: TimerKind) -> float:
    if kind is TimerKind.HOST:
        return time.perf_counter()
    if kind is TimerKind.CPU:
        return time.process_time()
    times = os.times()
    return times.user + times.system


class Timer:
    """Measures the time between :meth:`start` and :meth:`stop` calls.

    Every completed run is recorded, so totals, averages, extremes and the
    standard deviation over all runs since the last :meth:`reset` are
    available. Durations are reported in ``unit``.
    """

    def __init__(
        self,
        kind: TimerKind = TimerKind.HOST,
        unit: TimeUnit = TimeUnit.MILLI,
        decimals: int = 1,
        space: int = 15,
    ) -> None:
        if decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {decimals}")
        if space < 0:
            raise ValueError(f"space must be non-negative, got {space}")
        self.kind = TimerKind(kind)
        self.unit = TimeUnit(unit)
        self.decimals = decimals
        self.space = space
        self._start_time: float | None = None
        self.reset()

    def start(self) -> None:
        """Start a new run."""
        self._start_time = _read_clock(self.kind)

    def stop(self) -> None:
        """End the current run and record its duration."""
        if self._start_time is None:
            raise RuntimeError("timer stopped without being started")
        stop_time = _read_clock(self.kind)
        elapsed = (stop_time - self._start_time) / self.unit.seconds
        self._start_time = None
        self._register(elapsed)

    def _register(self, elapsed: float) -> None:
        self._elapsed = elapsed
        self._total += elapsed
        self._squared += elapsed * elapsed
        self._min = elapsed if self._runs == 0 else min(self._min, elapsed)
        self._max = elapsed if self._runs == 0 else max(self._max, elapsed)
        self._runs += 1

    def _require_runs(self) -> None:
        if self._runs == 0:
            raise ValueError("no completed runs recorded")

    def duration(self) -> float:
        """Return the duration of the last completed run."""
        return self._elapsed

    def total_duration(self) -> float:
        """Return the sum of all recorded run durations."""
        return self._total

    def average(self) -> float:
        """Return the mean duration of the recorded runs."""
        self._require_runs()
        return self._total / self._runs

    def std_deviation(self) -> float:
        """Return the population standard deviation of the recorded runs."""
        self._require_runs()
        mean = self._total / self._runs
        variance = self._squared / self._runs - mean * mean
        return math.sqrt(max(variance, 0.0))

    def min(self) -> float:
        """Return the shortest recorded run."""
        self._require_runs()
        return self._min

    def max(self) -> float:
        """Return the longest recorded run."""
        self._require_runs()
        return self._max

    def reset(self) -> None:
        """Forget every recorded run."""
        self._elapsed = 0.0
        self._total = 0.0
        self._squared = 0.0
        self._min = 0.0
        self._max = 0.0
        self._runs = 0

    @property
    def runs(self) -> int:
        """Number of completed runs since the last reset."""
        return self._runs

    def format(self, label: str = "") -> str:
        """Return ``label`` left-aligned in ``space`` columns and the last duration."""
        return (
            f"{label:<{self.space}}"
            f"{self._elapsed:.{self.decimals}f} {self.unit.suffix}"
        )

    def print(self, label: str = "") -> None:
        """Write :meth:`format` output to standard output."""
        print(self.format(label))

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def __repr__(self) -> str:
        return (
            f"Timer(kind={self.kind.name}, unit={self.unit.name}, "
            f"runs={self._runs})"
        )