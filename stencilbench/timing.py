"""Benchmark instrumentation: cache flushing, timers and result reporting."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Callable

import numpy as np

DEFAULT_CACHE_SIZE_KB = 32770

_FLOPS_WARNING = (
    "[PolyBench][WARNING] Program flops not defined, "
    "use polybench_set_program_flops(value)\n"
)


def flush_cache(size_kb: int = DEFAULT_CACHE_SIZE_KB) -> float:
    """Touch a zero-filled buffer of ``size_kb`` kilobytes to evict cached data.

    Returns the sum of the buffer, which is always zero for a fresh buffer.
    """
    if size_kb < 0:
        raise ValueError(f"cache size must be non-negative, got {size_kb}")
    count = size_kb * 1024 // np.dtype(np.float64).itemsize
    buffer = np.zeros(count, dtype=np.float64)
    total = float(buffer.sum())
    if total > 10.0:
        raise RuntimeError(f"cache flush buffer was not zeroed (sum {total})")
    return total


class TimerMode(enum.Enum):
    """How a :class:`Timer` measures and reports a run."""

    NONE = "none"
    WALL = "wall"
    CYCLES = "cycles"
    GFLOPS = "gflops"


@dataclass
class Timer:
    """Measures one kernel run and formats the result the way the suite reports it."""

    mode: TimerMode = TimerMode.WALL
    program_flops: float = 0.0
    flush: bool = True
    cache_size_kb: int = DEFAULT_CACHE_SIZE_KB
    clock: Callable[[], float] = time.time
    cycle_counter: Callable[[], int] = time.perf_counter_ns
    _start: float | int | None = field(default=None, init=False, repr=False)
    _end: float | int | None = field(default=None, init=False, repr=False)

    def _read(self) -> float | int:
        if self.mode is TimerMode.CYCLES:
            return self.cycle_counter()
        if self.mode is TimerMode.NONE:
            return 0.0
        return self.clock()

    def start(self) -> None:
        """Prepare the machine and record the start time."""
        if self.flush:
            flush_cache(self.cache_size_kb)
        self._end = None
        self._start = self._read()

    def stop(self) -> None:
        """Record the end time."""
        if self._start is None:
            raise RuntimeError("timer stopped before it was started")
        self._end = self._read()

    def elapsed(self) -> float | int:
        """Seconds between start and stop, or cycles in cycle mode."""
        if self._start is None or self._end is None:
            raise RuntimeError("timer has not completed a start/stop cycle")
        return self._end - self._start

    def report(self) -> str:
        """The text printed for a finished run, newline included."""
        elapsed = self.elapsed()
        if self.mode is TimerMode.GFLOPS:
            if self.program_flops == 0:
                return _FLOPS_WARNING + f"{elapsed:0.6f}\n"
            return f"{self.program_flops / float(elapsed) / 1e9:0.2f}\n"
        if self.mode is TimerMode.CYCLES:
            return f"{int(elapsed)}\n"
        return f"{elapsed:0.6f}\n"

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()