"""Timing and resource usage of the running process."""

from __future__ import annotations

import time

import psutil


def get_time_seconds() -> float:
    """Monotonic time in seconds."""
    return time.perf_counter()


class PerformanceMonitor:
    """Reports CPU and memory usage of the current process."""

    def __init__(self) -> None:
        self._process = psutil.Process()
        self._processors = psutil.cpu_count() or 1
        # Prime the counter so the next reading covers the interval since now.
        self._process.cpu_percent(interval=None)

    def cpu_usage_percent(self) -> float:
        """CPU use since the previous call, as a share of all processors."""
        return self._process.cpu_percent(interval=None) / self._processors

    def ram_usage_mb(self) -> float:
        """Resident memory of the process in megabytes."""
        return self._process.memory_info().rss / 1024.0 / 1024.0