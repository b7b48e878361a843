"""Tablitas ScanAccumulator — opt-in profiling for table generation.

This module provides accumulated metrics during generation:
- Total elapsed time
- Number of classification (oracle) calls
- Number of ranges produced per category

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from tablitas import generate
    from tablitas.profiling import profiled_scan

    with profiled_scan() as metrics:
        text = generate("utf-8")

    print(metrics.summary())
    # {"total_ms": 2310.4, "classify_calls": 3339264, "byte_tables": 1, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from threading import Lock
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during table generation.

    Category scans may run on worker threads, so recording is guarded
    by a lock.

    Attributes:
        start_time: Profiling start timestamp.
        classify_calls: Number of codepoints handed to a classifier.
        byte_tables: Number of byte tables compiled.
        ranges: Ranges produced, keyed by category name.

    """

    start_time: float = field(default_factory=perf_counter)
    classify_calls: int = 0
    byte_tables: int = 0
    ranges: dict[str, int] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def record_byte_table(self, classify_calls: int) -> None:
        """Record a compiled byte table."""
        with self._lock:
            self.byte_tables += 1
            self.classify_calls += classify_calls

    def record_scan(self, category: str, classify_calls: int, range_count: int) -> None:
        """Record a completed category scan.

        Args:
            category: Category name (e.g. "alpha")
            classify_calls: Codepoints classified during the scan
            range_count: Ranges the scan produced

        """
        with self._lock:
            self.classify_calls += classify_calls
            self.ranges[category] = self.ranges.get(category, 0) + range_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, classify_calls, byte_tables, ranges.

        """
        with self._lock:
            return {
                "total_ms": round(self.total_duration_ms, 2),
                "classify_calls": self.classify_calls,
                "byte_tables": self.byte_tables,
                "ranges": dict(self.ranges),
            }


# Module-level ContextVar
_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled generation.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated by compiler and scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
