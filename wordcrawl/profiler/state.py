import threading
from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, IO, Optional

_ZERO = timedelta(0)


@dataclass
class ThreadTiming:
    invocation_count: int = 0
    cumulative: timedelta = _ZERO

    @property
    def average(self) -> timedelta:
        if self.invocation_count == 0:
            return _ZERO
        return self.cumulative / self.invocation_count


class _OperationTimings:
    """Per-thread timings for one operation, guarded by its own lock."""

    __slots__ = ("lock", "per_thread")

    def __init__(self):
        self.lock = threading.Lock()
        self.per_thread: Dict[int, ThreadTiming] = {}


def format_duration(duration: timedelta) -> str:
    micros = duration // timedelta(microseconds=1)
    minutes = micros // 60_000_000
    seconds = (micros // 1_000_000) % 60
    millis = (micros // 1000) % 1000
    return f"{minutes}m {seconds}s {millis}ms"


class ProfilingState:
    """Thread-safe store of invocation counts and durations per operation and thread.

    Updates to different operations never contend: each operation has its
    own lock. The registry lock is held only while creating a new
    operation entry.
    """

    def __init__(self):
        self._registry_lock = threading.Lock()
        self._operations: Dict[str, _OperationTimings] = {}

    def _timings_for(self, operation: str) -> _OperationTimings:
        timings = self._operations.get(operation)
        if timings is not None:
            return timings
        with self._registry_lock:
            return self._operations.setdefault(operation, _OperationTimings())

    def record(self, operation: str, elapsed: timedelta, thread_id: Optional[int] = None, invocation_count: int = 1) -> None:
        if operation is None:
            raise ValueError("operation is required")
        if elapsed is None:
            raise ValueError("elapsed is required")
        if elapsed < _ZERO:
            raise ValueError(f"negative elapsed time for {operation}: {elapsed}")
        if invocation_count < 1:
            raise ValueError(f"invocation_count must be positive, got {invocation_count}")
        if thread_id is None:
            thread_id = threading.get_ident()

        timings = self._timings_for(operation)
        with timings.lock:
            entry = timings.per_thread.get(thread_id)
            if entry is None:
                entry = timings.per_thread[thread_id] = ThreadTiming()
            entry.invocation_count += invocation_count
            entry.cumulative += elapsed

    def snapshot(self) -> Dict[str, Dict[int, ThreadTiming]]:
        """Copy of all timings, operations and threads in report order."""
        with self._registry_lock:
            names = sorted(self._operations)
        result = {}
        for name in names:
            timings = self._operations[name]
            with timings.lock:
                result[name] = {
                    tid: ThreadTiming(t.invocation_count, t.cumulative)
                    for tid, t in sorted(timings.per_thread.items())
                }
        return result

    def write(self, writer: IO[str]) -> None:
        for operation, per_thread in self.snapshot().items():
            total_count = sum(t.invocation_count for t in per_thread.values())
            total = sum((t.cumulative for t in per_thread.values()), _ZERO)
            writer.write(f"{operation} took {format_duration(total)} (called {total_count} times)\n")
            for thread_id, timing in per_thread.items():
                writer.write(
                    f"    thread {thread_id}: {timing.invocation_count} calls, "
                    f"average {format_duration(timing.average)}\n"
                )
