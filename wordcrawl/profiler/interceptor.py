import functools
import threading
import time
from datetime import timedelta
from typing import Callable, FrozenSet, Iterable

from wordcrawl.profiler.state import ProfilingState


def operation_identity(delegate, name: str) -> str:
    cls = type(delegate)
    return f"{cls.__module__}.{cls.__qualname__}#{name}"


class ProfilingInterceptor:
    """Stand-in for `delegate` that times calls to the named operations.

    Any other attribute is handed back from the delegate untouched, so
    non-profiled calls are neither wrapped nor recorded.
    """

    def __init__(self, delegate, operations: Iterable[str], state: ProfilingState, clock: Callable[[], float] = time.perf_counter):
        self._profiling_delegate = delegate
        self._profiling_operations: FrozenSet[str] = frozenset(operations)
        self._profiling_state = state
        self._profiling_clock = clock

    def __getattr__(self, name):
        # Only reached for attributes not set in __init__.
        attr = getattr(self._profiling_delegate, name)
        if name not in self._profiling_operations:
            return attr
        return self._timed(name, attr)

    def _timed(self, name: str, method):
        operation = operation_identity(self._profiling_delegate, name)
        state = self._profiling_state
        clock = self._profiling_clock

        @functools.wraps(method)
        def timed(*args, **kwargs):
            start = clock()
            try:
                return method(*args, **kwargs)
            finally:
                elapsed = timedelta(seconds=clock() - start)
                state.record(operation, elapsed, threading.get_ident())

        return timed

    @property
    def wrapped(self):
        return self._profiling_delegate

    def __repr__(self):
        ops = ", ".join(sorted(self._profiling_operations))
        return f"<ProfilingInterceptor {self._profiling_delegate!r} [{ops}]>"
