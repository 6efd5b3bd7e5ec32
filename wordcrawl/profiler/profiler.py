import logging
import time
from datetime import datetime, timezone
from email.utils import format_datetime
from io import StringIO
from typing import Callable, IO, Iterable, Optional

from wordcrawl.exceptions import ProfilingConfigError
from wordcrawl.profiler.interceptor import ProfilingInterceptor
from wordcrawl.profiler.markers import profiled_operations
from wordcrawl.profiler.state import ProfilingState

logger = logging.getLogger(__name__)


class Profiler:
    """Wraps objects for call timing and renders the collected report.

    One Profiler is created per program run and passed to whoever needs to
    wrap a collaborator; all wrapped objects share its ProfilingState.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter, state: Optional[ProfilingState] = None, start_time: Optional[datetime] = None):
        self.clock = clock
        self.state = state if state is not None else ProfilingState()
        self.start_time = start_time if start_time is not None else datetime.now(timezone.utc)

    def wrap(self, delegate, operations: Optional[Iterable[str]] = None) -> ProfilingInterceptor:
        """Return a stand-in for `delegate` that times `operations`.

        When `operations` is None the methods marked `@profiled` on the
        delegate's class are used. Raises ProfilingConfigError if there is
        nothing to time.
        """
        if delegate is None:
            raise ProfilingConfigError("cannot wrap None")
        type_name = type(delegate).__qualname__
        names = frozenset(operations) if operations is not None else profiled_operations(type(delegate))
        if not names:
            raise ProfilingConfigError(f"{type_name} has no profiled operations")
        for name in sorted(names):
            if not callable(getattr(delegate, name, None)):
                raise ProfilingConfigError(f"{type_name}.{name} is not a callable operation")
        logger.debug("Profiling %s: %s", type_name, ", ".join(sorted(names)))
        return ProfilingInterceptor(delegate, names, self.state, self.clock)

    def write_data_to(self, stream: IO[str]) -> None:
        stream.write("Run at " + format_datetime(self.start_time.astimezone(timezone.utc), usegmt=True))
        stream.write("\n")
        self.state.write(stream)
        stream.write("\n")

    def write_data(self, path: str) -> None:
        """Append the report to `path`, creating the file if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_data_to(f)

    def report(self) -> str:
        buf = StringIO()
        self.write_data_to(buf)
        return buf.getvalue()
