"""Call-timing instrumentation: mark operations with `@profiled`, wrap objects with `Profiler.wrap`."""
from .markers import profiled as profiled
from .markers import profiled_operations as profiled_operations
from .state import ProfilingState as ProfilingState
from .interceptor import ProfilingInterceptor as ProfilingInterceptor
from .profiler import Profiler as Profiler

__all__ = ["profiled", "profiled_operations", "ProfilingState", "ProfilingInterceptor", "Profiler"]
