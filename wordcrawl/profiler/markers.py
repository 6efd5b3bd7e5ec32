import inspect
from typing import FrozenSet

PROFILED_ATTR = "__wordcrawl_profiled__"


def profiled(func):
    """Mark a method as an instrumented operation.

    The marker is only read by `Profiler.wrap`; the method itself is
    returned unchanged.
    """
    setattr(func, PROFILED_ATTR, True)
    return func


def profiled_operations(cls) -> FrozenSet[str]:
    """Names of the methods on `cls` (and its bases) marked with `@profiled`."""
    names = set()
    for name, member in inspect.getmembers(cls):
        target = getattr(member, "__func__", member)
        if callable(target) and getattr(target, PROFILED_ATTR, False):
            names.add(name)
    return frozenset(names)
