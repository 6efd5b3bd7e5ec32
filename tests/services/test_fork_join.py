import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from wordcrawl.services.fork_join import ForkJoinScheduler


class TreeTask:
    """Each task spawns `fanout` children until `depth` reaches zero."""

    def __init__(self, scheduler, depth, fanout, counter):
        self.scheduler = scheduler
        self.depth = depth
        self.fanout = fanout
        self.counter = counter

    def run(self):
        with self.counter["lock"]:
            self.counter["n"] += 1
        if self.depth > 0:
            self.scheduler.invoke_all(
                TreeTask(self.scheduler, self.depth - 1, self.fanout, self.counter) for _ in range(self.fanout)
            )


@pytest.mark.parametrize("workers", [1, 2, 4])
def test_recursion_deeper_than_pool_completes(workers):
    counter = {"n": 0, "lock": threading.Lock()}
    with ThreadPoolExecutor(max_workers=workers) as executor:
        scheduler = ForkJoinScheduler(executor)
        scheduler.invoke_all([TreeTask(scheduler, depth=6, fanout=2, counter=counter)])
    assert counter["n"] == 2 ** 7 - 1


def test_invoke_all_propagates_task_errors():
    class Boom:
        def run(self):
            raise RuntimeError("boom")

    with ThreadPoolExecutor(max_workers=1) as executor:
        scheduler = ForkJoinScheduler(executor)
        with pytest.raises(RuntimeError):
            scheduler.invoke_all([Boom()])


def test_invoke_all_with_no_tasks_returns():
    with ThreadPoolExecutor(max_workers=1) as executor:
        ForkJoinScheduler(executor).invoke_all([])


def test_failed_join_waits_for_running_siblings():
    started = threading.Event()
    finished = threading.Event()

    class Slow:
        def run(self):
            started.set()
            time.sleep(0.05)
            finished.set()

    class Boom:
        def run(self):
            started.wait(1)
            raise RuntimeError("boom")

    with ThreadPoolExecutor(max_workers=2) as executor:
        scheduler = ForkJoinScheduler(executor)
        with pytest.raises(RuntimeError):
            scheduler.invoke_all([Slow(), Boom()])
        assert finished.is_set()


def test_invoke_runs_join_on_a_pool_worker():
    caller = threading.get_ident()
    seen = []

    class Record:
        def run(self):
            seen.append(threading.get_ident())

    with ThreadPoolExecutor(max_workers=1) as executor:
        ForkJoinScheduler(executor).invoke([Record(), Record(), Record()])
    assert len(seen) == 3
    assert caller not in seen
