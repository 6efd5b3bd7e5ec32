import logging
from concurrent.futures import Executor, wait
from typing import Iterable

logger = logging.getLogger(__name__)


class ForkJoinScheduler:
    """Runs recursive tasks on a bounded executor without starving it.

    `invoke_all` forks every task, then joins them. While joining, the
    calling thread takes back any task no worker has started yet and runs
    it inline; it only blocks on tasks already running elsewhere. A blocked
    thread therefore always waits on a task that is making progress, so a
    recursion deeper than the pool size cannot deadlock.

    Only pool workers may call `invoke_all`; a thread outside the pool uses
    `invoke`, which hands the whole join to a worker and waits for it.
    """

    def __init__(self, executor: Executor):
        self._executor = executor

    def invoke(self, tasks: Iterable) -> None:
        self._executor.submit(self.invoke_all, list(tasks)).result()

    def invoke_all(self, tasks: Iterable) -> None:
        forked = [(task, self._executor.submit(task.run)) for task in tasks]
        try:
            running = []
            # Newest first: workers pull from the front of the queue.
            for task, future in reversed(forked):
                if future.cancel():
                    task.run()
                else:
                    running.append(future)
            for future in running:
                future.result()
        finally:
            # On error, drop unstarted siblings and wait for the running ones.
            for _, future in forked:
                future.cancel()
            wait([future for _, future in forked])
