import logging
import re
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_unit import CrawlUnit
from wordcrawl.profiler import profiled
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.crawl_task import CrawlTask
from wordcrawl.services.fork_join import ForkJoinScheduler
from wordcrawl.services.robots_filter import RobotsFilter

logger = logging.getLogger(__name__)


class CrawlEngine:
    """Crawls from a set of start pages on a bounded thread pool.

    The pool holds `min(parallelism, max_parallelism())` workers and lives
    as long as the engine; each `crawl` call gets a fresh deadline, visited
    set and word counts.
    """

    def __init__(
        self,
        page_parser,
        *,
        max_depth: int,
        timeout_seconds: float,
        popular_word_count: int,
        parallelism: int = 1,
        ignored_urls: Iterable[re.Pattern] = (),
        robots_filter: Optional[RobotsFilter] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if timeout_seconds < 0:
            raise ValueError(f"timeout_seconds must be >= 0, got {timeout_seconds}")
        if popular_word_count < 0:
            raise ValueError(f"popular_word_count must be >= 0, got {popular_word_count}")
        if parallelism <= 0:
            raise ValueError(f"parallelism must be positive, got {parallelism}")

        self.page_parser = page_parser
        self.max_depth = int(max_depth)
        self.timeout_seconds = float(timeout_seconds)
        self.popular_word_count = int(popular_word_count)
        self.clock = clock
        self.policy = CrawlPolicy(ignored_urls, robots_filter, clock)
        self.parallelism = min(int(parallelism), self.max_parallelism())
        self._executor = ThreadPoolExecutor(max_workers=self.parallelism, thread_name_prefix="wordcrawl")
        self._scheduler = ForkJoinScheduler(self._executor)

    @classmethod
    def from_config(cls, config: CrawlerConfig, page_parser, robots_filter: Optional[RobotsFilter] = None, clock: Callable[[], float] = time.monotonic) -> "CrawlEngine":
        return cls(
            page_parser,
            max_depth=config.max_depth,
            timeout_seconds=config.timeout_seconds,
            popular_word_count=config.popular_word_count,
            parallelism=config.parallelism,
            ignored_urls=config.ignored_urls,
            robots_filter=robots_filter if config.robots else None,
            clock=clock,
        )

    def max_parallelism(self) -> int:
        return os.cpu_count() or 1

    @profiled
    def crawl(self, start_pages: Iterable[str]) -> CrawlResult:
        context = CrawlContext(deadline=self.clock() + self.timeout_seconds)
        roots = [
            CrawlTask(CrawlUnit(url, self.max_depth), context, self.policy, self.page_parser, self._scheduler)
            for url in start_pages
        ]
        logger.info("Starting crawl of %d start page(s), depth=%s, workers=%s", len(roots), self.max_depth, self.parallelism)

        self._scheduler.invoke(roots)

        urls_visited = len(context.visited)
        if context.word_counts.is_empty():
            result = CrawlResult.build({}, urls_visited)
        else:
            result = CrawlResult.build(context.word_counts.top(self.popular_word_count), urls_visited)
        logger.info("Crawl finished: %d URL(s) visited, %d word(s) kept", result.urls_visited, len(result.word_counts))
        return result

    def close(self) -> None:
        self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
