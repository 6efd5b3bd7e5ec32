import logging
import re
import time
from typing import Callable, Iterable, Optional

from wordcrawl.services.robots_filter import RobotsFilter

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limit, deadline, ignored URLs and robots.txt.

    Separates policy decisions from crawl orchestration logic. The task
    evaluates the checks in declaration order and stops at the first hit.
    """

    def __init__(self, ignored_urls: Iterable[re.Pattern] = (), robots_filter: Optional[RobotsFilter] = None, clock: Callable[[], float] = time.monotonic):
        self.ignored_urls = tuple(ignored_urls)
        self.robots_filter = robots_filter
        self.clock = clock

    def should_skip_due_to_depth(self, remaining_depth: int) -> bool:
        if remaining_depth <= 0:
            return True
        return False

    def should_skip_due_to_deadline(self, deadline: float) -> bool:
        if self.clock() >= deadline:
            logger.debug("Skipping (deadline passed)")
            return True
        return False

    def should_skip_due_to_ignore(self, url: str) -> bool:
        for pattern in self.ignored_urls:
            if pattern.fullmatch(url):
                logger.debug("Skipping (ignored by %s) %s", pattern.pattern, url)
                return True
        return False

    def should_skip_due_to_robots(self, url: str) -> bool:
        if self.robots_filter is None:
            return False
        if self.robots_filter.is_disallowed(url):
            logger.info("Skipping (robots) %s", url)
            return True
        return False
