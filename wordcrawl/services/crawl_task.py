import logging

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_unit import CrawlUnit
from wordcrawl.services.crawl_policy import CrawlPolicy

logger = logging.getLogger(__name__)


class CrawlTask:
    """Visit one URL, merge its words, then crawl its links one level shallower.

    `run` returns only after every child task has finished. Fetch failures
    are logged and absorbed; the URL stays claimed and contributes nothing.
    """

    def __init__(self, unit: CrawlUnit, context: CrawlContext, policy: CrawlPolicy, page_parser, scheduler):
        self.unit = unit
        self.context = context
        self.policy = policy
        self.page_parser = page_parser
        self.scheduler = scheduler

    def _should_visit(self) -> bool:
        url = self.unit.url
        if self.policy.should_skip_due_to_depth(self.unit.remaining_depth):
            return False
        if self.policy.should_skip_due_to_deadline(self.context.deadline):
            return False
        if self.policy.should_skip_due_to_ignore(url):
            return False
        if self.policy.should_skip_due_to_robots(url):
            return False
        if not self.context.claim(url):
            logger.debug("Skipping (visited) %s", url)
            return False
        return True

    def _fetch(self):
        try:
            return self.page_parser.fetch_and_parse(self.unit.url)
        except Exception as e:
            logger.warning("Fetch failed for %s: %s", self.unit.url, e)
            return None

    def child(self, url: str) -> "CrawlTask":
        return CrawlTask(self.unit.child(url), self.context, self.policy, self.page_parser, self.scheduler)

    def run(self) -> None:
        if not self._should_visit():
            return

        result = self._fetch()
        if result is None:
            return

        self.context.word_counts.merge(result.word_counts)
        logger.debug("Visited %s (depth left %s, %d links)", self.unit.url, self.unit.remaining_depth, len(result.links))

        if self.unit.remaining_depth > 1 and result.links:
            self.scheduler.invoke_all(self.child(link) for link in result.links)

    def __repr__(self):
        return f"<CrawlTask {self.unit.url} depth={self.unit.remaining_depth}>"
