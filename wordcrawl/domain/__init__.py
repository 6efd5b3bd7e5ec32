"""Domain objects for wordcrawl - explicit re-exports to satisfy linters."""
from .crawl_unit import CrawlUnit as CrawlUnit
from .crawl_result import CrawlResult as CrawlResult
from .config import CrawlerConfig as CrawlerConfig
from .http_response import HttpResponse as HttpResponse
from .page_parse_result import PageParseResult as PageParseResult
from .visited_set import VisitedSet as VisitedSet
from .word_counts import WordCountAggregator as WordCountAggregator

__all__ = [
    "CrawlUnit",
    "CrawlResult",
    "CrawlerConfig",
    "HttpResponse",
    "PageParseResult",
    "VisitedSet",
    "WordCountAggregator",
]
