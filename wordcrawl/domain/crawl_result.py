"""Crawl result data model."""
from types import MappingProxyType
from typing import Mapping, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Built once at the end of a crawl from the aggregated word counts and the
    visited set; the mapping is read-only and iterates in popularity order.
    """
    word_counts: Mapping[str, int]
    """Top-K words, most popular first"""

    urls_visited: int
    """Number of distinct URLs claimed for processing"""

    @classmethod
    def build(cls, word_counts: Mapping[str, int], urls_visited: int) -> "CrawlResult":
        return cls(word_counts=MappingProxyType(dict(word_counts)), urls_visited=int(urls_visited))
