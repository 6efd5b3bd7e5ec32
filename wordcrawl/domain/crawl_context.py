from typing import Optional

from wordcrawl.domain.visited_set import VisitedSet
from wordcrawl.domain.word_counts import WordCountAggregator


class CrawlContext:
    """State shared by every task of one crawl invocation.

    The deadline is fixed at construction; the visited set and word counts
    are mutated concurrently and only read in full after the top-level join.
    """

    def __init__(self, deadline: float, visited: Optional[VisitedSet] = None, word_counts: Optional[WordCountAggregator] = None):
        self.deadline = deadline
        self.visited = visited if visited is not None else VisitedSet()
        self.word_counts = word_counts if word_counts is not None else WordCountAggregator()

    def claim(self, url: str) -> bool:
        return self.visited.add(url)

    def __repr__(self):
        return f"<CrawlContext deadline={self.deadline} visited={len(self.visited)}>"
