from typing import List, Mapping, NamedTuple


class PageParseResult(NamedTuple):
    """Words and outbound links extracted from one page."""
    word_counts: Mapping[str, int]
    links: List[str]
