from dataclasses import dataclass


@dataclass(frozen=True)
class CrawlUnit:
    """One (url, remaining depth) work item, consumed by exactly one task."""

    url: str
    remaining_depth: int

    def __post_init__(self):
        if self.remaining_depth < 0:
            raise ValueError(f"remaining_depth must be >= 0, got {self.remaining_depth}")

    def child(self, url: str) -> "CrawlUnit":
        return CrawlUnit(url=url, remaining_depth=self.remaining_depth - 1)
