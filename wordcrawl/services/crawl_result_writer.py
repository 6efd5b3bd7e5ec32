import json
from typing import IO

from wordcrawl.domain.crawl_result import CrawlResult


class CrawlResultWriter:
    """Serialize a CrawlResult as a JSON document.

    Word counts keep their popularity order in the output.
    """

    def __init__(self, result: CrawlResult):
        self.result = result

    def to_dict(self) -> dict:
        return {
            "wordCounts": dict(self.result.word_counts),
            "urlsVisited": self.result.urls_visited,
        }

    def write_to(self, stream: IO[str]) -> None:
        json.dump(self.to_dict(), stream, indent=2, ensure_ascii=False)
        stream.write("\n")

    def write(self, path: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            self.write_to(f)
