import os
from typing import IO, Optional

import yaml

from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.exceptions import ConfigError


class CrawlerConfigParser:
    """Parse a config dict (JSON or YAML document) into a CrawlerConfig.

    Accepts the camelCase keys of the crawler's JSON config format. It does
    NOT perform filesystem IO.
    """

    def parse(self, *, source: str, data: dict) -> CrawlerConfig:
        if not isinstance(data, dict):
            raise ConfigError(source, "must be a mapping at top level")

        start_pages = data.get("startPages", [])
        if isinstance(start_pages, str):
            start_pages = [start_pages]

        return CrawlerConfig(
            start_pages=start_pages,
            ignored_urls=data.get("ignoredUrls", []),
            ignored_words=data.get("ignoredWords", []),
            parallelism=data.get("parallelism", os.cpu_count() or 1),
            max_depth=data.get("maxDepth", 0),
            timeout_seconds=data.get("timeoutSeconds", 1),
            popular_word_count=data.get("popularWordCount", 0),
            profile_output_path=data.get("profileOutputPath") or None,
            result_path=data.get("resultPath") or None,
            # Default to True so robots.txt is honored unless explicitly disabled
            robots=bool(data.get("robots", True)),
            source=source,
        )


def read_crawler_config(stream: IO[str], source: str = "<stream>", parser: Optional[CrawlerConfigParser] = None) -> CrawlerConfig:
    """Read a crawler config from an open text stream.

    JSON is a subset of YAML, so `yaml.safe_load` handles both formats.
    """
    try:
        data = yaml.safe_load(stream)
    except yaml.YAMLError as e:
        raise ConfigError(source, f"is not valid JSON/YAML: {e}") from e
    if data is None:
        raise ConfigError(source, "is empty")
    return (parser or CrawlerConfigParser()).parse(source=source, data=data)


def load_crawler_config(path: str, parser: Optional[CrawlerConfigParser] = None) -> CrawlerConfig:
    if not os.path.isfile(path):
        raise ConfigError(path, "not found")
    with open(path, "r", encoding="utf-8") as f:
        return read_crawler_config(f, source=path, parser=parser)
