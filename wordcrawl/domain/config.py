from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from wordcrawl.exceptions import ConfigError


def compile_patterns(patterns: Optional[Iterable], source: str = "<config>") -> Tuple[re.Pattern, ...]:
    compiled = []
    for p in patterns or ():
        if isinstance(p, re.Pattern):
            compiled.append(p)
            continue
        try:
            compiled.append(re.compile(str(p)))
        except re.error as e:
            raise ConfigError(source, f"has invalid pattern {p!r}: {e}") from e
    return tuple(compiled)


@dataclass(frozen=True)
class CrawlerConfig:
    """Settings for one crawl run.

    Validation runs at construction so a bad value fails before any thread
    is started.
    """

    start_pages: Tuple[str, ...] = ()
    ignored_urls: Tuple[re.Pattern, ...] = ()
    ignored_words: Tuple[re.Pattern, ...] = ()
    parallelism: int = 1
    max_depth: int = 0
    timeout_seconds: float = 0.0
    popular_word_count: int = 0
    profile_output_path: Optional[str] = None
    result_path: Optional[str] = None
    robots: bool = True
    source: str = field(default="<config>", compare=False)

    def __post_init__(self):
        # Normalize list inputs so the dataclass stays hashable and immutable.
        object.__setattr__(self, "start_pages", tuple(self.start_pages or ()))
        object.__setattr__(self, "ignored_urls", compile_patterns(self.ignored_urls, self.source))
        object.__setattr__(self, "ignored_words", compile_patterns(self.ignored_words, self.source))

        if self.parallelism is None or int(self.parallelism) <= 0:
            raise ConfigError(self.source, f"parallelism must be positive, got {self.parallelism}")
        if self.max_depth is None or int(self.max_depth) < 0:
            raise ConfigError(self.source, f"maxDepth must be >= 0, got {self.max_depth}")
        if self.timeout_seconds is None or float(self.timeout_seconds) < 0:
            raise ConfigError(self.source, f"timeoutSeconds must be >= 0, got {self.timeout_seconds}")
        if self.popular_word_count is None or int(self.popular_word_count) < 0:
            raise ConfigError(self.source, f"popularWordCount must be >= 0, got {self.popular_word_count}")

        object.__setattr__(self, "parallelism", int(self.parallelism))
        object.__setattr__(self, "max_depth", int(self.max_depth))
        object.__setattr__(self, "timeout_seconds", float(self.timeout_seconds))
        object.__setattr__(self, "popular_word_count", int(self.popular_word_count))

    def __repr__(self):
        return (
            f"<CrawlerConfig source={self.source} start_pages={len(self.start_pages)} "
            f"max_depth={self.max_depth} parallelism={self.parallelism}>"
        )
