import logging
import re
from collections import Counter
from typing import Callable, Iterable, Optional, Protocol
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.exceptions import HttpFetchError
from wordcrawl.profiler import profiled

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)*")
_SKIPPED_TAGS = ["script", "style", "noscript", "template"]


class PageParser(Protocol):
    """The fetch-and-parse capability consumed by the crawl engine."""

    def fetch_and_parse(self, url: str) -> PageParseResult: ...


class HtmlPageParser:
    """Fetch a page over HTTP and extract its words and outbound links.

    Words are lowercased; any word fully matching one of `ignored_words` is
    dropped. Links are resolved against the page URL, stripped of
    fragments, and limited to http(s).
    """

    def __init__(
        self,
        http_service,
        ignored_words: Iterable[re.Pattern] = (),
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self.http_service = http_service
        self.ignored_words = tuple(ignored_words)
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    @profiled
    def fetch_and_parse(self, url: str) -> PageParseResult:
        response = self.http_service.fetch(url)
        if not response.ok:
            raise HttpFetchError(url, RuntimeError(f"status {response.status_code}"))
        if not response.is_html():
            logger.debug("Skipping non-HTML %s (%s)", url, response.content_type)
            return PageParseResult(word_counts={}, links=[])
        return self.parse(url, response.text or "")

    def parse(self, base_url: str, html: str) -> PageParseResult:
        soup = self._soup_factory(html)
        links = self.extract_links(base_url, soup)
        for tag in soup.find_all(_SKIPPED_TAGS):
            tag.decompose()
        words = self.count_words(soup.get_text(separator=" "))
        logger.debug("Parsed %s: %d distinct words, %d links", base_url, len(words), len(links))
        return PageParseResult(word_counts=words, links=links)

    def extract_links(self, base_url: str, soup: BeautifulSoup) -> list:
        urls = []
        seen = set()
        for a in soup.find_all("a", href=True):
            abs_url, _ = urldefrag(urljoin(base_url, a.get("href").strip()))
            if urlparse(abs_url).scheme not in ("http", "https"):
                continue
            if abs_url in seen:
                continue
            seen.add(abs_url)
            urls.append(abs_url)
        return urls

    def count_words(self, text: str) -> dict:
        counts = Counter()
        for match in _WORD_RE.finditer(text):
            word = match.group(0).lower()
            if any(p.fullmatch(word) for p in self.ignored_words):
                continue
            counts[word] += 1
        return dict(counts)
