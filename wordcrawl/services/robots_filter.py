from urllib.parse import urlparse
import logging
from typing import Optional, Tuple

from wordcrawl.services.robots_fetcher import RobotsFetcher
from wordcrawl.services.robots_cache import RobotsCache

logger = logging.getLogger(__name__)

ROBOTS_LOCATIONS = ("origin", "page")


def is_excluded(url: str, rules: Tuple[str, ...]) -> bool:
    """Path-suffix matching: `url` ends with a rule, or contains `rule + "/"`."""
    for path in rules:
        if url.endswith(path) or (path + "/") in url:
            return True
    return False


class RobotsFilter:
    """
    Decides whether a URL is disallowed by its site's robots.txt.

    Matching is by path suffix rather than the root-relative prefix rules of
    the robots exclusion standard; see `is_excluded`. `robots_location`
    selects where robots.txt is looked up: "origin" uses
    `<scheme>://<host>/robots.txt`, "page" appends `/robots.txt` to the
    page URL itself.
    """

    def __init__(self, http_service,
                 robots_fetcher: Optional[RobotsFetcher] = None,
                 cache: Optional[RobotsCache] = None,
                 robots_location: str = "origin",
                 enabled: bool = True):
        if robots_location not in ROBOTS_LOCATIONS:
            raise ValueError(f"robots_location must be one of {ROBOTS_LOCATIONS}, got {robots_location!r}")
        self.http_service = http_service
        self.robots_fetcher = robots_fetcher if robots_fetcher is not None else RobotsFetcher(http_service)
        self.cache = cache if cache is not None else RobotsCache()
        self.robots_location = robots_location
        self.enabled = enabled

    def robots_url_for(self, url: str) -> Optional[str]:
        try:
            parsed = urlparse(url)
        except ValueError:
            logger.debug("Unparseable URL %s; not checking robots.txt", url)
            return None
        if not parsed.scheme or not parsed.netloc:
            return None
        if self.robots_location == "page":
            return url.rstrip("/") + "/robots.txt"
        return f"{parsed.scheme}://{parsed.netloc}/robots.txt"

    def _rules_for(self, robots_url: str) -> Optional[Tuple[str, ...]]:
        try:
            return self.cache.get(robots_url)
        except KeyError:
            pass
        rules = self.robots_fetcher.fetch(robots_url)
        self.cache.set(robots_url, rules)
        return rules

    def is_disallowed(self, url: str) -> bool:
        if not self.enabled:
            return False

        robots_url = self.robots_url_for(url)
        if robots_url is None:
            # Fail open: malformed or relative URLs are not blocked.
            return False

        rules = self._rules_for(robots_url)
        if not rules:
            return False
        return is_excluded(url, rules)
