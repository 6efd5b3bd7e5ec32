import logging
from typing import Optional, Tuple

from wordcrawl.exceptions import HttpFetchError

logger = logging.getLogger(__name__)

DISALLOW_PREFIX = "Disallow:"


def parse_disallow_rules(text: str) -> Tuple[str, ...]:
    """Return the non-empty paths of every `Disallow:` line, in file order."""
    rules = []
    for line in text.splitlines():
        line = line.strip()
        if not line.startswith(DISALLOW_PREFIX):
            continue
        path = line[len(DISALLOW_PREFIX):].strip()
        # An empty Disallow value allows everything.
        if path:
            rules.append(path)
    return tuple(rules)


class RobotsFetcher:
    """Fetch robots.txt content and return its Disallow rules or None.

    Uses an `http_service` with a `fetch_robots(url)` method that returns
    an HttpResponse.
    """
    def __init__(self, http_service):
        self.http_service = http_service

    def fetch(self, robots_url: str) -> Optional[Tuple[str, ...]]:
        try:
            response = self.http_service.fetch_robots(robots_url)
        except HttpFetchError as e:
            logger.debug("Network error fetching robots.txt from %s: %s", robots_url, e)
            return None
        except Exception:
            logger.exception("Unexpected error fetching robots.txt from %s", robots_url)
            return None

        if response.status_code != 200 or not response.text:
            return None

        return parse_disallow_rules(response.text)
