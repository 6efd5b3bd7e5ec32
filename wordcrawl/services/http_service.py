import requests
from typing import Callable

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import HttpFetchError


class HttpService:
    """
    GET requests for pages and robots.txt files, with a fixed User-Agent.

    Transport errors from `requests` become `HttpFetchError`; the crawl task
    absorbs those. `http_client` is normally `requests.get`.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str) -> HttpResponse:
        try:
            resp = self.http_client(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e
        headers = getattr(resp, "headers", None) or {}
        return HttpResponse(resp.status_code, resp.text, headers.get("Content-Type"))

    def fetch_robots(self, robots_url: str) -> HttpResponse:
        return self.fetch(robots_url)
