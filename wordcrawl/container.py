"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.profiler import Profiler
from wordcrawl.services.crawl_engine import CrawlEngine
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_parser import HtmlPageParser
from wordcrawl.services.robots_cache import RobotsCache
from wordcrawl.services.robots_filter import RobotsFilter


# Environment variables used by the container (read via `wordcrawl.config` helpers).
#
# USER_AGENT (str, default: "wordcrawl/0.1")
#   User-Agent header for page and robots.txt requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for a single outbound HTTP request. Independent of the crawl
#   deadline, which is only checked before a fetch starts.
#
# WORDCRAWL_ROBOTS_LOCATION (str, default: "origin")
#   "origin" reads <scheme>://<host>/robots.txt; "page" reads <page-url>/robots.txt.
#
# WORDCRAWL_ROBOTS_ENABLED (bool, default: true)
#   Set to false to skip robots.txt checks for every crawl.
#
# WORDCRAWL_ROBOTS_CACHE_MAX_SIZE (int, default: 2048)
#   Max number of robots.txt documents kept in memory (LRU eviction).
#
# WORDCRAWL_ROBOTS_CACHE_TTL_SECONDS (int seconds, default: 3600)
#   TTL for robots.txt cache entries.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.get_int_env("HTTP_TIMEOUT", 10),
    "WORDCRAWL_ROBOTS_LOCATION": env.get_str_env("WORDCRAWL_ROBOTS_LOCATION", "origin").strip().lower(),
    "WORDCRAWL_ROBOTS_ENABLED": env.get_bool_env("WORDCRAWL_ROBOTS_ENABLED", True),
    "WORDCRAWL_ROBOTS_CACHE_MAX_SIZE": env.get_int_env("WORDCRAWL_ROBOTS_CACHE_MAX_SIZE", 2048),
    "WORDCRAWL_ROBOTS_CACHE_TTL_SECONDS": env.get_int_env("WORDCRAWL_ROBOTS_CACHE_TTL_SECONDS", 3600),
}


def wrap_for_profiling(profiler: Profiler, delegate):
    return profiler.wrap(delegate)


class Container(containers.DeclarativeContainer):
    """Dependency injection container for wordcrawl.

    `crawler_config` must be provided (overridden) before the crawl engine
    or page parser is requested.
    """

    config = providers.Configuration(default=ENV)

    crawler_config = providers.Dependency(instance_of=CrawlerConfig)

    # One profiler per program run, shared by every wrapped collaborator
    profiler = providers.Singleton(Profiler)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    robots_cache = providers.Singleton(
        RobotsCache,
        max_size=config.WORDCRAWL_ROBOTS_CACHE_MAX_SIZE.as_(int),
        ttl_seconds=config.WORDCRAWL_ROBOTS_CACHE_TTL_SECONDS.as_(int),
    )

    robots_filter = providers.Singleton(
        RobotsFilter,
        http_service=http_service,
        cache=robots_cache,
        robots_location=config.WORDCRAWL_ROBOTS_LOCATION.as_(str),
        enabled=config.WORDCRAWL_ROBOTS_ENABLED.as_(bool),
    )

    page_parser = providers.Singleton(
        HtmlPageParser,
        http_service=http_service,
        ignored_words=crawler_config.provided.ignored_words,
    )

    profiled_page_parser = providers.Singleton(
        wrap_for_profiling,
        profiler=profiler,
        delegate=page_parser,
    )

    crawl_engine = providers.Singleton(
        CrawlEngine.from_config,
        config=crawler_config,
        page_parser=profiled_page_parser,
        robots_filter=robots_filter,
    )

    profiled_crawl_engine = providers.Singleton(
        wrap_for_profiling,
        profiler=profiler,
        delegate=crawl_engine,
    )
