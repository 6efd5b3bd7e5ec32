"""
Tests for run.py main() with an injected container.
"""
import json

from dependency_injector import providers

from run import main
from wordcrawl.container import Container
from wordcrawl.domain.config import CrawlerConfig
from wordcrawl.domain.page_parse_result import PageParseResult
from wordcrawl.profiler import profiled
from wordcrawl.services.crawl_engine import CrawlEngine
from wordcrawl.services.page_parser import HtmlPageParser
from wordcrawl.services.robots_filter import RobotsFilter


class StubParser:
    @profiled
    def fetch_and_parse(self, url):
        if url.endswith("/"):
            return PageParseResult({"hello": 2, "world": 1}, [url + "next"])
        return PageParseResult({"hello": 1}, [])


def _write_config(tmp_path, **extra):
    data = {
        "startPages": ["http://example.com/"],
        "maxDepth": 2,
        "timeoutSeconds": 30,
        "popularWordCount": 5,
        "parallelism": 2,
        "robots": False,
    }
    data.update(extra)
    path = tmp_path / "crawl.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_container_creates_services():
    container = Container()
    container.config.USER_AGENT.from_value("TestBot/1.0")
    container.crawler_config.override(providers.Object(CrawlerConfig(max_depth=1, timeout_seconds=1)))

    assert container.http_service().user_agent == "TestBot/1.0"
    assert isinstance(container.robots_filter(), RobotsFilter)
    assert isinstance(container.page_parser(), HtmlPageParser)
    engine = container.crawl_engine()
    try:
        assert isinstance(engine, CrawlEngine)
        assert container.profiled_crawl_engine().wrapped is engine
    finally:
        engine.close()


def test_main_writes_result_and_profile(tmp_path):
    result_path = tmp_path / "result.json"
    profile_path = tmp_path / "profile.txt"
    config_path = _write_config(tmp_path, resultPath=str(result_path), profileOutputPath=str(profile_path))

    container = Container()
    container.page_parser.override(providers.Singleton(StubParser))

    assert main([str(config_path)], container=container) == 0

    result = json.loads(result_path.read_text(encoding="utf-8"))
    assert result == {"wordCounts": {"hello": 3, "world": 1}, "urlsVisited": 2}
    profile = profile_path.read_text(encoding="utf-8")
    assert profile.startswith("Run at ")
    assert "StubParser#fetch_and_parse took" in profile
    assert "CrawlEngine#crawl took" in profile


def test_main_prints_to_stdout_without_paths(tmp_path, capsys):
    config_path = _write_config(tmp_path)
    container = Container()
    container.page_parser.override(providers.Singleton(StubParser))

    assert main([str(config_path)], container=container) == 0

    out = capsys.readouterr().out
    assert '"urlsVisited": 2' in out
    assert "Run at " in out


def test_main_returns_2_on_bad_config(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 2


def test_robots_filter_can_be_disabled_from_env_config():
    container = Container()
    container.config.WORDCRAWL_ROBOTS_ENABLED.from_value(False)
    assert container.robots_filter().enabled is False
