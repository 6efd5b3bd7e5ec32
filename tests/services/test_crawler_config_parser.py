import io
import json

import pytest

from wordcrawl.exceptions import ConfigError
from wordcrawl.services.crawler_config_parser import (
    CrawlerConfigParser,
    load_crawler_config,
    read_crawler_config,
)

SAMPLE = {
    "startPages": ["http://example.com", "http://example.org"],
    "ignoredUrls": [".*\\.pdf"],
    "ignoredWords": ["^.{1,3}$"],
    "parallelism": 4,
    "maxDepth": 5,
    "timeoutSeconds": 2,
    "popularWordCount": 3,
    "profileOutputPath": "profile.txt",
    "resultPath": "",
}


def test_parse_reads_camel_case_keys():
    cfg = CrawlerConfigParser().parse(source="sample.json", data=SAMPLE)
    assert cfg.start_pages == ("http://example.com", "http://example.org")
    assert cfg.ignored_urls[0].pattern == ".*\\.pdf"
    assert cfg.ignored_words[0].fullmatch("the")
    assert cfg.parallelism == 4
    assert cfg.max_depth == 5
    assert cfg.timeout_seconds == 2.0
    assert cfg.popular_word_count == 3
    assert cfg.profile_output_path == "profile.txt"
    assert cfg.result_path is None
    assert cfg.robots is True


def test_single_start_page_string_is_accepted():
    cfg = CrawlerConfigParser().parse(source="x", data={"startPages": "http://a.com"})
    assert cfg.start_pages == ("http://a.com",)


def test_read_json_from_stream():
    cfg = read_crawler_config(io.StringIO(json.dumps(SAMPLE)))
    assert cfg.max_depth == 5


def test_read_yaml_from_stream():
    text = "startPages:\n  - http://a.com\nmaxDepth: 2\nrobots: false\n"
    cfg = read_crawler_config(io.StringIO(text))
    assert cfg.start_pages == ("http://a.com",)
    assert cfg.robots is False


def test_malformed_document_raises_config_error():
    with pytest.raises(ConfigError):
        read_crawler_config(io.StringIO("{not: [valid"))


def test_non_mapping_document_raises_config_error():
    with pytest.raises(ConfigError):
        read_crawler_config(io.StringIO("- just\n- a list\n"))


def test_invalid_values_raise_config_error():
    with pytest.raises(ConfigError):
        read_crawler_config(io.StringIO(json.dumps({"maxDepth": -2})))


def test_load_missing_file_raises_config_error(tmp_path):
    with pytest.raises(ConfigError) as excinfo:
        load_crawler_config(str(tmp_path / "absent.json"))
    assert "not found" in str(excinfo.value)


def test_load_from_file(tmp_path):
    path = tmp_path / "crawl.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    cfg = load_crawler_config(str(path))
    assert cfg.source == str(path)
    assert cfg.popular_word_count == 3
