import io
import json

from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.services.crawl_result_writer import CrawlResultWriter


def test_write_to_stream_keeps_popularity_order():
    result = CrawlResult.build({"zebra": 9, "apple": 3}, 4)
    out = io.StringIO()
    CrawlResultWriter(result).write_to(out)
    data = json.loads(out.getvalue())
    assert data == {"wordCounts": {"zebra": 9, "apple": 3}, "urlsVisited": 4}
    assert list(data["wordCounts"]) == ["zebra", "apple"]


def test_write_to_path(tmp_path):
    path = tmp_path / "result.json"
    CrawlResultWriter(CrawlResult.build({}, 0)).write(str(path))
    assert json.loads(path.read_text(encoding="utf-8")) == {"wordCounts": {}, "urlsVisited": 0}
