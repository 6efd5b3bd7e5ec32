import argparse
import logging
import sys
from typing import Optional

from dependency_injector import providers

from wordcrawl import config as env
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigError
from wordcrawl.services.crawl_result_writer import CrawlResultWriter
from wordcrawl.services.crawler_config_parser import load_crawler_config

logger = logging.getLogger("wordcrawl")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Crawl start pages and report the most popular words")
    p.add_argument("config", help="Path to the crawler config (JSON or YAML)")
    p.add_argument("--log-level", type=str, default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    return p


def setup_logging(level: Optional[str] = None) -> None:
    level_name = (level or env.log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )


def main(argv=None, container: Optional[Container] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        crawler_config = load_crawler_config(args.config)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    container = container or Container()
    container.crawler_config.override(providers.Object(crawler_config))

    engine = container.profiled_crawl_engine()
    try:
        result = engine.crawl(crawler_config.start_pages)
    finally:
        container.crawl_engine().close()

    # Result goes to resultPath, or stdout when unset
    writer = CrawlResultWriter(result)
    if crawler_config.result_path:
        writer.write(crawler_config.result_path)
        logger.info("Wrote crawl result to %s", crawler_config.result_path)
    else:
        writer.write_to(sys.stdout)

    profiler = container.profiler()
    if crawler_config.profile_output_path:
        profiler.write_data(crawler_config.profile_output_path)
        logger.info("Appended profile data to %s", crawler_config.profile_output_path)
    else:
        sys.stdout.write("\n")
        profiler.write_data_to(sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == '__main__':
    sys.exit(main())
