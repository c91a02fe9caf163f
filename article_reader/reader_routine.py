#!/usr/bin/env python3
"""
Command line entry point: fetch one or more article URLs and print the
readable version of each.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional, Tuple

from scrapy.crawler import CrawlerProcess

from article_reader.extraction import Article
from article_reader.scraper.reader_spider import ArticleReaderSpider
from article_reader.utils.config import load_config, load_settings, setup_logging
from article_reader.utils.print import print_article, print_errors


def crawler_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """Scrapy settings from the `fetch` config section."""
    fetch = config.get("fetch") or {}
    return {
        "RETRY_TIMES": fetch.get("retry_times", 3),
        "DOWNLOAD_TIMEOUT": fetch.get("download_timeout", 30),
        "DOWNLOAD_DELAY": fetch.get("download_delay", 1),
    }


def read_articles(
    urls: List[str], config: Dict[str, Any]
) -> Tuple[List[Article], List[str]]:
    """
    Run the reader spider over `urls` and collect its results.

    Returns:
        The extracted articles and one message per URL that failed
    """
    process = CrawlerProcess(crawler_settings(config), install_root_handler=False)
    crawler = process.create_crawler(ArticleReaderSpider)
    process.crawl(
        crawler,
        start_urls=urls,
        proxy_url=config.get("proxy_url"),
        extraction_settings=load_settings(config),
    )
    process.start()  # This will block until the crawling is finished

    spider = crawler.spider
    return spider.articles, spider.errors


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract the readable article from web pages."
    )
    parser.add_argument("urls", nargs="+", help="Article URLs to read")
    parser.add_argument(
        "--config", default=None, help="Path to a config.yaml file"
    )
    parser.add_argument(
        "--direct", action="store_true",
        help="Fetch pages directly instead of through the proxy"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    if args.verbose:
        config["debug"] = True
        setup_logging(debug=True)
    if args.direct:
        config["proxy_url"] = None

    articles, errors = read_articles(args.urls, config)
    for article in articles:
        print_article(article)
    if errors:
        print_errors(errors)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
