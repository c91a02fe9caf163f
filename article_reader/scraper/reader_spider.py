import json
import time
from typing import List, Optional

import scrapy
from parsel import Selector

from article_reader.extraction import Article, extract_article
from article_reader.utils.config import ExtractionSettings
from .utils import build_proxy_url, extract_domain, is_valid_url

DEFAULT_PROXY_URL = "https://api.allorigins.win/get?url={url}"


class ArticleFetchError(Exception):
    """The page could not be retrieved as HTML."""
    pass


class ArticleReaderSpider(scrapy.Spider):
    """
    Fetches article pages and runs the extraction core on each of them.
    Pages go through the allorigins proxy unless `proxy_url` is None; the
    source URL travels in the request meta so the extractor sees the real
    address rather than the proxy's.
    """

    name = "article_reader"
    custom_settings = {
        "CONCURRENT_REQUESTS": 2,
        "RANDOMIZE_DOWNLOAD_DELAY": True,
        "TELNETCONSOLE_ENABLED": False,
        "RETRY_ENABLED": True,
        "RETRY_HTTP_CODES": [500, 502, 503, 504, 522, 524, 408, 429],
        "AUTOTHROTTLE_ENABLED": True,
        "AUTOTHROTTLE_START_DELAY": 1,
        "AUTOTHROTTLE_MAX_DELAY": 30,
        "DEFAULT_REQUEST_HEADERS": {
            "User-Agent": (
                "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
                "AppleWebKit/537.36 (KHTML, like Gecko) "
                "Chrome/120.0.0.0 Safari/537.36"
            ),
            "Accept": (
                "text/html,application/xhtml+xml,application/json,"
                "application/xml;q=0.9,*/*;q=0.8"
            ),
            "Accept-Language": "en-US,en;q=0.9",
        },
    }

    def __init__(
        self,
        start_urls: List[str],
        proxy_url: Optional[str] = DEFAULT_PROXY_URL,
        extraction_settings: Optional[ExtractionSettings] = None,
        *args,
        **kwargs
    ):
        super().__init__(*args, **kwargs)
        self.start_urls = start_urls
        self.proxy_url = proxy_url
        self.extraction_settings = extraction_settings
        self.articles: List[Article] = []
        self.errors: List[str] = []

    def record_error(self, message: str) -> None:
        self.logger.warning(message)
        self.errors.append(message)

    def start_requests(self):
        """Generate one request per valid start URL."""
        for url in self.start_urls:
            url = (url or "").strip()
            if not url:
                self.record_error("Please enter a URL")
                continue
            if not is_valid_url(url):
                self.record_error(f"Please enter a valid URL: {url}")
                continue

            yield scrapy.Request(
                url=build_proxy_url(self.proxy_url, url),
                callback=self.parse,
                errback=self.handle_error,
                dont_filter=True,
                meta={
                    "source_url": url,
                    "proxied": bool(self.proxy_url),
                    "handle_httpstatus_all": True,
                    "start_time": time.time(),
                },
            )

    def handle_error(self, failure):
        """Handle request errors left after retries."""
        request = failure.request
        source_url = request.meta.get("source_url", request.url)
        self.record_error(
            f"Failed to extract article: {source_url} | Reason: {failure.value}"
        )

    def extract_html(self, response) -> str:
        """
        Unwrap the page HTML from a response.

        Proxied responses are allorigins JSON envelopes holding the page in
        `contents` and the upstream status in `status.http_code`.
        """
        if not response.meta.get("proxied"):
            return response.text

        try:
            data = json.loads(response.text)
        except ValueError as e:
            raise ArticleFetchError(f"Invalid proxy response: {e}") from e
        if not isinstance(data, dict):
            raise ArticleFetchError("Invalid proxy response: not an object")

        status = (data.get("status") or {}).get("http_code")
        if isinstance(status, int) and status >= 400:
            raise ArticleFetchError(f"Failed to fetch the page: status {status}")

        contents = data.get("contents")
        if not contents:
            raise ArticleFetchError("Failed to fetch the page: empty contents")
        return contents

    def parse(self, response):
        """
        Called for each fetched page.
        Builds the document tree and yields the extracted article as a dict.
        """
        source_url = response.meta.get("source_url", response.url)
        if response.status != 200:
            self.record_error(
                f"Failed to extract article: {source_url} | "
                f"Reason: status {response.status}"
            )
            return

        try:
            html = self.extract_html(response)
        except ArticleFetchError as e:
            self.record_error(f"Failed to extract article: {source_url} | Reason: {e}")
            return

        doc = Selector(text=html, type="html")
        article = extract_article(doc, source_url, self.extraction_settings)
        self.articles.append(article)

        start_time = response.meta.get("start_time")
        duration = int(time.time() - start_time) if start_time else None
        self.logger.info(
            f"Read {extract_domain(source_url)} article '{article.title}'"
            + (f" in {duration}s" if duration is not None else "")
        )
        yield article.model_dump()
