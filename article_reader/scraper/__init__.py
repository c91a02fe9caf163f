"""
Submodule for fetch-related logic.
Retrieves pages (through the allorigins proxy by default) and hands the
parsed document to the extraction core.
"""

from .reader_spider import ArticleReaderSpider, ArticleFetchError
from .utils import extract_domain, is_valid_url, build_proxy_url

__all__ = [
    "ArticleReaderSpider",
    "ArticleFetchError",
    "extract_domain",
    "is_valid_url",
    "build_proxy_url",
]
