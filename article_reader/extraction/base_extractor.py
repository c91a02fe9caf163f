import logging
from typing import Any, List, Optional

from article_reader.utils.config import ExtractionSettings
from .cleaner import DEFAULT_SETTINGS, clean_content
from .dom import select_first
from .selectors import find_author, find_date, find_title

logger = logging.getLogger(__name__)

CONTENT_CONTAINER_SELECTORS = [
    "article",
    '[class*="article-content"]',
    '[class*="post-content"]',
    '[class*="entry-content"]',
    '[class*="content-body"]',
    "main",
    ".content",
    "table",
    "td",
    "body",
]


class ArticleExtractor:
    """
    Generic article extractor.
    Reads title, author and date through the selector cascades and cleans the
    first content container found. Site-specific extractors subclass it and
    override the parts their layout breaks.
    """

    name = "generic"
    # URL substrings this extractor handles; empty for the generic one
    domains: List[str] = []

    def __init__(self, settings: Optional[ExtractionSettings] = None):
        self.settings = settings or DEFAULT_SETTINGS

    @classmethod
    def can_handle(cls, url: str) -> bool:
        url_lower = (url or "").lower()
        return any(domain in url_lower for domain in cls.domains)

    def get_title(self, doc: Any) -> str:
        return find_title(doc)

    def get_author(self, doc: Any) -> str:
        return find_author(doc)

    def get_published_date(self, doc: Any) -> str:
        return find_date(doc)

    def get_content(self, doc: Any) -> str:
        """
        Clean the first matching content container.

        Args:
            doc: parsed document (parsel Selector or scrapy response)

        Returns:
            Markup fragment, empty if the document has no container at all
        """
        for selector in CONTENT_CONTAINER_SELECTORS:
            container = select_first(doc, selector)
            if container is not None:
                logger.debug(f"Using content container '{selector}'")
                return clean_content(container, self.settings)

        logger.warning("No content container found")
        return ""
