import logging
from typing import Any, Optional

from article_reader.utils.config import ExtractionSettings
from .base_extractor import ArticleExtractor
from .models import Article
from .sites import get_extractor_for_url

logger = logging.getLogger(__name__)


def get_extractor(
    url: str, settings: Optional[ExtractionSettings] = None
) -> ArticleExtractor:
    extractor_class = get_extractor_for_url(url) or ArticleExtractor
    return extractor_class(settings)


def extract_article(
    doc: Any, url: str = "", settings: Optional[ExtractionSettings] = None
) -> Article:
    """
    Extract a readable article from a parsed document.

    Args:
        doc: parsel Selector (or scrapy response) over the page
        url: URL the page was fetched from; picks the site override if any
        settings: extraction thresholds, defaults when omitted

    Returns:
        Article with every field set, defaults standing in for missing ones
    """
    extractor = get_extractor(url, settings)
    article = Article(
        title=extractor.get_title(doc),
        author=extractor.get_author(doc),
        date=extractor.get_published_date(doc),
        content=extractor.get_content(doc),
        url=url or "",
        extractor=extractor.name,
    )
    logger.info(
        f"Extracted '{article.title}' from {url or 'document'} "
        f"({extractor.name}, {len(article.content)} chars)"
    )
    return article
