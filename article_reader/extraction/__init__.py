"""
Extraction core: selector cascades, content cleaning and site overrides.
Operates on parsed documents only and never mutates them.
"""

from .models import Article
from .extract import extract_article, get_extractor
from .base_extractor import ArticleExtractor
from .cleaner import clean_content
from .filters import is_unwanted
from .selectors import find_first
from .sites import SITE_EXTRACTORS, get_extractor_for_url

__all__ = [
    "Article",
    "ArticleExtractor",
    "SITE_EXTRACTORS",
    "clean_content",
    "extract_article",
    "find_first",
    "get_extractor",
    "get_extractor_for_url",
    "is_unwanted",
]
