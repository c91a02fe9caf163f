"""
Site-specific extractors for publishers the generic cascade gets wrong.
"""
from typing import List, Optional, Type

from ..base_extractor import ArticleExtractor
from .paul_graham import PaulGrahamExtractor

SITE_EXTRACTORS: List[Type[ArticleExtractor]] = [
    PaulGrahamExtractor,
]


def get_extractor_for_url(url: str) -> Optional[Type[ArticleExtractor]]:
    """Return the first registered site extractor handling `url`, if any."""
    for extractor_class in SITE_EXTRACTORS:
        if extractor_class.can_handle(url):
            return extractor_class
    return None


__all__ = [
    "SITE_EXTRACTORS",
    "PaulGrahamExtractor",
    "get_extractor_for_url",
]
