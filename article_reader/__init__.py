"""
Article Reader – readable article extraction from arbitrary HTML pages.
This module exposes the extraction core (title, author, date and body
heuristics) and the scrapy-based fetch routine built around it.
"""

__version__ = "0.1.0"

from .extraction import Article, extract_article

__all__ = ["Article", "extract_article"]
