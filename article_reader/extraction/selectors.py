import logging
from typing import Any, Iterator, Optional, Sequence

from article_reader.utils.date import normalize_date
from .dom import attribute, select_first, text

logger = logging.getLogger(__name__)

UNTITLED = "Untitled Article"

TITLE_SELECTORS = (
    'h1[class*="title"]',
    'h1[class*="headline"]',
    '[class*="article-title"] h1',
    '[class*="post-title"] h1',
    "h1.entry-title",
    "h1",
    "title",
)

AUTHOR_SELECTORS = (
    '[class*="author"] [class*="name"]',
    '[class*="byline"]',
    '[rel="author"]',
    '[class*="writer"]',
    'meta[name="author"]',
)

DATE_SELECTORS = (
    "time[datetime]",
    '[class*="date"]',
    '[class*="publish"]',
    'meta[property="article:published_time"]',
    'meta[name="date"]',
)


def node_value(
    element,
    attributes: Sequence[str] = (),
    prefer_attributes: bool = False,
) -> str:
    """
    Read a node's value: its text content, or one of `attributes`.

    Meta-style nodes have no text, so the attributes are tried when the text
    is empty. With `prefer_attributes` they are tried first instead.
    """
    attribute_values = [attribute(element, name) or "" for name in attributes]
    node_text = text(element)
    ordered = (
        attribute_values + [node_text] if prefer_attributes
        else [node_text] + attribute_values
    )
    for value in ordered:
        if value and value.strip():
            return value.strip()
    return ""


def iter_candidates(
    doc: Any,
    patterns: Sequence[str],
    attributes: Sequence[str] = (),
    prefer_attributes: bool = False,
) -> Iterator[str]:
    """Yield the non-empty value of the first match of each pattern, in order."""
    for pattern in patterns:
        element = select_first(doc, pattern)
        if element is None:
            continue
        value = node_value(element, attributes, prefer_attributes)
        if value:
            yield value


def find_first(
    doc: Any,
    patterns: Sequence[str],
    attributes: Sequence[str] = (),
    prefer_attributes: bool = False,
) -> Optional[str]:
    return next(
        iter_candidates(doc, patterns, attributes, prefer_attributes), None
    )


def find_title(doc: Any) -> str:
    return find_first(doc, TITLE_SELECTORS) or UNTITLED


def find_author(doc: Any) -> str:
    return find_first(doc, AUTHOR_SELECTORS, attributes=("content",)) or ""


def find_date(doc: Any) -> str:
    """First date candidate that parses, rendered as 'January 5, 2024'."""
    candidates = iter_candidates(
        doc, DATE_SELECTORS,
        attributes=("datetime", "content"),
        prefer_attributes=True,
    )
    for raw in candidates:
        normalized = normalize_date(raw)
        if normalized:
            return normalized
        logger.debug(f"Skipping unparseable date candidate '{raw}'")
    return ""
