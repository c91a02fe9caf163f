import logging
from typing import Any

from ..base_extractor import ArticleExtractor
from ..cleaner import clean_content, split_on_double_breaks
from ..dom import (
    clone, inner_html, remove, select_all, select_descendants, select_first,
    text,
)

logger = logging.getLogger(__name__)

LAYOUT_TABLE_SELECTOR = 'table[border="0"][cellspacing="0"][cellpadding="0"]'
CONTENT_CELL_SELECTOR = 'td[width="435"]'

NOISE_SELECTORS = [
    "script",
    "style",
    "map",
    "area",
    "img[usemap]",
    "hr",
    "table img",
]

# Trailing acknowledgements; never part of the essay
THANKS_MARKER = './/b[starts-with(normalize-space(.), "Thanks")]'

NAVIGATION_LABELS = {
    "home", "essays", "h&n", "books", "yc", "arc", "bel", "lisp", "spam",
    "responses", "faqs", "raqs", "quotes", "rss", "bio", "twitter",
    "mastodon", "index", "email",
}


def is_navigation_label(text_value: str) -> bool:
    return text_value.strip().lower() in NAVIGATION_LABELS


def truncate_from(marker, root) -> None:
    """Drop `marker` and everything after it, up to the end of `root`."""
    node = marker
    while node is not root and node is not None:
        parent = node.getparent()
        for sibling in list(node.itersiblings()):
            parent.remove(sibling)
        node.tail = None
        node = parent
    marker.getparent().remove(marker)


class PaulGrahamExtractor(ArticleExtractor):
    """
    Extractor for paulgraham.com essays.
    The site lays essays out in a fixed-width table cell, separates paragraphs
    with <br><br> and navigates through an image map, so the generic
    container cascade picks the wrong node.
    """

    name = "paul_graham"
    domains = ["paulgraham.com"]

    def find_content_cell(self, doc: Any):
        """
        Locate the table cell holding the essay.
        Prefers the fixed-width cell of the layout table, then the table's
        last cell, then the largest cell of the page above the length floor.
        """
        table = select_first(doc, LAYOUT_TABLE_SELECTOR)
        if table is not None:
            cell = select_first(table, CONTENT_CELL_SELECTOR)
            if cell is not None:
                return cell
            cells = select_descendants(table, "td")
            if cells:
                return cells[-1]

        best_cell, best_length = None, 0
        for cell in select_all(doc, "td"):
            length = len(text(cell))
            if length > best_length:
                best_cell, best_length = cell, length
        if best_length > self.settings.min_cell_length:
            return best_cell
        return None

    def clean_cell(self, cell):
        root = clone(cell)
        for selector in NOISE_SELECTORS:
            for element in select_descendants(root, selector):
                remove(element)

        markers = root.xpath(THANKS_MARKER)
        if markers:
            truncate_from(markers[-1], root)
        return root

    def get_content(self, doc: Any) -> str:
        cell = self.find_content_cell(doc)
        if cell is None:
            logger.info("No essay cell found, falling back to generic cleaning")
            return self._clean_body(doc)

        root = self.clean_cell(cell)
        paragraphs = split_on_double_breaks(
            inner_html(root), self.settings, exclude=is_navigation_label
        )
        if paragraphs:
            logger.debug(f"Rebuilt {len(paragraphs)} essay paragraphs")
            return "".join(paragraphs)

        logger.info("No essay paragraphs found, cleaning the cell generically")
        return clean_content(root, self.settings)

    def _clean_body(self, doc: Any) -> str:
        body = select_first(doc, "body")
        if body is None:
            return ""
        return clean_content(body, self.settings)
