"""
Generic content cleaner.

Works on a clone of the container: strips structural boilerplate and decorative
glyphs, then rebuilds the article body from, in order of preference,
  1. semantic blocks (paragraphs, lists, headings, blockquotes),
  2. text delimited by double <br> tags,
  3. text delimited by blank lines,
and finally the cleaned markup as is.
"""
import logging
import re
from html import escape
from typing import Callable, List, Optional

from lxml import html as lxml_html

from article_reader.utils.config import ExtractionSettings
from .dom import (
    clone, has_element_children, inner_html, outer_html, remove,
    select_all, select_descendants, text,
)
from .filters import is_stray_glyph, is_substantial, is_unwanted

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = ExtractionSettings()

BOILERPLATE_SELECTORS = [
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    ".advertisement",
    ".ads",
    '[class*="advert"]',
    '[class*="social"]',
    '[class*="share"]',
    '[class*="comment"]',
    '[class*="sidebar"]',
    '[class*="related"]',
    '[class*="newsletter"]',
    '[class*="popup"]',
    '[class*="modal"]',
]

DECORATIVE_ANCHOR_SELECTORS = [
    'a[href^="#"]',
    'a[class*="anchor"]',
    'a[class*="permalink"]',
    'a[class*="link"]',
]

IMAGE_SELECTOR = "svg, img"

# Only graphics when they carry no text of their own
EMPTY_GRAPHIC_SELECTOR = 'svg, i, [class*="icon"]'

CONTENT_SELECTOR = "p, ul, ol, h1, h2, h3, h4, h5, h6, blockquote"

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
LIST_TAGS = {"ul", "ol"}

# Tags unwrapped from a reconstructed paragraph; a <br><br> split can cut
# through them and leave them unbalanced. Head tags never belong in a body.
BLOCK_TAGS = {
    "div", "p", "section", "article", "main", "aside", "center",
    "table", "tbody", "thead", "tfoot", "tr", "td", "th",
    "ul", "ol", "li", "blockquote", "body", "html", "form",
    "head", "title", "meta", "link", "base",
}

DOUBLE_BREAK = re.compile(r"<br\s*/?>\s*<br\s*/?>", re.IGNORECASE)
SINGLE_BREAK = re.compile(r"<br\s*/?>", re.IGNORECASE)
BLANK_LINE = re.compile(r"\n\s*\n")


def remove_boilerplate(root) -> None:
    for selector in BOILERPLATE_SELECTORS:
        for element in select_descendants(root, selector):
            remove(element)


def has_graphic(element) -> bool:
    if select_descendants(element, IMAGE_SELECTOR):
        return True
    return any(
        not text(graphic).strip()
        for graphic in select_descendants(element, EMPTY_GRAPHIC_SELECTOR)
    )


def remove_decorative_anchors(root) -> None:
    for selector in DECORATIVE_ANCHOR_SELECTORS:
        for anchor in select_descendants(root, selector):
            if text(anchor).strip() and not has_graphic(anchor):
                continue
            remove(anchor)


def remove_stray_glyphs(root, max_glyph_length: int) -> None:
    for element in select_descendants(root, EMPTY_GRAPHIC_SELECTOR):
        if not text(element).strip():
            remove(element)

    for element in list(root.iterdescendants()):
        if not isinstance(element.tag, str) or has_element_children(element):
            continue
        if is_stray_glyph(text(element), max_glyph_length):
            remove(element)


def _is_content_node(element, settings: ExtractionSettings) -> bool:
    tag = element.tag.lower()
    node_text = text(element).strip()
    if tag in HEADING_TAGS:
        return bool(node_text) and not is_unwanted(node_text)
    if tag in LIST_TAGS:
        return has_element_children(element)
    return is_substantial(node_text, settings.min_paragraph_length)


def collect_content_nodes(root, settings: ExtractionSettings) -> List:
    """Qualifying content blocks in document order, outermost only."""
    candidates = [
        element for element in select_all(root, CONTENT_SELECTOR)
        if _is_content_node(element, settings)
    ]
    candidate_set = set(candidates)
    return [
        element for element in candidates
        if not any(ancestor in candidate_set for ancestor in element.iterancestors())
    ]


def segment_to_paragraph(segment: str):
    """Parse a markup segment into a <p> holding its inline content."""
    paragraph = lxml_html.fragment_fromstring(segment, create_parent="p")
    for element in list(paragraph.iterdescendants()):
        if isinstance(element.tag, str) and element.tag.lower() in BLOCK_TAGS:
            element.drop_tag()
    return paragraph


def split_on_double_breaks(
    markup: str,
    settings: ExtractionSettings = DEFAULT_SETTINGS,
    exclude: Optional[Callable[[str], bool]] = None,
) -> List[str]:
    """
    Rebuild paragraphs from markup that separates them with <br><br>.

    Segments are kept when their plain text is substantial and, when given,
    `exclude` does not reject it.
    """
    paragraphs = []
    for segment in DOUBLE_BREAK.split(markup):
        segment = SINGLE_BREAK.sub(" ", segment).strip()
        if not segment:
            continue
        paragraph = segment_to_paragraph(segment)
        paragraph_text = " ".join(text(paragraph).split())
        if not is_substantial(paragraph_text, settings.min_paragraph_length):
            continue
        if exclude is not None and exclude(paragraph_text):
            continue
        paragraphs.append(outer_html(paragraph))
    return paragraphs


def text_with_breaks(root) -> str:
    """Plain text of `root` with every <br> read as a line break."""
    copy = clone(root)
    for br in copy.iter("br"):
        br.tail = "\n" + (br.tail or "")
    return text(copy)


def split_on_blank_lines(
    plain_text: str, settings: ExtractionSettings = DEFAULT_SETTINGS
) -> List[str]:
    paragraphs = []
    for segment in BLANK_LINE.split(plain_text):
        segment = segment.strip()
        if len(segment) > settings.min_paragraph_length:
            paragraphs.append(f"<p>{escape(segment, quote=False)}</p>")
    return paragraphs


def clean_content(container, settings: Optional[ExtractionSettings] = None) -> str:
    """Return the cleaned article body of `container` as a markup fragment."""
    settings = settings or DEFAULT_SETTINGS
    root = clone(container)

    remove_boilerplate(root)
    remove_decorative_anchors(root)
    remove_stray_glyphs(root, settings.max_glyph_length)

    content_nodes = collect_content_nodes(root, settings)
    if content_nodes:
        logger.debug(f"Kept {len(content_nodes)} content blocks")
        return "".join(outer_html(element) for element in content_nodes)

    markup = inner_html(root)
    if DOUBLE_BREAK.search(markup):
        paragraphs = split_on_double_breaks(markup, settings)
        if paragraphs:
            logger.debug(f"Rebuilt {len(paragraphs)} paragraphs from <br><br> markup")
            return "".join(paragraphs)

    paragraphs = split_on_blank_lines(text_with_breaks(root), settings)
    if paragraphs:
        logger.debug(f"Rebuilt {len(paragraphs)} paragraphs from plain text")
        return "".join(paragraphs)

    logger.debug("No paragraph structure found, returning cleaned markup")
    return markup
