"""
Tree capabilities used by the extraction core.

Queries go through parsel (CSS translated by cssselect), mutations and
serialization through the underlying lxml elements. Callers hand in a parsel
Selector, a scrapy response or a bare lxml element; everything returned is an
lxml element.
"""
import copy
from html import escape
from typing import Any, List, Optional

from lxml import html as lxml_html
from parsel import Selector


def as_selector(node: Any) -> Selector:
    if isinstance(node, Selector):
        return node
    # scrapy responses carry their own selector
    selector = getattr(node, "selector", None)
    if isinstance(selector, Selector):
        return selector
    return Selector(root=node, type="html")


def as_element(node: Any):
    return as_selector(node).root


def select_all(node: Any, query: str) -> List:
    """All elements matching `query`, the node itself included, in document order."""
    return [
        match.root for match in as_selector(node).css(query)
        if not isinstance(match.root, str)
    ]


def select_first(node: Any, query: str):
    matches = select_all(node, query)
    return matches[0] if matches else None


def select_descendants(node: Any, query: str) -> List:
    root = as_element(node)
    return [element for element in select_all(root, query) if element is not root]


def clone(node: Any):
    """Deep copy of a subtree, detached from its document."""
    copied = copy.deepcopy(as_element(node))
    copied.tail = None
    return copied


def remove(element) -> bool:
    """Remove an element and its subtree, keeping the text that follows it."""
    if element.getparent() is None:
        return False
    element.drop_tree()
    return True


def text(element) -> str:
    return element.text_content()


def attribute(element, name: str) -> Optional[str]:
    return element.get(name)


def has_element_children(element) -> bool:
    return any(isinstance(child.tag, str) for child in element)


def outer_html(element) -> str:
    return lxml_html.tostring(element, encoding="unicode", with_tail=False)


def inner_html(element) -> str:
    parts = [escape(element.text, quote=False)] if element.text else []
    parts.extend(
        lxml_html.tostring(child, encoding="unicode") for child in element
    )
    return "".join(parts)
