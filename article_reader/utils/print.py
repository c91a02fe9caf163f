"""Printing utilities."""
from typing import List, Optional
from parsel import Selector
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

BLOCK_QUERY = "p, li, h1, h2, h3, h4, h5, h6, blockquote"


def fragment_to_paragraphs(fragment: str) -> List[str]:
    """Turn a content fragment into plain text blocks for terminal display."""
    if not fragment or not fragment.strip():
        return []
    selector = Selector(text=f"<div>{fragment}</div>", type="html")
    blocks = []
    for node in selector.css(BLOCK_QUERY):
        # skip blocks nested in another displayed block
        if node.root.xpath("ancestor::p or ancestor::li or ancestor::blockquote"):
            continue
        text = " ".join(node.root.text_content().split())
        if text:
            blocks.append(text)
    if not blocks:
        text = " ".join(selector.root.text_content().split())
        if text:
            blocks.append(text)
    return blocks


def print_article(
    article, console: Optional[Console] = None, max_width: int = 90
) -> None:
    """Pretty print an extracted article using Rich."""
    console = console or Console(width=max_width)
    byline = " · ".join(part for part in (article.author, article.date) if part)

    header = Text(article.title, style="bold")
    if byline:
        header.append(f"\n{byline}", style="dim")
    console.print(Panel(header, subtitle=article.url or None, expand=True))

    for paragraph in fragment_to_paragraphs(article.content):
        console.print(paragraph, markup=False)
        console.print()


def print_errors(errors: List[str], console: Optional[Console] = None) -> None:
    console = console or Console(stderr=True)
    for message in errors:
        console.print(message, style="red", markup=False)
