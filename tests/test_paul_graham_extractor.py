import pytest
from parsel import Selector

from article_reader.extraction import extract_article
from article_reader.extraction.sites import (
    PaulGrahamExtractor, get_extractor_for_url
)
from article_reader.extraction.sites.paul_graham import is_navigation_label
from article_reader.utils.config import ExtractionSettings

ESSAY_URL = "http://www.paulgraham.com/greatwork.html"

FIRST = (
    "If you collected lists of techniques for doing great work in a lot of "
    "different fields, what would the intersection look like?"
)
SECOND = (
    "The first step is to decide what to work on. The work you choose needs "
    "to have three qualities."
)

ESSAY_PAGE = f"""
<html><head><title>How to Do Great Work</title></head><body>
<table border="0" cellspacing="0" cellpadding="0">
<tr valign="top">
<td><map name="nav"><area shape="rect" coords="0,0,67,21" href="index.html"></map>
<img src="bel-8.gif" usemap="#nav" border="0"></td>
<td width="435"><img src="title.gif" alt="How to Do Great Work"><br><br>
<font size="2" face="verdana">July 2023<br><br>{FIRST}<br><br>Essays<br><br>
{SECOND}<br><br><b>Thanks</b> to Trevor Blackwell and Jessica Livingston for
reading drafts of this.<br><br>Some trailing text after the acknowledgements.</font>
<hr><font size="2">Japanese Translation available at a trailing link.</font>
</td></tr></table></body></html>
"""


@pytest.fixture
def essay_doc():
    return Selector(text=ESSAY_PAGE, type="html")


def paragraph_texts(fragment):
    doc = Selector(text=fragment, type="html")
    return [" ".join(p.root.text_content().split()) for p in doc.css("p")]


def test_registry_matches_site_urls():
    assert get_extractor_for_url(ESSAY_URL) is PaulGrahamExtractor
    assert get_extractor_for_url("https://PaulGraham.com/ds.html") is PaulGrahamExtractor
    assert get_extractor_for_url("https://example.com/article") is None


def test_extracts_essay_paragraphs(essay_doc):
    content = PaulGrahamExtractor().get_content(essay_doc)
    assert paragraph_texts(content) == [
        " ".join(FIRST.split()),
        " ".join(SECOND.split()),
    ]


def test_truncates_from_thanks_marker(essay_doc):
    content = PaulGrahamExtractor().get_content(essay_doc)
    for trailing in ("Thanks", "Trevor", "trailing text", "Japanese"):
        assert trailing not in content


def test_drops_navigation_and_images(essay_doc):
    content = PaulGrahamExtractor().get_content(essay_doc)
    assert "<img" not in content
    assert "<map" not in content
    assert "<hr" not in content


def test_navigation_labels_are_excluded_regardless_of_length(essay_doc):
    extractor = PaulGrahamExtractor(ExtractionSettings(min_paragraph_length=0))
    texts = paragraph_texts(extractor.get_content(essay_doc))
    assert "July 2023" in texts
    assert "Essays" not in texts


@pytest.mark.parametrize("label,expected", [
    ("Essays", True),
    ("  RSS ", True),
    ("h&n", True),
    ("Essays on startups", False),
])
def test_is_navigation_label(label, expected):
    assert is_navigation_label(label) is expected


def test_falls_back_to_largest_cell():
    sentence = "This sentence belongs to a long essay body that keeps going on. "
    body = f"{sentence * 10}<br><br>{sentence * 10}"
    doc = Selector(
        text=(
            "<html><body><table><tr><td>Home</td>"
            f"<td>{body}</td></tr></table></body></html>"
        ),
        type="html",
    )
    content = PaulGrahamExtractor().get_content(doc)
    assert len(paragraph_texts(content)) == 2
    assert "Home" not in content


def test_layout_table_without_fixed_width_cell_uses_last_cell():
    doc = Selector(
        text=(
            '<html><body><table border="0" cellspacing="0" cellpadding="0">'
            "<tr><td>Home</td><td>Essays</td>"
            f"<td>{FIRST}<br><br>{SECOND}</td></tr></table></body></html>"
        ),
        type="html",
    )
    content = PaulGrahamExtractor().get_content(doc)
    assert paragraph_texts(content) == [
        " ".join(FIRST.split()),
        " ".join(SECOND.split()),
    ]
    assert "Home" not in content

def test_small_cells_defer_to_generic_cleaning():
    paragraph = "A paragraph outside of any table cell that is long enough."
    doc = Selector(
        text=(
            "<html><body><table><tr><td>Short cell</td></tr></table>"
            f"<p>{paragraph}</p></body></html>"
        ),
        type="html",
    )
    assert PaulGrahamExtractor().get_content(doc) == f"<p>{paragraph}</p>"


def test_cell_without_paragraphs_is_cleaned_generically():
    doc = Selector(
        text=(
            '<html><body><table border="0" cellspacing="0" cellpadding="0">'
            '<tr><td width="435"><ul><li>One</li><li>Two</li></ul></td></tr>'
            "</table></body></html>"
        ),
        type="html",
    )
    assert PaulGrahamExtractor().get_content(doc) == "<ul><li>One</li><li>Two</li></ul>"


def test_cell_without_breaks_becomes_one_paragraph():
    paragraph = "An essay cell that uses real paragraph tags for its text."
    doc = Selector(
        text=(
            '<html><body><table border="0" cellspacing="0" cellpadding="0">'
            f'<tr><td width="435"><p>{paragraph}</p></td></tr></table></body></html>'
        ),
        type="html",
    )
    assert PaulGrahamExtractor().get_content(doc) == f"<p>{paragraph}</p>"


def test_override_path_in_orchestrator(essay_doc):
    before = essay_doc.get()
    article = extract_article(essay_doc, ESSAY_URL)
    assert article.extractor == "paul_graham"
    assert article.title == "How to Do Great Work"
    assert "Trevor" not in article.content
    assert essay_doc.get() == before
