import pytest
from article_reader.scraper.utils import build_proxy_url, extract_domain, is_valid_url


@pytest.mark.parametrize("url,expected_domain", [
    ("http://example.com", "example.com"),
    ("https://example.com", "example.com"),
    ("http://www.example.com", "example.com"),
    ("https://www.example.com/path?query=123", "example.com"),
    ("http://subdomain.example.com/page", "subdomain.example.com"),
    ("http://www.subdomain.example.com", "subdomain.example.com"),
    ("http://www2.example.org", "www2.example.org"),  # only a literal "www." is stripped
    ("ftp://www.example.net", "example.net"),         # unusual scheme
    ("", ""),  # empty string
])
def test_extract_domain(url, expected_domain):
    parsed = extract_domain(url)
    assert parsed == expected_domain


@pytest.mark.parametrize("url,expected", [
    ("https://example.com/article", True),
    ("http://paulgraham.com/greatwork.html", True),
    ("example.com/article", False),
    ("ftp://example.com/file", False),
    ("https://", False),
    ("", False),
    (None, False),
])
def test_is_valid_url(url, expected):
    assert is_valid_url(url) is expected


def test_build_proxy_url_encodes_target():
    proxied = build_proxy_url(
        "https://api.allorigins.win/get?url={url}", "https://example.com/a?b=1&c=2"
    )
    assert proxied == (
        "https://api.allorigins.win/get?url="
        "https%3A%2F%2Fexample.com%2Fa%3Fb%3D1%26c%3D2"
    )


def test_build_proxy_url_without_proxy():
    assert build_proxy_url(None, "https://example.com/a") == "https://example.com/a"
