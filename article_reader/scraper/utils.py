import re
from urllib.parse import quote, urlparse


def _extract_domain_urllib(url):
    """
    Extracts the domain name from a URL using urllib.parse.

    Parameters:
    url (str): The URL string.

    Returns:
    str: The domain name.
    """
    parsed_url = urlparse(url)
    parsed_url = parsed_url.netloc
    parsed_url = re.sub(r'^www\.', '', parsed_url)
    return parsed_url

extract_domain = _extract_domain_urllib


def is_valid_url(url):
    """Absolute http(s) URL with a host."""
    if not url:
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def build_proxy_url(proxy_url, url):
    """Fill the proxy template with the percent-encoded target URL."""
    if not proxy_url:
        return url
    return proxy_url.format(url=quote(url, safe=""))
