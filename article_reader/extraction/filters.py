import re

UNWANTED_PATTERNS = [
    re.compile(r"subscribe", re.IGNORECASE),
    re.compile(r"newsletter", re.IGNORECASE),
    re.compile(r"advertisement", re.IGNORECASE),
    re.compile(r"cookie", re.IGNORECASE),
    re.compile(r"privacy policy", re.IGNORECASE),
    re.compile(r"terms of service", re.IGNORECASE),
    re.compile(r"follow us", re.IGNORECASE),
    re.compile(r"share this", re.IGNORECASE),
]

# Bullets, separators and punctuation left behind by stripped widgets
GLYPH_CHARACTERS = re.compile(
    r"^[\s•·‣▪●◦¶§–—|/\\\-*~#>»«›‹,.;:!?()\[\]{}'\"]+$"
)


def is_unwanted(text: str) -> bool:
    """Return True if the text reads like boilerplate (subscribe boxes, cookie notices...)."""
    return any(pattern.search(text) for pattern in UNWANTED_PATTERNS)


def is_stray_glyph(text: str, max_length: int = 2) -> bool:
    stripped = text.strip()
    if not stripped or len(stripped) > max_length:
        return False
    return bool(GLYPH_CHARACTERS.match(stripped))


def is_substantial(text: str, min_length: int = 20) -> bool:
    """Strictly longer than `min_length` once trimmed, and not boilerplate."""
    stripped = text.strip()
    return len(stripped) > min_length and not is_unwanted(stripped)
