"""Date utilities."""
import logging
from datetime import datetime
from typing import Optional
from dateutil.parser import parse as parse_date, ParserError

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

# Two unrelated defaults: a string that leaves year, month or day to the
# default parses differently against each of them.
_FIRST_DEFAULT = datetime(2000, 1, 1)
_SECOND_DEFAULT = datetime(2001, 2, 2)


def format_long_date(dt: datetime) -> str:
    """Render as 'January 5, 2024' whatever the process locale."""
    return f"{MONTH_NAMES[dt.month - 1]} {dt.day}, {dt.year}"


def parse_calendar_date(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse a raw date string permissively.

    Returns None for empty, invalid or ambiguous input; never raises.
    """
    if not raw or not raw.strip():
        return None
    raw = raw.strip()
    try:
        first = parse_date(raw, default=_FIRST_DEFAULT)
        second = parse_date(raw, default=_SECOND_DEFAULT)
    except (ParserError, ValueError, OverflowError) as e:
        logger.debug(f"Unparseable date '{raw}': {e}")
        return None

    if first.date() != second.date():
        logger.debug(f"Ambiguous date '{raw}'")
        return None
    return first


def normalize_date(raw: Optional[str]) -> Optional[str]:
    parsed = parse_calendar_date(raw)
    if parsed is None:
        return None
    return format_long_date(parsed)
