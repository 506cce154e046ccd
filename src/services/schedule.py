"""Conversion between the "DD/MM/YYYY HH:mm" display format and stored timestamps.

Display strings are read and written in the configured display timezone.
Stored timestamps are naive UTC.
"""

import re
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from src.config import get_settings
from src.exceptions import InvalidFormat

DISPLAY_FORMAT = "%d/%m/%Y %H:%M"

# strptime alone accepts unpadded values such as "1/2/2024 9:5"
_DISPLAY_PATTERN = re.compile(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}")


def _zone(tz: str | None) -> ZoneInfo:
    return ZoneInfo(tz or get_settings().display_timezone)


def parse_display(value: str, tz: str | None = None) -> datetime:
    """Parse a display string into a naive UTC timestamp."""
    if not isinstance(value, str) or not _DISPLAY_PATTERN.fullmatch(value.strip()):
        raise InvalidFormat()
    try:
        local = datetime.strptime(value.strip(), DISPLAY_FORMAT)
    except ValueError:
        # e.g. 31/02/2024
        raise InvalidFormat() from None
    return local.replace(tzinfo=_zone(tz)).astimezone(UTC).replace(tzinfo=None)


def format_display(value: datetime, tz: str | None = None) -> str:
    """Render a stored timestamp as a display string."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(_zone(tz)).strftime(DISPLAY_FORMAT)
