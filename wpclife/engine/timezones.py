"""Timezone helpers for caller-local dates and times.

Callers send wall-clock strings ("2024-07-04T08:00:00") without an offset
together with an IANA timezone name. These helpers resolve that pair into UTC
instants using the offset in effect at the target moment, so a DST change
between today and the target date is handled correctly.
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from wpclife.models.constants import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)


def resolve_timezone(tz_name: Optional[str]) -> ZoneInfo:
    """Return the ZoneInfo for ``tz_name``, falling back to UTC if missing or unknown."""
    if tz_name and tz_name.strip():
        try:
            return ZoneInfo(tz_name.strip())
        except (ZoneInfoNotFoundError, ValueError, OSError):
            # Directory names ("America") and overlong keys surface as OSError.
            logger.warning(f"Unknown timezone '{tz_name[:50]}'. Falling back to {DEFAULT_TIMEZONE}.")
    return ZoneInfo(DEFAULT_TIMEZONE)


def local_today(tz_name: Optional[str] = None, now: Optional[datetime] = None) -> date:
    """Today's date on the caller's calendar.

    Args:
        tz_name: IANA timezone name (UTC if missing or unknown)
        now: Current instant; naive values are taken as UTC

    Returns:
        The local calendar date
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(resolve_timezone(tz_name)).date()


def parse_local_datetime(value: str) -> datetime:
    """Parse an ISO-like date/datetime string.

    Accepts 'YYYY-MM-DD', 'YYYY-MM-DDTHH:MM[:SS]', a space instead of 'T',
    and an optional offset or trailing 'Z'.

    Raises:
        ValueError: If the value cannot be parsed
    """
    if not value or not value.strip():
        raise ValueError("Empty datetime value")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def local_to_utc(value: str, tz_name: Optional[str]) -> datetime:
    """Convert a caller-local wall-clock string to an aware UTC datetime.

    The string is interpreted as wall-clock time in ``tz_name``; the UTC offset
    is the one in effect at that wall-clock moment, not at "now". Values that
    already carry an offset are converted as-is.

    Raises:
        ValueError: If the value cannot be parsed
    """
    parsed = parse_local_datetime(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=resolve_timezone(tz_name))
    return parsed.astimezone(timezone.utc)


def parse_local_date(value: Optional[str]) -> Optional[date]:
    """Date portion of an ISO-like string, or None if it is not a date."""
    if not value or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
