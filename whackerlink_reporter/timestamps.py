from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from whackerlink_reporter.constants import DEFAULT_TIMEZONE, TIMESTAMP_TIMESPEC
from whackerlink_reporter.errors import TimezoneNotFoundError


def resolve_timezone(name: str = DEFAULT_TIMEZONE) -> ZoneInfo:
    """
    Look up a named zone in the timezone database.

    Args:
        name: IANA zone identifier, e.g. 'America/Chicago'

    Returns:
        The resolved zone

    Raises:
        TimezoneNotFoundError: if the zone is unknown or the name is malformed
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise TimezoneNotFoundError(name) from e


def format_timestamp(instant: datetime, zone: tzinfo) -> str:
    """
    Render an instant in the given zone with millisecond precision and a
    numeric UTC offset, e.g. '2025-01-15T06:30:00.123-06:00'.

    Naive instants are taken to be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    return instant.astimezone(zone).isoformat(timespec=TIMESTAMP_TIMESPEC)


def report_timestamp(zone: tzinfo, now: Optional[datetime] = None) -> str:
    return format_timestamp(now or datetime.now(timezone.utc), zone)
