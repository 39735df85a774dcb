"""
Timestamp helpers.

Report timestamps are stored as timezone-aware UTC and serialized as ISO
8601 with millisecond precision and a ``Z`` suffix. LOCAL_TIMEZONE only
affects the "Generated on" line of exported PDFs.
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional
import logging
import zoneinfo

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Return ``dt`` as an aware UTC datetime.

    Naive values are taken to be UTC already, which is what PyMongo hands
    back for stored dates.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """e.g. ``2025-12-24T10:30:00.123Z``; milliseconds keep same-second saves ordered"""
    if dt is None:
        return None
    return ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a stored ISO 8601 timestamp.

    Accepts a ``Z`` suffix or an explicit offset; naive strings are read as UTC.

    Returns:
        Aware UTC datetime, or None for empty or unparseable input
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None
    return ensure_utc(parsed)


def to_local(dt: datetime, tz_name: str) -> datetime:
    """Convert for display; unknown zone names fall back to UTC with a warning"""
    dt = ensure_utc(dt)
    if tz_name.upper() == "UTC":
        return dt
    try:
        zone = zoneinfo.ZoneInfo(tz_name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_name}', falling back to UTC")
        return dt
    return dt.astimezone(zone)
