"""
Date and Time utilities

This module converts stored epoch timestamps into XMLTV date-time strings.
"""
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

UTC_OFFSET = "+0000"


class DateFormatError(ValueError):
    """Raised when a timestamp cannot be converted"""
    pass


def epoch_to_utc(epoch_seconds: int | float) -> datetime:
    """
    Convert Unix epoch seconds to a timezone-aware UTC datetime

    Args:
        epoch_seconds: Seconds since 1970-01-01T00:00:00Z

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        DateFormatError: If the value is not a usable number
    """
    if isinstance(epoch_seconds, bool):
        raise DateFormatError(f"Invalid epoch timestamp: {epoch_seconds!r}")
    try:
        return datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError) as e:
        raise DateFormatError(f"Invalid epoch timestamp: {epoch_seconds!r}") from e


def format_xmltv_timestamp(epoch_seconds: int | float) -> str:
    """
    Format epoch seconds the way XMLTV expects, e.g. '20231114221320 +0000'

    Args:
        epoch_seconds: Seconds since the epoch

    Returns:
        14-digit UTC date-time, a space, then the zone offset
    """
    dt = epoch_to_utc(epoch_seconds)
    return (
        f"{dt.year:04d}{dt.month:02d}{dt.day:02d}"
        f"{dt.hour:02d}{dt.minute:02d}{dt.second:02d} {UTC_OFFSET}"
    )
