"""
Timestamp Utility

Produces the createdAt strings stored on user records (ISO-8601, UTC,
millisecond precision, "Z" suffix, e.g. "2025-03-16T08:30:00.123Z") and
formats them back for display.
"""

from datetime import datetime
import pytz


def utc_now_iso(now=None):
    """
    Get the current UTC time as an ISO-8601 string.

    Args:
        now (datetime, optional): Moment to format instead of the current time.
            Naive datetimes are assumed to be UTC.

    Returns:
        str: Timestamp such as "2025-03-16T08:30:00.123Z"
    """
    if now is None:
        now = datetime.now(pytz.utc)
    elif now.tzinfo is None:
        now = pytz.utc.localize(now)
    else:
        now = now.astimezone(pytz.utc)

    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"


def format_timestamp(value, timezone='UTC'):
    """
    Format a stored createdAt value for display.

    Args:
        value (str): ISO-8601 timestamp as written by utc_now_iso
        timezone (str): Timezone to display in (default: 'UTC')

    Returns:
        str: Date such as "March 16, 2025 08:30", or the input unchanged
            when it cannot be parsed
    """
    if not value:
        return ''

    try:
        parsed = datetime.strptime(value, '%Y-%m-%dT%H:%M:%S.%fZ')
    except (TypeError, ValueError):
        return value

    local = pytz.utc.localize(parsed).astimezone(pytz.timezone(timezone))
    return local.strftime('%B %d, %Y %H:%M')
