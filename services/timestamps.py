from datetime import datetime, timedelta, timezone
import logging

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now():
    return datetime.now(timezone.utc)


def epoch_millis(dt):
    return (dt - EPOCH) // timedelta(milliseconds=1)


def to_iso(dt):
    """Render ``dt`` in UTC as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime('%Y-%m-%dT%H:%M:%S.') + f"{dt.microsecond // 1000:03d}Z"


def parse_iso(value):
    # fromisoformat only learned the trailing 'Z' in 3.11
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def local_date_string(value):
    """Short local date (``M/D/YYYY``) for an ISO timestamp or datetime.

    Returns an empty string when the stored value cannot be parsed.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = parse_iso(value or '')
        except (ValueError, AttributeError):
            logger.warning(f"[TIMESTAMPS] Unparseable timestamp: {value!r}")
            return ''
    dt = dt.astimezone()
    return f"{dt.month}/{dt.day}/{dt.year}"
