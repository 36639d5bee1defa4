from datetime import datetime, timezone, tzinfo


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_iso_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO 8601 UTC with millisecond precision, e.g. ``2026-10-19T09:05:03.120Z``."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_display_date(moment: datetime, tz: tzinfo) -> str:
    """Render the calendar date as ``M/D/YYYY`` in ``tz``."""
    local = moment.astimezone(tz)
    return f"{local.month}/{local.day}/{local.year}"


def format_display_time(moment: datetime, tz: tzinfo) -> str:
    """Render the wall-clock time as ``h:MM:SS AM|PM`` in ``tz``."""
    local = moment.astimezone(tz)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
