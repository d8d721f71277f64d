# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum

DAY_KEY_FORMAT = "YYYY-MM-DD"

MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

EPOCH = pendulum.from_timestamp(0, tz="UTC")

_DAY_FIRST_PATTERN = re.compile(
    r"^(\d{2})/(\d{2})/(\d{4})(?:\s+(\d{2}):(\d{2}))?$"
)
_ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def parse_timestamp(text: Optional[str]) -> Optional[pendulum.DateTime]:
    """
    Parse an event timestamp.

    ISO-8601 is tried first; strings without an offset are read as local time.
    Otherwise the day-first form ``dd/mm/yyyy`` with an optional ``hh:mm`` is
    accepted, in local time with seconds zero. Anything else, including
    calendar-invalid dates, yields None.
    """
    if text is None:
        return None
    raw = str(text).strip()
    if raw == "":
        return None

    iso_value = _parse_iso(raw)
    if iso_value is not None:
        return iso_value

    return _parse_day_first(raw)


def _parse_iso(raw: str) -> Optional[pendulum.DateTime]:
    # pendulum reads the literal "now" as the current instant
    if raw == "now":
        return None
    try:
        parsed = pendulum.parse(raw, tz="local", exact=True)
    except ValueError:
        return None

    # Bare times, durations and intervals name no calendar day
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return pendulum.local(parsed.year, parsed.month, parsed.day)
    return None


def _parse_day_first(raw: str) -> Optional[pendulum.DateTime]:
    match = _DAY_FIRST_PATTERN.match(raw)
    if match is None:
        return None

    day, month, year = int(match.group(1)), int(match.group(2)), int(match.group(3))
    hour = int(match.group(4)) if match.group(4) else 0
    minute = int(match.group(5)) if match.group(5) else 0
    try:
        return pendulum.local(year, month, day, hour, minute)
    except ValueError:
        return None


def timestamp_or_epoch(text: Optional[str]) -> pendulum.DateTime:
    """Parsed timestamp, or the Unix epoch when it cannot be parsed."""
    parsed = parse_timestamp(text)
    if parsed is None:
        return EPOCH
    return parsed


def to_day_key(datetime: pendulum.DateTime) -> str:
    """Local calendar day of a datetime as 'YYYY-MM-DD'."""
    return datetime.in_tz("local").format(DAY_KEY_FORMAT)


def parse_day_key(day_key: Optional[str]) -> Optional[pendulum.DateTime]:
    """Parse a 'YYYY-MM-DD' key to local midnight of that day."""
    if day_key is None:
        return None
    match = _ISO_DATE_PATTERN.match(day_key.strip())
    if match is None:
        return None
    try:
        return pendulum.local(
            int(match.group(1)), int(match.group(2)), int(match.group(3))
        )
    except ValueError:
        return None


def start_of_local_day(datetime: pendulum.DateTime) -> pendulum.DateTime:
    return datetime.in_tz("local").start_of("day")


def start_of_local_month(datetime: pendulum.DateTime) -> pendulum.DateTime:
    return datetime.in_tz("local").start_of("month")


def build_iso_from_date_time(date_str: Optional[str], time_str: Optional[str]) -> str:
    """
    Combine a form date ('YYYY-MM-DD') and time ('HH:mm', default midnight)
    entered in local time into a UTC ISO-8601 string.

    Returns an empty string when either part is malformed.
    """
    date_value = (date_str or "").strip()
    time_value = (time_str or "").strip() or "00:00"

    date_match = _ISO_DATE_PATTERN.match(date_value)
    time_match = _TIME_PATTERN.match(time_value)
    if date_match is None or time_match is None:
        return ""

    try:
        local_value = pendulum.local(
            int(date_match.group(1)),
            int(date_match.group(2)),
            int(date_match.group(3)),
            int(time_match.group(1)),
            int(time_match.group(2)),
        )
    except ValueError:
        return ""
    return local_value.in_tz("UTC").format("YYYY-MM-DD[T]HH:mm:ss.SSS[Z]")


def format_display_date(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("DD/MM/YYYY")


def format_display_datetime(text: Optional[str]) -> str:
    parsed = parse_timestamp(text)
    if parsed is None:
        raw = (text or "").strip()
        return raw or "-"
    return parsed.in_tz("local").format("DD/MM/YYYY HH:mm")


def format_month_title(datetime: pendulum.DateTime) -> str:
    local_value = datetime.in_tz("local")
    return f"{MONTH_NAMES[local_value.month - 1]} {local_value.year}"
