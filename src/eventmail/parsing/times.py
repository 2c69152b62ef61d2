"""Time normalizer: turns "10 AM" or "10:30 AM - 12:15 PM" into 24-hour HH:MM strings."""

import re
from typing import NamedTuple

# A time token with a meridiem, optionally followed by a range separator and a second token.
# "10 AM", "10:30am", "10 AM - 12 PM", "9:45 AM – 11 AM", "7 PM to 9 PM"
TIME_RANGE_RE = re.compile(
    r"(?<!\d)(\d{1,2}(?::\d{2})?)\s*(AM|PM)\b"
    r"(?:\s*(?:-|–|to)\s*(\d{1,2}(?::\d{2})?)\s*(AM|PM)\b)?",
    re.IGNORECASE,
)


class TimeRange(NamedTuple):
    """Start and end of an event in HH:MM, either may be ""."""

    start_time: str = ""
    end_time: str = ""


def format_time(hour_minute: str, meridiem: str) -> str:
    """Convert a 12-hour "H" or "H:MM" token plus AM/PM into 24-hour "HH:MM".

    Hours outside 1-12 are passed through unchanged.
    """
    hours_str, _, minutes = hour_minute.partition(":")
    hours = int(hours_str)
    minutes = minutes or "00"

    if meridiem.upper() == "PM" and 1 <= hours <= 11:
        hours += 12
    elif meridiem.upper() == "AM" and hours == 12:
        hours = 0

    return f"{hours:02d}:{minutes}"


def parse_time(fragment: str) -> TimeRange:
    """Extract the first time or time range from a text fragment.

    Returns an empty TimeRange when no time with AM/PM is present.
    """
    match = TIME_RANGE_RE.search(fragment or "")
    if not match:
        return TimeRange()

    start = format_time(match.group(1), match.group(2))
    end = ""
    if match.group(3) and match.group(4):
        end = format_time(match.group(3), match.group(4))
    return TimeRange(start_time=start, end_time=end)
