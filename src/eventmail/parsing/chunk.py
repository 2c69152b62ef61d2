"""Chunk parser: builds one EventRecord from one event's worth of text."""

import re
from dataclasses import asdict, dataclass

from eventmail.parsing.classifier import classify_line
from eventmail.parsing.dates import parse_date
from eventmail.parsing.times import parse_time


# Optional leading weekday on the date line: "Sun, Jan 11", "Sunday Jan 11"
LEADING_WEEKDAY_RE = re.compile(
    r"^(?:sunday|monday|tuesday|wednesday|thursday|friday|saturday|sun|mon|tue|wed|thu|fri|sat)\b\.?,?\s*",
    re.IGNORECASE,
)
# A second line that is really a URL or organizer, not a title
NOT_A_TITLE_RE = re.compile(r"^(https?:|Hosted by)", re.IGNORECASE)

_WIRE_NAMES = {"start_time": "startTime", "end_time": "endTime"}


@dataclass(frozen=True)
class EventRecord:
    """A structured event parsed from announcement text."""

    title: str = ""
    date: str = ""  # YYYY-MM-DD or ""
    start_time: str = ""  # HH:MM or ""
    end_time: str = ""  # HH:MM or ""
    venue: str = ""
    address: str = ""
    organizer: str = ""
    url: str = ""
    cost: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        """Flat mapping with camelCase keys, as served over the API."""
        return {_WIRE_NAMES.get(key, key): value for key, value in asdict(self).items()}


def parse_chunk(text: str, reference_year: int | None = None) -> EventRecord | None:
    """Parse a chunk of text describing a single event.

    The first line is always read as the date/time line and the second as the
    title, unless it is a URL or "Hosted by" line. Every remaining line is
    classified on its own.

    Args:
        text: The chunk text.
        reference_year: Year for dates that omit one.

    Returns:
        The parsed record, or None when the chunk has fewer than two lines.
        The title may be empty.
    """
    lines = [stripped for line in text.split("\n") if (stripped := line.strip())]
    if len(lines) < 2:
        return None

    date_line = LEADING_WEEKDAY_RE.sub("", lines[0], count=1)
    times = parse_time(date_line)
    fields: dict[str, str] = {
        "date": parse_date(date_line, reference_year),
        "start_time": times.start_time,
        "end_time": times.end_time,
    }

    remaining = lines[1:]
    if not NOT_A_TITLE_RE.match(remaining[0]):
        fields["title"] = remaining[0]
        remaining = remaining[1:]

    for line in remaining:
        fields.update(classify_line(line, fields))

    return EventRecord(**fields)
