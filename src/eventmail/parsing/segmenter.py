"""Event segmenter: splits pasted announcement text into per-event chunks and parses each."""

import logging
import re

from eventmail.parsing.chunk import EventRecord, parse_chunk

logger = logging.getLogger(__name__)

# A new event starts on a line beginning with a weekday, a month name or "M/D".
# The newline is consumed; the boundary line itself starts the next chunk.
BOUNDARY_RE = re.compile(
    r"\n(?="
    r"(?:(?:sunday|monday|tuesday|wednesday|thursday|friday|saturday|sun|mon|tue|wed|thu|fri|sat)\b"
    r"|(?:january|february|march|april|may|june|july|august|september|october|november|december"
    r"|jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|nov|dec)\b"
    r"|\d{1,2}/\d{1,2}))",
    re.IGNORECASE,
)

# UTF-8 "·" and "•" decoded as Mac Roman or Windows-1252 upstream
MOJIBAKE_SEPARATORS = {
    "¬∑": "·",
    "‚Ä¢": "•",
    "Â·": "·",
    "â€¢": "•",
}


def normalize_text(text: str) -> str:
    """Normalize line endings and repair mis-decoded separator glyphs."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    for broken, fixed in MOJIBAKE_SEPARATORS.items():
        text = text.replace(broken, fixed)
    return text


def split_chunks(text: str) -> list[str]:
    """Split normalized text into trimmed, non-empty event chunks."""
    return [stripped for chunk in BOUNDARY_RE.split(text) if (stripped := chunk.strip())]


def segment(text: str | None, reference_year: int | None = None) -> list[EventRecord]:
    """Parse all events found in a blob of announcement text.

    Args:
        text: Raw text, typically an email body. None or "" yields no events.
        reference_year: Year for dates that omit one; defaults to the current year.

    Returns:
        Parsed records in input order. Records without a title are dropped.
    """
    if not text:
        return []

    events: list[EventRecord] = []
    for chunk in split_chunks(normalize_text(text)):
        event = parse_chunk(chunk, reference_year)
        if event is None:
            logger.debug("Skipping chunk with fewer than two lines: %r", chunk[:60])
            continue
        if not event.title:
            logger.debug("Dropping untitled event from chunk: %r", chunk[:60])
            continue
        events.append(event)

    return events
