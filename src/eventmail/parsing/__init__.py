"""Heuristic parser for pasted event announcements."""

from eventmail.parsing.chunk import EventRecord, parse_chunk
from eventmail.parsing.classifier import classify_line
from eventmail.parsing.dates import parse_date
from eventmail.parsing.segmenter import segment
from eventmail.parsing.times import TimeRange, parse_time

__all__ = [
    "EventRecord",
    "TimeRange",
    "classify_line",
    "parse_chunk",
    "parse_date",
    "parse_time",
    "segment",
]
