"""Line classifier: assigns a line of an event chunk to a record field.

Rules are evaluated top to bottom and the first one that matches wins. Each rule
returns the field updates for the line; a line no rule matches yields no update.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass

URL_RE = re.compile(r"^https?:", re.IGNORECASE)
HOSTED_BY_RE = re.compile(r"^Hosted by\s+(.+)", re.IGNORECASE)
STREET_ADDRESS_RE = re.compile(r"^\d+\s+\w+")
COST_RE = re.compile(r"^(\$|Free\b)", re.IGNORECASE)
NOT_A_VENUE_RE = re.compile(r"^(http|Hosted by|\$|Free)", re.IGNORECASE)

# Middle dot and bullet, as used in "Venue · City" listings
VENUE_SEPARATORS = ("·", "•")
VENUE_SEPARATOR_RE = re.compile("|".join(map(re.escape, VENUE_SEPARATORS)))


@dataclass(frozen=True)
class LineRule:
    """A named (predicate, field-assignment) pair."""

    name: str
    matches: Callable[[str, Mapping[str, str]], bool]
    assign: Callable[[str], dict[str, str]]


def _split_venue(line: str) -> dict[str, str]:
    venue, *rest = VENUE_SEPARATOR_RE.split(line)
    updates = {"venue": venue.strip()}
    address_parts = [part.strip() for part in rest if part.strip()]
    if address_parts:
        updates["address"] = ", ".join(address_parts)
    return updates


RULES: tuple[LineRule, ...] = (
    LineRule(
        name="url",
        matches=lambda line, _fields: bool(URL_RE.match(line)),
        assign=lambda line: {"url": line},
    ),
    LineRule(
        name="organizer",
        matches=lambda line, _fields: bool(HOSTED_BY_RE.match(line)),
        assign=lambda line: {"organizer": HOSTED_BY_RE.sub(r"\1", line, count=1)},
    ),
    LineRule(
        name="venue_separator",
        matches=lambda line, _fields: any(sep in line for sep in VENUE_SEPARATORS),
        assign=_split_venue,
    ),
    LineRule(
        name="street_address",
        matches=lambda line, _fields: bool(STREET_ADDRESS_RE.match(line)),
        assign=lambda line: {"address": line},
    ),
    LineRule(
        name="cost",
        matches=lambda line, _fields: bool(COST_RE.match(line)),
        assign=lambda line: {"cost": line},
    ),
    LineRule(
        name="fallback_venue",
        matches=lambda line, fields: not fields.get("venue") and not NOT_A_VENUE_RE.match(line),
        assign=lambda line: {"venue": line},
    ),
)


def match_rule(line: str, fields: Mapping[str, str]) -> LineRule | None:
    """Return the first rule that matches the line, or None."""
    for rule in RULES:
        if rule.matches(line, fields):
            return rule
    return None


def classify_line(line: str, fields: Mapping[str, str]) -> dict[str, str]:
    """Classify one trimmed line given the fields assigned so far.

    Args:
        line: A trimmed, non-empty line from an event chunk.
        fields: The record fields populated by earlier lines.

    Returns:
        Field name to value updates, empty if the line matched no rule.
    """
    rule = match_rule(line, fields)
    if rule is None:
        return {}
    return rule.assign(line)
