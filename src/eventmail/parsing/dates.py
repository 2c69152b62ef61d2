"""Date normalizer: turns "Jan 11, 2026" or "January 11" into ISO YYYY-MM-DD."""

import re
from datetime import date

MONTHS: dict[str, str] = {
    "jan": "01",
    "january": "01",
    "feb": "02",
    "february": "02",
    "mar": "03",
    "march": "03",
    "apr": "04",
    "april": "04",
    "may": "05",
    "jun": "06",
    "june": "06",
    "jul": "07",
    "july": "07",
    "aug": "08",
    "august": "08",
    "sep": "09",
    "sept": "09",
    "september": "09",
    "oct": "10",
    "october": "10",
    "nov": "11",
    "november": "11",
    "dec": "12",
    "december": "12",
}

# Longest names first so "September" is not cut short at "Sep"
_MONTH_ALTERNATION = "|".join(sorted(MONTHS, key=len, reverse=True))

# "Jan 11, 2026", "January 11 2026", "jan 11", "March 7th"
DATE_RE = re.compile(
    rf"\b({_MONTH_ALTERNATION})\.?\s+(\d{{1,2}})(?:st|nd|rd|th)?\b,?\s*(\d{{4}}\b)?",
    re.IGNORECASE,
)


def parse_date(fragment: str, reference_year: int | None = None) -> str:
    """Extract the first month-name date from a text fragment as YYYY-MM-DD.

    Args:
        fragment: Free text such as "Jan 11, 2026 at 10 AM".
        reference_year: Year to use when the text has none. Defaults to the
            current calendar year.

    Returns:
        The ISO date string, or "" if no month name followed by a day is found.
    """
    match = DATE_RE.search(fragment or "")
    if not match:
        return ""

    month = MONTHS[match.group(1).lower()]
    day = match.group(2).zfill(2)
    year = match.group(3) or str(reference_year if reference_year is not None else date.today().year)
    return f"{year}-{month}-{day}"
