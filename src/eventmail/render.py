"""HTML rendering of reply emails and the parser demo page."""

import json
from collections.abc import Sequence
from datetime import date, datetime

from jinja2 import Environment, PackageLoader, select_autoescape

from eventmail.parsing import EventRecord

URL_DISPLAY_LENGTH = 50

EXPECTED_FORMAT = """\
Sun, Jan 11, 2026 at 10 AM
Event Title Here
Venue Name or Address
Hosted by Organizer Name
https://event-url.com"""

# Form field selectors on the event submission page, keyed by EventRecord wire name
FORM_FIELDS = (
    ('input[name="EventTitle"]', "title"),
    ('input[name="EventStartDate"]', "date"),
    ('input[name="EventEndDate"]', "date"),
    ('input[name="EventStartTime"]', "startTime"),
    ('input[name="EventEndTime"]', "endTime"),
    ('input[name="EventURL"]', "url"),
)


def format_date_for_display(date_str: str) -> str:
    """Format "2026-01-11" as "Sun, Jan 11, 2026"."""
    if not date_str:
        return "No date"
    try:
        d = date.fromisoformat(date_str)
    except ValueError:
        return date_str
    return f"{d:%a, %b} {d.day}, {d.year}"


def format_time_for_display(time_str: str) -> str:
    """Format "13:05" as "1:05 PM"."""
    if not time_str:
        return ""
    hours_str, _, minutes = time_str.partition(":")
    hours = int(hours_str)
    meridiem = "PM" if hours >= 12 else "AM"
    display_hour = hours - 12 if hours > 12 else (12 if hours == 0 else hours)
    return f"{display_hour}:{minutes} {meridiem}"


def format_timestamp(dt: datetime) -> str:
    """Format a datetime as "1/11/2026, 9:05:00 AM"."""
    return f"{dt.month}/{dt.day}/{dt.year}, {dt.hour % 12 or 12}:{dt:%M:%S} {'PM' if dt.hour >= 12 else 'AM'}"


def truncate_url(url: str, length: int = URL_DISPLAY_LENGTH) -> str:
    return url if len(url) <= length else url[:length] + "..."


def reply_subject(event_count: int, subject: str | None) -> str:
    """Subject line for the reply to an inbound email."""
    about = subject or "your email"
    if event_count > 0:
        return f"✅ Parsed {event_count} event(s) from: {about}"
    return f"⚠️ No events found in: {about}"


def autofill_script(event: EventRecord) -> str:
    """One-line JavaScript that fills the submission form from a browser console."""
    data = json.dumps(event.to_dict(), ensure_ascii=False)
    setters = "".join(f"s({json.dumps(selector)},e.{key});" for selector, key in FORM_FIELDS)
    return (
        f"(function(){{var e={data};"
        "var s=(n,v)=>{var el=document.querySelector(n);if(el&&v){el.value=v;"
        "el.dispatchEvent(new Event('input',{bubbles:true}));"
        "el.dispatchEvent(new Event('change',{bubbles:true}))}};"
        f"{setters}"
        "var d=document.querySelector('textarea[name=\"EventDescription\"]');"
        "if(d){d.value='Hosted by '+e.organizer+'\\n\\nMore info: '+e.url;"
        "d.dispatchEvent(new Event('input',{bubbles:true}))}"
        "alert('Form filled! Select venue/organizer from dropdowns, add image, check terms & submit.')"
        "})();"
    )


def _build_environment() -> Environment:
    env = Environment(
        loader=PackageLoader("eventmail", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["display_date"] = format_date_for_display
    env.filters["display_time"] = format_time_for_display
    env.filters["truncate_url"] = truncate_url
    env.filters["autofill_script"] = autofill_script
    return env


_env = _build_environment()


def render_reply(
    events: Sequence[EventRecord],
    errors: Sequence[str],
    *,
    processed_at: datetime,
    form_url: str,
) -> str:
    """Render the HTML reply summarizing a parse.

    Args:
        events: Parsed events, one card each.
        errors: Problems to show in an error banner.
        processed_at: Time shown in the header.
        form_url: Link target for the "Add to SF Moms" button.

    Returns:
        A complete HTML document.
    """
    template = _env.get_template("reply.html")
    return template.render(
        events=events,
        errors=errors,
        timestamp=format_timestamp(processed_at),
        form_url=form_url,
        expected_format=EXPECTED_FORMAT,
    )


def render_parser_demo(text: str, events: Sequence[EventRecord], reply_html: str) -> str:
    """Render the /test page showing sample input, parsed JSON and the reply."""
    template = _env.get_template("parser_test.html")
    return template.render(
        text=text,
        events_json=json.dumps([e.to_dict() for e in events], indent=2, ensure_ascii=False),
        event_count=len(events),
        reply_html=reply_html,
    )
