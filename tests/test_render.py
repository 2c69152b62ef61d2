"""Tests for reply rendering and display formatting."""

import json
from datetime import datetime

from eventmail.parsing import EventRecord, segment
from eventmail.render import (
    autofill_script,
    format_date_for_display,
    format_time_for_display,
    format_timestamp,
    render_parser_demo,
    render_reply,
    reply_subject,
    truncate_url,
)
from tests.conftest import NEWBORN_PLAYGROUP, SCIENCE_FUN

FORM_URL = "https://sanfranciscomoms.com/addevent/"
PROCESSED_AT = datetime(2026, 1, 5, 14, 7, 9)


def _render(events, errors=()):
    return render_reply(events, list(errors), processed_at=PROCESSED_AT, form_url=FORM_URL)


class TestDisplayFormatting:
    def test_date(self):
        assert format_date_for_display("2026-01-11") == "Sun, Jan 11, 2026"

    def test_empty_date(self):
        assert format_date_for_display("") == "No date"

    def test_unparseable_date_returned_as_is(self):
        assert format_date_for_display("2026-13-45") == "2026-13-45"

    def test_afternoon_time(self):
        assert format_time_for_display("13:05") == "1:05 PM"

    def test_noon(self):
        assert format_time_for_display("12:00") == "12:00 PM"

    def test_midnight(self):
        assert format_time_for_display("00:30") == "12:30 AM"

    def test_morning(self):
        assert format_time_for_display("09:15") == "9:15 AM"

    def test_empty_time(self):
        assert format_time_for_display("") == ""

    def test_timestamp(self):
        assert format_timestamp(PROCESSED_AT) == "1/5/2026, 2:07:09 PM"

    def test_truncate_url(self):
        assert truncate_url("https://example.com") == "https://example.com"
        assert truncate_url("x" * 60) == "x" * 50 + "..."


class TestReplySubject:
    def test_with_events(self):
        assert reply_subject(2, "Weekend events") == "✅ Parsed 2 event(s) from: Weekend events"

    def test_without_events(self):
        assert reply_subject(0, "Weekend events") == "⚠️ No events found in: Weekend events"

    def test_missing_subject(self):
        assert reply_subject(1, None).endswith("from: your email")


class TestAutofillScript:
    def test_embeds_event_json(self):
        event = EventRecord(title="Science Fun", date="2026-01-11", start_time="10:00")
        script = autofill_script(event)
        assert script.startswith("(function(){var e=")
        assert json.dumps(event.to_dict(), ensure_ascii=False) in script
        assert 's("input[name=\\"EventTitle\\"]",e.title);' in script
        assert "e.startTime" in script
        assert script.endswith("})();")


class TestRenderReply:
    def test_event_cards(self):
        events = segment(SCIENCE_FUN + "\n\n" + NEWBORN_PLAYGROUP)
        html = _render(events)
        assert "Found and parsed 2 event(s)!" in html
        assert html.count('class="event-card"') == 2
        assert "Science Fun" in html
        assert "Sun, Jan 11, 2026 at 10:00 AM" in html
        assert "800 Foster City Blvd, Foster City" in html
        assert "JBN and Wornick Jewish Day School" in html
        assert f'href="{FORM_URL}"' in html
        assert "Processed at 1/5/2026, 2:07:09 PM" in html

    def test_venue_preferred_over_address(self):
        event = EventRecord(title="Fair", venue="Rinconada Park", address="Palo Alto")
        html = _render([event])
        assert "📍 Rinconada Park" in html

    def test_no_venue_placeholder(self):
        html = _render([EventRecord(title="Fair")])
        assert "No venue specified" in html

    def test_no_events_shows_expected_format(self):
        html = _render([])
        assert "No events found in your email." in html
        assert "Hosted by Organizer Name" in html
        assert "event-card" not in html.split("</style>")[1]

    def test_errors_banner(self):
        html = _render([], ["No email body content found", "Second problem"])
        assert 'class="status error"' in html
        assert "No email body content found<br>Second problem" in html

    def test_escapes_event_text(self):
        event = EventRecord(title="<script>alert(1)</script>", venue="Tom & Jerry's")
        html = _render([event])
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
        assert "Tom &amp; Jerry" in html

    def test_does_not_mutate_inputs(self):
        events = segment(SCIENCE_FUN)
        errors = ["oops"]
        before = (list(events), list(errors))
        _render(events, errors)
        assert (events, errors) == before


class TestRenderParserDemo:
    def test_contains_input_json_and_reply(self):
        events = segment(SCIENCE_FUN)
        page = render_parser_demo(SCIENCE_FUN, events, "<p>reply</p>")
        assert "Parsed Events (1):" in page
        assert "&#34;startTime&#34;: &#34;10:00&#34;" in page
        assert 'srcdoc="&lt;p&gt;reply&lt;/p&gt;"' in page
