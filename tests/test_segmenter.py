"""Tests for splitting announcement text into events."""

from eventmail.parsing import segment
from eventmail.parsing.segmenter import normalize_text, split_chunks
from tests.conftest import NEWBORN_PLAYGROUP, SCIENCE_FUN


class TestSegment:
    def test_single_event(self):
        events = segment(SCIENCE_FUN)
        assert len(events) == 1
        event = events[0]
        assert event.title == "Science Fun"
        assert event.date == "2026-01-11"
        assert event.start_time == "10:00"
        assert event.end_time == ""
        assert event.address == "800 Foster City Blvd, Foster City"
        assert event.organizer == "JBN and Wornick Jewish Day School"
        assert event.url == "https://www.wornickjds.org/forms-and-registrations/science-fun"
        assert event.venue == ""

    def test_two_events_in_input_order(self):
        events = segment(SCIENCE_FUN + "\n\n" + NEWBORN_PLAYGROUP)
        assert [e.title for e in events] == [
            "Science Fun",
            "Peninsula Newborn Playgroup for Babies 0 - 9 Months",
        ]
        assert events[1].date == "2026-01-25"
        assert events[1].start_time == "10:30"
        assert events[1].venue == "Jewish Family & Children's Services"
        assert events[1].address == "Palo Alto"
        assert events[1].organizer == "JBN"

    def test_events_without_blank_line_between(self):
        events = segment(SCIENCE_FUN + "\n" + NEWBORN_PLAYGROUP)
        assert len(events) == 2

    def test_windows_line_endings(self):
        events = segment(SCIENCE_FUN.replace("\n", "\r\n"))
        assert len(events) == 1
        assert events[0].url.endswith("science-fun")

    def test_mac_roman_mojibake_separator(self):
        text = "Sun, Jan 25, 2026\nPlaygroup\nJewish Family & Children's Services  ¬∑ Palo Alto"
        events = segment(text)
        assert events[0].venue == "Jewish Family & Children's Services"
        assert events[0].address == "Palo Alto"

    def test_empty_input(self):
        assert segment("") == []

    def test_none_input(self):
        assert segment(None) == []

    def test_unstructured_text(self):
        assert segment("hello") == []

    def test_whitespace_only(self):
        assert segment("\n\n   \n") == []

    def test_untitled_events_are_dropped(self):
        text = "Sun, Jan 11, 2026\nhttps://example.com\n\n" + NEWBORN_PLAYGROUP
        events = segment(text)
        assert len(events) == 1
        assert events[0].organizer == "JBN"

    def test_trailing_signature_joins_last_chunk(self):
        events = segment(SCIENCE_FUN + "\n\nThanks!")
        # No boundary before "Thanks!", so it joins the chunk as an unmatched line
        assert len(events) == 1
        assert events[0].venue == "Thanks!"

    def test_numeric_date_starts_new_chunk(self):
        text = "1/11 Science Fun\nMain Library\n2/14 Valentine Craft\nCommunity Center"
        events = segment(text)
        assert [e.title for e in events] == ["Main Library", "Community Center"]

    def test_reference_year(self):
        events = segment("Sun, Jan 11 at 10 AM\nScience Fun", reference_year=2031)
        assert events[0].date == "2031-01-11"

    def test_ordinal_date_line(self):
        events = segment("Sat, March 7th at 2 PM\nSpring Fair\nRinconada Park", reference_year=2026)
        assert events[0].date == "2026-03-07"
        assert events[0].start_time == "14:00"
        assert events[0].venue == "Rinconada Park"

    def test_venue_starting_with_free_is_not_a_cost(self):
        events = segment("Sat, Mar 7, 2026 at 2 PM\nSpring Fair\nFreedom Park")
        assert events[0].title == "Spring Fair"
        assert events[0].cost == ""

    def test_deterministic(self):
        text = SCIENCE_FUN + "\n\n" + NEWBORN_PLAYGROUP
        assert segment(text) == segment(text)

    def test_all_records_have_titles(self):
        text = "Mon\nhttps://a.example\n\nTue, Feb 3\nHosted by X\n\nWed, Feb 4\nBaby Signing\n\nfoo"
        events = segment(text)
        assert events
        assert all(e.title for e in events)


class TestSplitChunks:
    def test_no_boundary_is_one_chunk(self):
        assert split_chunks("Science Fun\nMain Library") == ["Science Fun\nMain Library"]

    def test_splits_before_weekday(self):
        assert split_chunks("a\nSun, Jan 11\nb") == ["a", "Sun, Jan 11\nb"]

    def test_splits_before_month(self):
        assert split_chunks("a\nFebruary 3\nb\nmar 4") == ["a", "February 3\nb", "mar 4"]

    def test_weekday_must_be_whole_word(self):
        assert split_chunks("a\nSunset Yoga\nMayfield Park") == ["a\nSunset Yoga\nMayfield Park"]

    def test_case_insensitive(self):
        assert split_chunks("a\nSATURDAY\nb") == ["a", "SATURDAY\nb"]

    def test_blank_chunks_are_dropped(self):
        assert split_chunks("\nSun\n\nMon") == ["Sun", "Mon"]


class TestNormalizeText:
    def test_line_endings(self):
        assert normalize_text("a\r\nb\rc") == "a\nb\nc"

    def test_repairs_separators(self):
        assert normalize_text("A ¬∑ B ‚Ä¢ C Â· D â€¢ E") == "A · B • C · D • E"
