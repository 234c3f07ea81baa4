import json

import pytest

from scheduling.config import DAY_TOKENS
from scheduling.engines import FixedOrdering, parse_meeting_days, parse_time_to_minutes
from scheduling.models import Course, DayBalance, MeetingBlock, PreferenceProfile, Weekday


@pytest.fixture
def make_course():
    """
    Factory for Course objects.

    Structured meeting blocks are derived from the descriptor's days plus the
    given 24-hour start/end strings, the same shape the catalog provides.
    """
    def _make(code, meets="MWF 10-10:50a", start="1000", end="1050", writ=False,
              prereqs=(), title=None, term="202420"):
        days = sorted(parse_meeting_days(meets), key=DAY_TOKENS.index)
        blocks = tuple(
            MeetingBlock(Weekday.from_token(d), parse_time_to_minutes(start), parse_time_to_minutes(end))
            for d in days
        )
        return Course(
            code=code,
            title=title or code,
            meets=meets,
            meeting_times=blocks,
            is_writ=writ,
            prereq_groups=tuple(frozenset(g) for g in prereqs),
            term=term,
        )
    return _make


@pytest.fixture
def make_profile():
    """Factory for PreferenceProfile with permissive defaults."""
    def _make(**overrides):
        values = dict(
            classes_per_semester=3,
            courses_taken=set(),
            remaining_required=set(),
            necessary_courses=[],
            available_times=set(),
            day_availability={d: True for d in DAY_TOKENS},
            day_balance=DayBalance(3, 0),
            required_courses_this_semester=0,
            preferred_departments=set(),
            needs_writ=False,
        )
        values.update(overrides)
        return PreferenceProfile(**values)
    return _make


@pytest.fixture
def fixed_ordering():
    return FixedOrdering()


def meeting_times_json(days, start, end) -> str:
    """Encode meetingTimes the way the ingestion pipeline does."""
    return json.dumps([
        {"meet_day": str(day), "start_time": start, "end_time": end} for day in days
    ])


@pytest.fixture
def make_record():
    """Factory for raw catalog records."""
    def _make(code, meets="MWF 10-10:50a", days=(0, 2, 4), start="1000", end="1050",
              writ=False, prereqs=None, term="202420", title=None):
        return {
            "code": code,
            "title": title or f"{code} title",
            "meets": meets,
            "meetingTimes": meeting_times_json(days, start, end),
            "writ": writ,
            "prereqGroups": prereqs if prereqs is not None else [],
            "srcdb": term,
        }
    return _make


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog document to a temp file and return its path."""
    def _write(records, name="courses.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"results": records}), encoding="utf-8")
        return path
    return _write
