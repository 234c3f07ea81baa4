"""
Course data models.

Contains the Course dataclass together with the Weekday enum and the
MeetingBlock that describe when a course section meets.
"""

from dataclasses import dataclass, field
from enum import IntEnum

from ..config import TBA


class Weekday(IntEnum):
    """
    Days a course can meet on, encoded the way the catalog encodes them.

    The catalog's structured meeting times use 0-4 for Monday-Friday; the
    human descriptor uses the day tokens returned by ``token``.
    """
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4

    @property
    def token(self) -> str:
        return _DAY_TOKENS[self]

    @classmethod
    def from_token(cls, token: str) -> "Weekday":
        for day, day_token in _DAY_TOKENS.items():
            if day_token == token:
                return day
        raise ValueError(f"Unknown day token: {token!r}")


_DAY_TOKENS = {
    Weekday.MONDAY: "M",
    Weekday.TUESDAY: "T",
    Weekday.WEDNESDAY: "W",
    Weekday.THURSDAY: "Th",
    Weekday.FRIDAY: "F",
}


@dataclass(frozen=True)
class MeetingBlock:
    """
    One weekly meeting occurrence: a day plus a half-open minute range.

    Minutes are counted from midnight, so 10:00-10:50 is (600, 650).
    A block ending at 650 and one starting at 650 do NOT overlap.
    """
    day: Weekday
    start_minute: int
    end_minute: int

    def overlaps(self, other: "MeetingBlock") -> bool:
        if self.day != other.day:
            return False
        return not (self.end_minute <= other.start_minute or self.start_minute >= other.end_minute)


@dataclass(frozen=True)
class Course:
    """
    Represents a single course section from the term catalog.

    Courses are read-only once the catalog is loaded; engines never modify
    them, so the same instance can be shared across concurrent searches.

    Attributes:
        code: Department plus number (e.g., "CSCI 0320"), unique per term
        title: Human-readable course title
        meets: Human meeting descriptor (e.g., "MWF 10-10:50a" or "TBA")
        meeting_times: Structured MeetingBlocks parsed from the catalog
        is_writ: True if the course satisfies the writing requirement
        prereq_groups: Tuple of OR-sets; every set needs one taken course
        term: Catalog term code (e.g., "202420")
    """
    code: str
    title: str
    meets: str
    meeting_times: tuple = field(default_factory=tuple)
    is_writ: bool = False
    prereq_groups: tuple = field(default_factory=tuple)
    term: str = ""

    @property
    def department(self) -> str:
        """Department prefix of the code ("CSCI 0320" -> "CSCI")."""
        return self.code.split(" ")[0]

    @property
    def meeting_days(self) -> set:
        """Day tokens parsed from the descriptor ("TTh 1-2:20p" -> {"T", "Th"})."""
        from ..engines.time_model import parse_meeting_days
        return parse_meeting_days(self.meets)

    @property
    def time_block(self) -> str:
        """Descriptor text after the day token, "TBA" when there is none."""
        from ..engines.time_model import split_meets
        return split_meets(self.meets)[1]

    @property
    def has_meeting_time(self) -> bool:
        """False when the descriptor is missing, blank or TBA."""
        return bool(self.meets and self.meets.strip() and self.meets.strip().upper() != TBA)
