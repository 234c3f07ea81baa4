"""
Schedule data models.

Contains the Schedule produced by the search engine and the ScheduleResult
returned to callers.
"""

from dataclasses import dataclass, field

from ..config import MWF_LETTERS, TTH_LETTER
from .profile import DayBalance


@dataclass
class Schedule:
    """
    A candidate set of courses for one semester.

    The search engine only materializes a Schedule once a branch reaches
    full size, so instances are never shared between branches. ``score`` is
    0.0 until the scorer fills it in.
    """
    courses: list
    score: float = 0.0

    @property
    def codes(self) -> list:
        return [c.code for c in self.courses]

    def key(self) -> str:
        """
        Canonical identity of the course set, independent of build order.

        Two schedules with the same courses added in different orders share
        a key, which is how the search suppresses duplicates.
        """
        return "|".join(sorted(self.codes))

    def has_time_conflicts(self) -> bool:
        for i, first in enumerate(self.courses):
            for second in self.courses[i + 1:]:
                if any(a.overlaps(b) for a in first.meeting_times for b in second.meeting_times):
                    return True
        return False

    def day_balance(self) -> DayBalance:
        """
        Count MWF-pattern and TTh-pattern courses.

        NOTE: This is a literal substring test on the meeting descriptor, so
        a course can land in both buckets (e.g. "TF 1-2:20p"). Kept as-is for
        compatibility with existing score expectations.
        """
        mwf_count = 0
        tth_count = 0
        for course in self.courses:
            meets = course.meets or ""
            if any(letter in meets for letter in MWF_LETTERS):
                mwf_count += 1
            if TTH_LETTER in meets:
                tth_count += 1
        return DayBalance(mwf_count, tth_count)

    def count_required(self, required_codes) -> int:
        return sum(1 for c in self.courses if c.code in required_codes)

    def has_writ(self) -> bool:
        return any(c.is_writ for c in self.courses)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "courses": [
                {
                    "code": c.code,
                    "title": c.title,
                    "meets": c.meets,
                    "writ": c.is_writ,
                }
                for c in self.courses
            ],
            "dayBalance": self.day_balance().to_dict(),
        }


@dataclass(frozen=True)
class ScheduleResult:
    """
    Output of one planning run: ranked schedules plus diagnostics.

    Schedules are ordered by descending score. Callers should surface
    ``errors`` verbatim and not treat a result with errors as a clean answer,
    even if it still carries schedules.
    """
    schedules: tuple = field(default_factory=tuple)
    errors: tuple = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    def top(self, k: int) -> tuple:
        return self.schedules[:k]

    def with_errors(self, errors) -> "ScheduleResult":
        """Return a copy with ``errors`` placed ahead of the existing ones."""
        return ScheduleResult(self.schedules, tuple(errors) + self.errors)

    def to_dict(self) -> dict:
        return {
            "success": self.ok,
            "schedulesCount": len(self.schedules),
            "schedules": [s.to_dict() for s in self.schedules],
            "errors": list(self.errors),
        }
