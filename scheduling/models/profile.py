"""
Preference profile data models.

The PreferenceProfile is the single input aggregate for a planning request:
what the student has taken, what they still need, and how they want their
week to look.
"""

from dataclasses import dataclass, field

from ..config import DAY_TOKENS


@dataclass(frozen=True)
class DayBalance:
    """
    Desired (or actual) number of MWF-pattern and TTh-pattern courses.
    """
    mwf_count: int = 0
    tth_count: int = 0

    def to_dict(self) -> dict:
        return {"mwfCount": self.mwf_count, "tthCount": self.tth_count}


@dataclass
class PreferenceProfile:
    """
    Everything the planner needs to know about one student's request.

    Constructed once per request and never modified by the engines.

    Attributes:
        classes_per_semester: Number of courses in every complete schedule
        courses_taken: Codes the student has already completed
        remaining_required: Codes still needed for the degree
        necessary_courses: Codes that must appear in every schedule (ordered)
        available_times: Allowed time blocks (e.g., "10-10:50a"); empty = any
        day_availability: Day token -> allowed; days not listed are allowed
        day_balance: Target MWF / TTh course counts
        required_courses_this_semester: Target number of required courses
        preferred_departments: Departments preferred for electives; empty = any
        needs_writ: True if a WRIT course must be taken this semester
    """
    classes_per_semester: int
    courses_taken: set = field(default_factory=set)
    remaining_required: set = field(default_factory=set)
    necessary_courses: list = field(default_factory=list)
    available_times: set = field(default_factory=set)
    day_availability: dict = field(default_factory=lambda: {d: True for d in DAY_TOKENS})
    day_balance: DayBalance = field(default_factory=DayBalance)
    required_courses_this_semester: int = 0
    preferred_departments: set = field(default_factory=set)
    needs_writ: bool = False

    def is_day_available(self, token: str) -> bool:
        return bool(self.day_availability.get(token, True))

    @classmethod
    def from_dict(cls, data: dict) -> "PreferenceProfile":
        """
        Build a profile from the JSON request shape.

        Expected keys mirror the web client's request body:
            classesPerSemester, coursesTaken, remainingRequired,
            necessaryCourses, availableTimes, dayAvailability,
            dayBalance {mwfCount, tthCount}, requiredCoursesThisSemester,
            preferredDepts, needWRIT

        Day availability may be given either as a map of token -> bool or as
        a list of available tokens (every unlisted day is then unavailable).
        """
        days = data.get("dayAvailability")
        if days is None:
            day_availability = {d: True for d in DAY_TOKENS}
        elif isinstance(days, dict):
            day_availability = {d: bool(v) for d, v in days.items()}
        else:
            available = set(days)
            day_availability = {d: d in available for d in DAY_TOKENS}

        balance = data.get("dayBalance") or {}

        return cls(
            classes_per_semester=int(data["classesPerSemester"]),
            courses_taken=set(data.get("coursesTaken", [])),
            remaining_required=set(data.get("remainingRequired", [])),
            necessary_courses=list(data.get("necessaryCourses", [])),
            available_times={t.strip() for t in data.get("availableTimes", []) if t and t.strip()},
            day_availability=day_availability,
            day_balance=DayBalance(
                mwf_count=int(balance.get("mwfCount", 0)),
                tth_count=int(balance.get("tthCount", 0)),
            ),
            required_courses_this_semester=int(data.get("requiredCoursesThisSemester", 0)),
            preferred_departments=set(data.get("preferredDepts", [])),
            needs_writ=bool(data.get("needWRIT", False)),
        )
