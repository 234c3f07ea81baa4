"""
Schedule Scoring Engine.

Ranks complete schedules by how well they match the student's soft
preferences.
"""

from ..config import (
    DAY_BALANCE_PENALTY,
    MAX_SCORE,
    MISSING_WRIT_PENALTY,
    NON_PREFERRED_DEPT_PENALTY,
    REQUIRED_COUNT_PENALTY,
)


class ScheduleScorer:
    """
    Scores a schedule on a 0-100 scale.

    SCORING RULES:
    --------------
    Start at 100 and subtract:

      DAY BALANCE     10 per course away from the MWF target, plus 10 per
                      course away from the TTh target
      REQUIRED COUNT  15 per course away from the required-course target
      DEPARTMENTS     5 per elective outside the preferred departments
                      (only when the student listed any)
      WRIT            10 if a WRIT course was needed and is missing

    The result is clamped at 0; a schedule can never score negative.
    Necessary and required courses are not electives and never take the
    department penalty.
    """

    def __init__(self, profile):
        self.profile = profile

    def breakdown(self, schedule) -> dict:
        """
        Compute each penalty separately.

        Returns:
            {"day_balance": float, "required_count": float,
             "departments": float, "writ": float}
        """
        profile = self.profile

        actual = schedule.day_balance()
        target = profile.day_balance
        balance_diff = abs(actual.mwf_count - target.mwf_count) + abs(actual.tth_count - target.tth_count)

        required_count = schedule.count_required(profile.remaining_required)
        required_diff = abs(required_count - profile.required_courses_this_semester)

        dept_misses = 0
        if profile.preferred_departments:
            for course in schedule.courses:
                if course.code in profile.remaining_required or course.code in profile.necessary_courses:
                    continue
                if course.department not in profile.preferred_departments:
                    dept_misses += 1

        missing_writ = profile.needs_writ and not schedule.has_writ()

        return {
            "day_balance": float(balance_diff * DAY_BALANCE_PENALTY),
            "required_count": float(required_diff * REQUIRED_COUNT_PENALTY),
            "departments": float(dept_misses * NON_PREFERRED_DEPT_PENALTY),
            "writ": float(MISSING_WRIT_PENALTY if missing_writ else 0),
        }

    def score(self, schedule) -> float:
        penalties = self.breakdown(schedule)
        return max(0.0, MAX_SCORE - sum(penalties.values()))
