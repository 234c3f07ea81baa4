"""
Course Filter Engine.

This module reduces a term catalog to the courses that fit a student's hard
constraints before any schedule is searched.
"""

from ..config import DAY_TOKENS
from ..logger import get_logger
from .prerequisites import missing_prerequisite_groups, prerequisites_satisfied
from .time_model import is_allowed_time

log = get_logger("filter")


class CourseFilterEngine:
    """
    Drops every course that can never appear in a schedule for this student.

    TWO KINDS OF COURSES:
    --------------------
    NECESSARY courses (the student insists on them) are always evaluated.
    If one fails a check, it is dropped AND an error names the course and
    the reason. All necessary-course problems are collected, so the student
    sees every issue at once instead of fixing them one by one.

    ALL OTHER courses are dropped silently when they:
      - have no meeting time (blank or TBA descriptor)
      - were already taken
      - meet on a day the student marked unavailable
      - meet in a time block outside the allowed set
      - have unmet prerequisites

    WRIT POST-PASS:
    ---------------
    If the student needs a WRIT course and none survived, one error is
    added. If they do NOT need one, every WRIT course is removed from the
    pool; it cannot satisfy a requirement that does not exist. A necessary
    course removed this way gets its own error.
    """

    WRIT_MISSING_ERROR = "No WRIT course fits the current day/time constraints"

    def filter(self, catalog, profile) -> tuple:
        """
        Filter a catalog against a preference profile.

        Args:
            catalog: Catalog (or any iterable of Course) for the term
            profile: PreferenceProfile for the request

        Returns:
            (filtered_courses, errors) - courses in catalog order, plus a
            list of human-readable error messages
        """
        necessary = set(profile.necessary_courses)
        filtered = []
        errors = []
        total = 0

        for course in catalog:
            total += 1
            if course.code in necessary:
                problems = self._check_necessary(course, profile)
                if problems:
                    errors.extend(problems)
                else:
                    filtered.append(course)
                continue

            if self._is_eligible(course, profile):
                filtered.append(course)

        if profile.needs_writ:
            if not any(c.is_writ for c in filtered):
                errors.append(self.WRIT_MISSING_ERROR)
        else:
            for course in filtered:
                if course.is_writ and course.code in necessary:
                    errors.append(f"Needed course {course.code} is a WRIT course, but no WRIT course was requested")
            filtered = [c for c in filtered if not c.is_writ]

        log.info("Filtered %d of %d courses (%d errors)", len(filtered), total, len(errors))
        return filtered, errors

    def _check_necessary(self, course, profile) -> list:
        """
        Return the reasons a necessary course cannot be scheduled.

        Checks run in order and stop at the first failing kind: every
        unavailable day is reported, then the time block, then prerequisites.
        """
        code = course.code
        errors = []

        for day in sorted(course.meeting_days, key=DAY_TOKENS.index):
            if not profile.is_day_available(day):
                errors.append(f"Needed course {code} meets on an unavailable day: {day}")
        if errors:
            return errors

        if not is_allowed_time(course.time_block, profile.available_times):
            return [f"Needed course {code} meets at an unavailable time: {course.meets}"]

        missing = missing_prerequisite_groups(course, profile.courses_taken)
        if missing:
            wanted = "; ".join(" or ".join(sorted(group)) for group in missing)
            return [f"Needed course {code} missing prerequisites: {wanted}"]

        return []

    def _is_eligible(self, course, profile) -> bool:
        if not course.has_meeting_time:
            return False
        if course.code in profile.courses_taken:
            return False
        if any(not profile.is_day_available(d) for d in course.meeting_days):
            return False
        if not is_allowed_time(course.time_block, profile.available_times):
            return False
        return prerequisites_satisfied(course, profile.courses_taken)

