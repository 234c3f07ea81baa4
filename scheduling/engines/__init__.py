"""
Filtering, search and scoring engines.

This package contains the engines that perform the core business logic of
the schedule planner.
"""

from .course_filter import CourseFilterEngine
from .prerequisites import missing_prerequisite_groups, prerequisites_satisfied
from .schedule_builder import FixedOrdering, ScheduleBuilderEngine, ShuffleOrdering
from .scorer import ScheduleScorer
from .time_model import (
    blocks_conflict,
    courses_conflict,
    is_allowed_time,
    parse_meeting_blocks,
    parse_meeting_days,
    parse_time_to_minutes,
    split_meets,
)
from .validation import validate_course_existence, validate_filtered, validate_profile

__all__ = [
    "CourseFilterEngine",
    "ScheduleBuilderEngine",
    "ScheduleScorer",
    "ShuffleOrdering",
    "FixedOrdering",
    "prerequisites_satisfied",
    "missing_prerequisite_groups",
    "blocks_conflict",
    "courses_conflict",
    "is_allowed_time",
    "parse_meeting_blocks",
    "parse_meeting_days",
    "parse_time_to_minutes",
    "split_meets",
    "validate_profile",
    "validate_course_existence",
    "validate_filtered",
]
