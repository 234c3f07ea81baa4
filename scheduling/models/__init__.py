"""
Data models for the scheduling system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .course import Course, MeetingBlock, Weekday
from .profile import DayBalance, PreferenceProfile
from .schedule import Schedule, ScheduleResult

__all__ = [
    # Course models
    "Course",
    "MeetingBlock",
    "Weekday",
    # Request models
    "DayBalance",
    "PreferenceProfile",
    # Results
    "Schedule",
    "ScheduleResult",
]
