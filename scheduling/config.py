"""
Configuration constants for the scheduling system.

This module contains all configuration values and constants used throughout
the schedule planner. Centralizing these makes it easy to adjust scoring
and search behavior without touching the engines.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"

# Pre-ingested catalog produced by the external scraping pipeline.
# Override with SCHEDULING_CATALOG to point at another export.
CATALOG_FILE = Path(os.environ.get("SCHEDULING_CATALOG", DATA_DIR / "courses_formatted.json"))

# Log file is opt-in: console logging only unless a path is configured
LOG_PATH = os.environ.get("SCHEDULING_LOG_PATH")
LOG_LEVEL = os.environ.get("SCHEDULING_LOG_LEVEL", "INFO").upper()


# =============================================================================
# CATALOG FORMAT
# =============================================================================

# Every catalog record must carry these keys. Records missing any of them
# are skipped at load time; asking for one by code raises CatalogError.
CATALOG_REQUIRED_FIELDS = (
    "code",
    "title",
    "meets",
    "meetingTimes",
    "writ",
    "prereqGroups",
    "srcdb",
)

# Meeting descriptor used when a course has no scheduled time
TBA = "TBA"


# =============================================================================
# CALENDAR
# =============================================================================

# Day tokens as they appear in meeting descriptors ("MWF 10-10:50a").
# "Th" is the only two-letter token; it must be matched before "T".
DAY_TOKENS = ("M", "T", "W", "Th", "F")
THURSDAY_TOKEN = "Th"

# Letters that put a course in each day-balance bucket. Matching is a plain
# substring test on the whole descriptor, so "TTh" and "TF" both count as
# TTh, and "TF" also counts as MWF.
MWF_LETTERS = ("M", "W", "F")
TTH_LETTER = "T"


# =============================================================================
# SEARCH LIMITS
# =============================================================================

# Hard ceiling on accepted schedules per search
MAX_SCHEDULES = 9999

# Hard ceiling on search steps per request. Bounds the search even when no
# complete schedule exists and nothing is ever accepted.
MAX_SEARCH_NODES = 200_000

# Smallest course load the planner will build for
MIN_CLASSES_PER_SEMESTER = 3


# =============================================================================
# SCORING WEIGHTS
# =============================================================================

# Every schedule starts at MAX_SCORE and loses points for each preference
# it misses. Final scores are clamped to [0, MAX_SCORE].
MAX_SCORE = 100.0
DAY_BALANCE_PENALTY = 10        # per course off the MWF / TTh targets
REQUIRED_COUNT_PENALTY = 15     # per course off the required-course target
NON_PREFERRED_DEPT_PENALTY = 5  # per elective outside preferred departments
MISSING_WRIT_PENALTY = 10       # flat, when WRIT is needed but absent
