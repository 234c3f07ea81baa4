"""
Class Schedule Planner Package
==============================

Builds ranked, conflict-free candidate class schedules for a student from a
term course catalog and a set of preferences.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌───────────────┐  ┌────────────────────┐  ┌────────────────────────┐  │
│  │ CatalogLoader │  │ CourseFilterEngine │  │ ScheduleBuilderEngine  │  │
│  │  (I/O)        │  │ (hard constraints) │  │ (depth-first search)   │  │
│  └───────────────┘  └────────────────────┘  └────────────────────────┘  │
│                                                                         │
│  ┌───────────────┐  ┌────────────────────┐  ┌────────────────────────┐  │
│  │  time_model   │  │   prerequisites    │  │    ScheduleScorer      │  │
│  │ (conflicts)   │  │   (AND-of-OR)      │  │ (soft preferences)     │  │
│  └───────────────┘  └────────────────────┘  └────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns ScheduleResult
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│  TerminalDisplay (console) or ScheduleResult.to_dict() (JSON/API)       │
└─────────────────────────────────────────────────────────────────────────┘

DATA FLOW
---------

    catalog + profile → CourseFilterEngine → filtered pool
                      → ScheduleBuilderEngine (time_model, prerequisites)
                      → ScheduleScorer → ranked ScheduleResult

PACKAGE STRUCTURE
-----------------

scheduling/
├── __init__.py          # This file - main exports
├── config.py            # Paths, limits and scoring weights
├── exceptions.py        # Catalog error types
├── logger.py            # Package logger
├── planner.py           # SchedulePlanner orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # Course, MeetingBlock, Weekday
│   ├── profile.py       # PreferenceProfile, DayBalance
│   └── schedule.py      # Schedule, ScheduleResult
│
├── data/                # Catalog loading
│   ├── catalog.py       # Catalog (immutable, per term)
│   ├── loader.py        # CatalogLoader
│   └── parser.py        # CourseRecordParser
│
├── engines/             # Core logic
│   ├── time_model.py    # Meeting parsing and conflicts
│   ├── prerequisites.py # Prerequisite evaluation
│   ├── course_filter.py # CourseFilterEngine
│   ├── schedule_builder.py # ScheduleBuilderEngine
│   ├── scorer.py        # ScheduleScorer
│   └── validation.py    # Request consistency checks
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from scheduling import SchedulePlanner, PreferenceProfile

    planner = SchedulePlanner()
    profile = PreferenceProfile.from_dict({
        "classesPerSemester": 4,
        "coursesTaken": ["CSCI 0150", "CSCI 0160"],
        "remainingRequired": ["CSCI 0320", "CSCI 0330", "MATH 0520"],
        "necessaryCourses": ["CSCI 0320"],
        "availableTimes": [],
        "dayAvailability": {"M": True, "T": True, "W": True, "Th": True, "F": False},
        "dayBalance": {"mwfCount": 2, "tthCount": 2},
        "requiredCoursesThisSemester": 2,
        "preferredDepts": ["CSCI", "MATH"],
        "needWRIT": False,
    })
    result = planner.plan("202420", profile, top_k=10)

Running from command line:

    python -m scheduling --term 202420 --profile data/example_profile.json

"""

# Version
__version__ = "1.0.0"

# Main exports
from .planner import SchedulePlanner
from .cli import main

# Model exports (for programmatic use)
from .models import (
    Course,
    MeetingBlock,
    Weekday,
    DayBalance,
    PreferenceProfile,
    Schedule,
    ScheduleResult,
)

# Engine exports (for advanced use)
from .engines import (
    CourseFilterEngine,
    ScheduleBuilderEngine,
    ScheduleScorer,
    ShuffleOrdering,
    FixedOrdering,
)

# Data exports
from .data import Catalog, CatalogLoader

# UI exports
from .ui import TerminalDisplay

# Error exports
from .exceptions import SchedulingError, CatalogError, CatalogLoadError, CourseRecordError

# Configuration exports
from .config import (
    CATALOG_FILE,
    DATA_DIR,
    MAX_SCHEDULES,
    MIN_CLASSES_PER_SEMESTER,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "SchedulePlanner",
    "main",
    # Models
    "Course",
    "MeetingBlock",
    "Weekday",
    "DayBalance",
    "PreferenceProfile",
    "Schedule",
    "ScheduleResult",
    # Engines
    "CourseFilterEngine",
    "ScheduleBuilderEngine",
    "ScheduleScorer",
    "ShuffleOrdering",
    "FixedOrdering",
    # Data
    "Catalog",
    "CatalogLoader",
    # UI
    "TerminalDisplay",
    # Errors
    "SchedulingError",
    "CatalogError",
    "CatalogLoadError",
    "CourseRecordError",
    # Config
    "CATALOG_FILE",
    "DATA_DIR",
    "MAX_SCHEDULES",
    "MIN_CLASSES_PER_SEMESTER",
]
