"""
Schedule Planner - Main Orchestrator.

This module contains the SchedulePlanner class that wires the catalog
loader, the filter and the search engine into one pipeline.

NOTE: Don't run this file directly. Run from the project root:
    python3 -m scheduling --term 202420 --profile data/example_profile.json
"""

from typing import Optional

from .config import MAX_SCHEDULES, MAX_SEARCH_NODES
from .data import CatalogLoader
from .engines import (
    CourseFilterEngine,
    ScheduleBuilderEngine,
    validate_course_existence,
    validate_filtered,
    validate_profile,
)
from .logger import get_logger
from .models import ScheduleResult

log = get_logger("planner")


class SchedulePlanner:
    """
    Main interface for the scheduling system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    The three entry points a host service calls are exposed one by one:

        load_catalog(term)                    -> Catalog
        filter_courses(catalog, profile)      -> (filtered, errors)
        generate_schedules(filtered, profile) -> ScheduleResult

    plan() runs the whole pipeline with the validation steps in between.

    ERROR POLICY:
    -------------
    - Catalog load problems raise (CatalogLoadError). Nothing runs on a
      partially loaded catalog.
    - Inconsistent requests and unknown necessary courses stop the pipeline
      and come back as a ScheduleResult with errors and no schedules.
    - Filtering problems (a necessary course at a bad time, no WRIT option,
      too few required courses left) are collected and returned next to
      whatever schedules could still be built.

    The catalog is shared and read-only; everything else (filtered pool,
    search state) is created per call, so one planner can serve concurrent
    requests.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        planner = SchedulePlanner()
        profile = PreferenceProfile.from_dict(request_json)
        result = planner.plan("202420", profile, top_k=10)
        if result.ok:
            for schedule in result.schedules: ...
    """

    def __init__(self, catalog_path=None, ordering=None, max_schedules: int = MAX_SCHEDULES,
                 max_nodes: int = MAX_SEARCH_NODES):
        self.loader = CatalogLoader(catalog_path)
        self.filter_engine = CourseFilterEngine()
        self.builder = ScheduleBuilderEngine(ordering=ordering, max_schedules=max_schedules, max_nodes=max_nodes)

    def load_catalog(self, term: str):
        """Load the immutable Catalog for ``term`` (cached per term)."""
        return self.loader.load_catalog(term)

    def filter_courses(self, catalog, profile) -> tuple:
        """Reduce a catalog to the courses that fit the profile's hard constraints."""
        return self.filter_engine.filter(catalog, profile)

    def generate_schedules(self, filtered_courses, profile, catalog=None,
                           top_k: Optional[int] = None) -> ScheduleResult:
        """Search and rank schedules from an already filtered course pool."""
        return self.builder.build(filtered_courses, profile, catalog=catalog, top_k=top_k)

    def plan(self, term: str, profile, top_k: Optional[int] = None) -> ScheduleResult:
        """
        Run the full pipeline for one request.

        STEPS:
        1. Validate the profile on its own (abort on errors)
        2. Load the term catalog and check necessary courses exist (abort)
        3. Filter the catalog (errors collected)
        4. Validate what survived filtering (errors collected)
        5. Search and score schedules

        Args:
            term: Catalog term code (e.g., "202420")
            profile: PreferenceProfile for the request
            top_k: Return only the best ``top_k`` schedules

        Returns:
            ScheduleResult with errors ordered by the step that found them
        """
        errors = validate_profile(profile)
        if errors:
            log.info("Request rejected: %d validation errors", len(errors))
            return ScheduleResult((), tuple(errors))

        catalog = self.load_catalog(term)

        errors = validate_course_existence(profile, catalog)
        if errors:
            return ScheduleResult((), tuple(errors))

        filtered, filter_errors = self.filter_courses(catalog, profile)
        post_errors = validate_filtered(filtered, profile, catalog)

        result = self.generate_schedules(filtered, profile, catalog=catalog, top_k=top_k)

        merged = []
        for message in filter_errors + post_errors + list(result.errors):
            if message not in merged:
                merged.append(message)

        log.info("Planned %d schedules for term %s (%d errors)", len(result.schedules), term, len(merged))
        return ScheduleResult(result.schedules, tuple(merged))
