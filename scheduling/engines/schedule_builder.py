"""
Schedule Builder Engine.

This module searches the filtered course pool for complete, conflict-free
schedules and ranks them with the ScheduleScorer.
"""

import random
from typing import Optional

from ..config import MAX_SCHEDULES, MAX_SEARCH_NODES
from ..logger import get_logger
from ..models import Schedule, ScheduleResult
from .prerequisites import prerequisites_satisfied
from .scorer import ScheduleScorer
from .time_model import courses_conflict

log = get_logger("builder")


class ShuffleOrdering:
    """
    Randomizes option order so repeated requests explore different corners
    of the search space. Pass a seed for a reproducible shuffle.
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def __call__(self, courses) -> list:
        items = list(courses)
        self._random.shuffle(items)
        return items


class FixedOrdering:
    """Keeps options in filter order. Used for deterministic output."""

    def __call__(self, courses) -> list:
        return list(courses)


class ScheduleBuilderEngine:
    """
    Depth-first search over course combinations.

    ═══════════════════════════════════════════════════════════════════════════
    HOW THE SEARCH WORKS
    ═══════════════════════════════════════════════════════════════════════════

    1. SEED: every schedule starts with the necessary courses, in the order
       the student listed them.

    2. POOLS: the rest of the filtered courses are split in two:
       - REQUIRED options: courses from the remaining-degree list, capped at
         (required this semester - seed size). Which ones make the cut is
         decided once, before shuffling.
       - ELECTIVE options: everything else.
       Both pools go through the ordering strategy (random by default).

    3. BRANCHING: at each step, try every unused required option while the
       required quota is unmet, then every unused elective. While a WRIT
       course is still needed, electives are narrowed to WRIT courses
       (falling back to all electives if none are left).

    4. PRUNING: an append that time-conflicts with anything already placed
       is dropped on the spot. An elective that happens to be a required
       course counts toward the quota and is dropped once the quota is met.
       A partial course set is expanded only once: reaching the same set
       again in another order cannot lead anywhere new.

    5. TERMINAL: when the schedule is full, its sorted course codes form a
       key. A key seen before is a duplicate built in another order and is
       ignored; otherwise the schedule is scored and kept.

    6. LIMITS: the search stops once ``max_schedules`` schedules are kept,
       or after ``max_nodes`` search steps, whichever comes first.

    The candidate lives in a fixed-size slot array with a cursor. Branches
    overwrite slots instead of copying lists; a Schedule object is only
    created for complete, accepted candidates.

    ═══════════════════════════════════════════════════════════════════════════

    Results are sorted by score, highest first. Python's sort is stable, so
    equal scores keep the order in which the search found them.
    """

    def __init__(self, ordering=None, max_schedules: int = MAX_SCHEDULES, max_nodes: int = MAX_SEARCH_NODES):
        self.ordering = ordering
        self.max_schedules = max_schedules
        self.max_nodes = max_nodes

    def build(self, filtered_courses, profile, catalog=None, top_k: Optional[int] = None) -> ScheduleResult:
        """
        Generate ranked schedules from a filtered course pool.

        Args:
            filtered_courses: Output of CourseFilterEngine.filter()
            profile: PreferenceProfile for the request
            catalog: Optional term Catalog, used to explain necessary
                courses that are known but were filtered out
            top_k: If given, return only the best ``top_k`` schedules

        Returns:
            ScheduleResult. If any precondition fails, it carries a single
            error and no schedules.
        """
        seed, error = self._resolve_seed(filtered_courses, profile, catalog)
        if error:
            log.info("Schedule search aborted: %s", error)
            return ScheduleResult((), (error,))

        in_seed = {c.code for c in seed}
        remaining = [c for c in filtered_courses if c.code not in in_seed]

        required_slots = max(0, profile.required_courses_this_semester - len(seed))
        required_options = [c for c in remaining if c.code in profile.remaining_required][:required_slots]
        chosen = in_seed | {c.code for c in required_options}
        elective_options = [c for c in remaining if c.code not in chosen]

        ordering = self.ordering if self.ordering is not None else ShuffleOrdering()
        search = _Search(
            profile=profile,
            seed=seed,
            required_options=ordering(required_options),
            elective_options=ordering(elective_options),
            scorer=ScheduleScorer(profile),
            max_schedules=self.max_schedules,
            max_nodes=self.max_nodes,
        )
        schedules = search.run()

        log.info(
            "Search explored %d nodes, kept %d schedules (%d required options, %d electives)",
            search.nodes, len(schedules), len(required_options), len(elective_options),
        )
        if search.cap_reached:
            log.warning("Schedule cap of %d reached; search stopped early", self.max_schedules)
        if search.budget_exhausted:
            log.warning("Search step limit of %d reached; search stopped early", self.max_nodes)

        if not schedules and search.budget_exhausted:
            return ScheduleResult((), (
                f"Search limit of {self.max_nodes} steps reached before a conflict-free "
                f"schedule of {profile.classes_per_semester} courses was found",
            ))
        if not schedules:
            return ScheduleResult((), (
                f"No conflict-free schedule of {profile.classes_per_semester} courses "
                f"could be built from the available courses",
            ))

        schedules.sort(key=lambda s: s.score, reverse=True)
        if top_k is not None:
            schedules = schedules[:top_k]
        return ScheduleResult(tuple(schedules), ())

    def _resolve_seed(self, filtered_courses, profile, catalog) -> tuple:
        """
        Check the necessary courses and turn them into the seed schedule.

        Returns:
            (seed_courses, None) on success, or (None, error_message)
        """
        pool = {c.code: c for c in filtered_courses}
        necessary_codes = list(dict.fromkeys(profile.necessary_courses))

        seed = []
        for code in necessary_codes:
            course = pool.get(code)
            if course is None:
                if catalog is not None and code in catalog:
                    return None, f"Necessary course {code} does not fit your constraints"
                if catalog is not None and code in catalog.malformed:
                    # Incomplete record for a course the student insists on
                    catalog.require(code)
                return None, f"Necessary course not found: {code}"
            seed.append(course)

        missing = [c.code for c in seed if not prerequisites_satisfied(c, profile.courses_taken)]
        if missing:
            return None, f"Missing prerequisites for: {', '.join(missing)}"

        if len(seed) > profile.classes_per_semester:
            return None, f"Too many necessary courses: {len(seed)} > {profile.classes_per_semester}"

        for i, first in enumerate(seed):
            for second in seed[i + 1:]:
                if courses_conflict(first, second):
                    return None, f"The needed courses {first.code} and {second.code} have a time conflict"

        return seed, None


class _Search:
    """
    State for one run of the depth-first search.

    A fresh instance is created per build() call, so concurrent requests
    never share seen keys, pools or candidate slots.
    """

    def __init__(self, profile, seed, required_options, elective_options, scorer, max_schedules,
                 max_nodes=MAX_SEARCH_NODES):
        self.capacity = profile.classes_per_semester
        self.quota = profile.required_courses_this_semester
        self.remaining_required = profile.remaining_required
        self.scorer = scorer
        self.max_schedules = max_schedules
        self.max_nodes = max_nodes

        self.required = required_options
        self.electives = elective_options
        self.required_used = [False] * len(required_options)
        self.elective_used = [False] * len(elective_options)

        self.slots = [None] * max(self.capacity, len(seed))
        for i, course in enumerate(seed):
            self.slots[i] = course
        self.seed_size = len(seed)
        self.seed_codes = frozenset(c.code for c in seed)
        self.seed_required = sum(1 for c in seed if c.code in self.remaining_required)
        self.need_writ = profile.needs_writ and not any(c.is_writ for c in seed)

        self.seen_keys = set()
        # Partial course sets already expanded. Quota, WRIT state and used
        # flags all follow from the set, so its subtree is the same whatever
        # order it was built in.
        self.explored = set()
        self.accepted = []
        self.nodes = 0
        self.cap_reached = False
        self.budget_exhausted = False

    def run(self) -> list:
        self._explore(self.seed_size, self.seed_codes, self.seed_required, self.need_writ)
        return self.accepted

    def _fits(self, course, cursor: int) -> bool:
        for i in range(cursor):
            if courses_conflict(self.slots[i], course):
                return False
        return True

    def _explore(self, cursor: int, placed: frozenset, required_added: int, need_writ: bool):
        if len(self.accepted) >= self.max_schedules:
            self.cap_reached = True
            return
        if self.nodes >= self.max_nodes:
            self.budget_exhausted = True
            return
        self.nodes += 1

        if cursor >= self.capacity:
            self._accept(cursor)
            return
        self.explored.add(placed)

        # Required courses first, while the quota is open
        if required_added < self.quota:
            for i, course in enumerate(self.required):
                if self.required_used[i]:
                    continue
                child = placed | {course.code}
                if child in self.explored or not self._fits(course, cursor):
                    continue
                self.slots[cursor] = course
                self.required_used[i] = True
                self._explore(cursor + 1, child, required_added + 1, need_writ and not course.is_writ)
                self.required_used[i] = False

        candidates = [i for i, used in enumerate(self.elective_used) if not used]
        if not candidates:
            return
        if need_writ:
            writ_only = [i for i in candidates if self.electives[i].is_writ]
            if writ_only:
                candidates = writ_only

        for i in candidates:
            course = self.electives[i]
            counts_as_required = course.code in self.remaining_required
            if counts_as_required and required_added >= self.quota:
                continue
            child = placed | {course.code}
            if child in self.explored or not self._fits(course, cursor):
                continue
            self.slots[cursor] = course
            self.elective_used[i] = True
            self._explore(
                cursor + 1,
                child,
                required_added + (1 if counts_as_required else 0),
                need_writ and not course.is_writ,
            )
            self.elective_used[i] = False

    def _accept(self, cursor: int):
        courses = self.slots[:cursor]
        key = "|".join(sorted(c.code for c in courses))
        if key in self.seen_keys:
            return
        self.seen_keys.add(key)
        schedule = Schedule(list(courses))
        schedule.score = self.scorer.score(schedule)
        self.accepted.append(schedule)
