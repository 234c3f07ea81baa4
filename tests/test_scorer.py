import pytest

from scheduling.engines import ScheduleScorer
from scheduling.models import DayBalance, Schedule


@pytest.fixture
def courses(make_course):
    return {
        "core": make_course("CSCI 0320", "TTh 1-2:20p", start="1300", end="1420"),
        "math": make_course("MATH 0520", "MWF 10-10:50a"),
        "algo": make_course("CSCI 1570", "MWF 11-11:50a", start="1100", end="1150"),
        "econ": make_course("ECON 0110", "MWF 12-12:50p", start="1200", end="1250"),
        "writ": make_course("ENGL 0900", "TTh 10:30-11:50a", start="1030", end="1150", writ=True),
    }


def test_perfect_schedule_scores_100(courses, make_profile):
    profile = make_profile(
        day_balance=DayBalance(2, 1),
        remaining_required={"CSCI 0320"},
        required_courses_this_semester=1,
        preferred_departments={"CSCI", "MATH"},
    )
    schedule = Schedule([courses["core"], courses["math"], courses["algo"]])
    assert ScheduleScorer(profile).score(schedule) == 100.0


def test_non_preferred_elective_penalized(courses, make_profile):
    profile = make_profile(
        day_balance=DayBalance(2, 1),
        remaining_required={"CSCI 0320"},
        required_courses_this_semester=1,
        preferred_departments={"CSCI"},
    )
    schedule = Schedule([courses["core"], courses["math"], courses["algo"]])

    scorer = ScheduleScorer(profile)

    assert scorer.score(schedule) == 95.0
    assert scorer.breakdown(schedule)["departments"] == 5.0


def test_required_and_necessary_courses_skip_department_penalty(courses, make_profile):
    profile = make_profile(
        day_balance=DayBalance(3, 0),
        remaining_required={"MATH 0520"},
        necessary_courses=["ECON 0110"],
        required_courses_this_semester=1,
        preferred_departments={"CSCI"},
    )
    schedule = Schedule([courses["math"], courses["econ"], courses["algo"]])
    assert ScheduleScorer(profile).breakdown(schedule)["departments"] == 0.0


def test_no_department_penalty_without_preferences(courses, make_profile):
    profile = make_profile(day_balance=DayBalance(3, 0))
    schedule = Schedule([courses["math"], courses["econ"], courses["algo"]])
    assert ScheduleScorer(profile).score(schedule) == 100.0


def test_day_balance_and_required_penalties(courses, make_profile):
    profile = make_profile(
        day_balance=DayBalance(1, 2),
        remaining_required={"CSCI 0320", "MATH 0520", "PHYS 0070"},
        required_courses_this_semester=3,
    )
    # MWF 3 vs 1, TTh 0 vs 2 -> 4 off; 1 required of 3 -> 2 off
    schedule = Schedule([courses["math"], courses["econ"], courses["algo"]])
    penalties = ScheduleScorer(profile).breakdown(schedule)

    assert penalties["day_balance"] == 40.0
    assert penalties["required_count"] == 30.0
    assert ScheduleScorer(profile).score(schedule) == 30.0


def test_course_meeting_tuesday_and_friday_counts_in_both_buckets(make_course, make_profile):
    odd = make_course("LANG 0100", "TF 1-2:20p", start="1300", end="1420")
    schedule = Schedule([odd])

    balance = schedule.day_balance()

    assert (balance.mwf_count, balance.tth_count) == (1, 1)
    profile = make_profile(classes_per_semester=1, day_balance=DayBalance(1, 0))
    assert ScheduleScorer(profile).breakdown(schedule)["day_balance"] == 10.0


def test_missing_writ_penalty(courses, make_profile):
    profile = make_profile(day_balance=DayBalance(3, 0), needs_writ=True)
    without = Schedule([courses["math"], courses["econ"], courses["algo"]])
    with_writ = Schedule([courses["math"], courses["econ"], courses["writ"]])

    scorer = ScheduleScorer(profile)

    assert scorer.breakdown(without)["writ"] == 10.0
    assert scorer.breakdown(with_writ)["writ"] == 0.0


def test_score_never_negative(courses, make_profile):
    profile = make_profile(
        day_balance=DayBalance(0, 3),
        remaining_required={"X 1", "X 2", "X 3"},
        required_courses_this_semester=3,
        preferred_departments={"PHIL"},
        needs_writ=True,
    )
    schedule = Schedule([courses["math"], courses["econ"], courses["algo"]])
    assert ScheduleScorer(profile).score(schedule) == 0.0
