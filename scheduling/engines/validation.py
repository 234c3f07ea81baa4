"""
Profile Validation.

Consistency checks that run around filtering. Each function returns a list
of human-readable messages; none of them raise. An empty list means the
check passed.

    validate_profile          before anything touches the catalog
    validate_course_existence once the term catalog is loaded
    validate_filtered         after CourseFilterEngine has run
"""

from ..config import MIN_CLASSES_PER_SEMESTER
from .prerequisites import prerequisites_satisfied
from .time_model import courses_conflict


def validate_profile(profile) -> list:
    """
    Check that the request is internally consistent.

    These problems make any search pointless (e.g. asking for more required
    courses than there are slots), so the planner stops if any are found.
    """
    errors = []
    classes = profile.classes_per_semester
    mwf = profile.day_balance.mwf_count
    tth = profile.day_balance.tth_count
    required = profile.required_courses_this_semester
    necessary = list(dict.fromkeys(profile.necessary_courses))

    if classes < MIN_CLASSES_PER_SEMESTER:
        errors.append(f"The number of classes per semester must be at least {MIN_CLASSES_PER_SEMESTER}")

    if mwf + tth > classes:
        errors.append(
            f"The total of MWF ({mwf}) and TTh ({tth}) classes exceeds the indicated number of {classes}"
        )

    if len(necessary) > classes:
        errors.append(
            f"You have specified {len(necessary)} necessary courses, but the maximum allowed is {classes}"
        )

    if mwf + tth != classes:
        errors.append(
            f"The total of MWF ({mwf}) and TTh ({tth}) classes must exactly match "
            f"the indicated number of {classes}"
        )

    if required > len(profile.remaining_required):
        errors.append(
            f"You requested {required} required courses this semester, but only "
            f"{len(profile.remaining_required)} are available in the remaining list"
        )

    if required > classes:
        errors.append(
            f"You requested {required} required courses this semester, "
            f"but the indicated number of classes is {classes}"
        )

    both = sorted(c for c in profile.courses_taken if c in necessary or c in profile.remaining_required)
    if both:
        errors.append(
            "The following courses are listed in both 'taken' and 'needed' or 'remaining': "
            + ", ".join(both)
        )

    not_remaining = [c for c in necessary if c not in profile.remaining_required]
    if not_remaining:
        errors.append("The following 'needed' courses are not in 'remaining': " + ", ".join(not_remaining))

    if necessary and len(necessary) > required:
        errors.append(
            f"You listed {len(necessary)} needed courses but only asked to take "
            f"{required} required courses this semester"
        )

    return errors


def validate_course_existence(profile, catalog) -> list:
    """Report necessary courses that are not in the term catalog at all."""
    bad = [code for code in dict.fromkeys(profile.necessary_courses) if code not in catalog]
    if not bad:
        return []
    if len(bad) == 1:
        return [f'Course "{bad[0]}" doesn\'t seem to exist']
    return ["These courses don't seem to exist: " + ", ".join(bad)]


def validate_filtered(filtered_courses, profile, catalog) -> list:
    """
    Check what survived filtering against what the student asked for.

    - Enough remaining-required courses must survive to meet the
      required-this-semester target.
    - Necessary courses must not clash with each other.
    - Necessary courses must have their prerequisites met.
    """
    errors = []
    available = {c.code for c in filtered_courses}
    required = profile.required_courses_this_semester

    dropped = sorted(code for code in profile.remaining_required if code not in available)
    if len(profile.remaining_required) - len(dropped) < required:
        plural = "" if required == 1 else "s"
        verb = " doesn't" if len(dropped) == 1 else "s don't"
        errors.append(
            f"Your request for {required} required course{plural} can't be met under your "
            f"current availability. These required course{verb} fit or don't exist: "
            + ", ".join(dropped)
        )

    necessary = [catalog.get(code) for code in dict.fromkeys(profile.necessary_courses)]
    necessary = [c for c in necessary if c is not None]
    for i, first in enumerate(necessary):
        for second in necessary[i + 1:]:
            if courses_conflict(first, second):
                errors.append(f"The needed courses {first.code} and {second.code} have a time conflict")

    for course in necessary:
        if not prerequisites_satisfied(course, profile.courses_taken):
            errors.append(f"Needed course {course.code} missing prerequisites")

    return errors
