"""
Prerequisite evaluation.

Catalog ingestion resolves every prerequisite into AND-of-OR groups:

    [["MATH 0100", "CSCI 0150"], ["CSCI 0160"]]
      = (MATH 0100 OR CSCI 0150) AND CSCI 0160

No transitive expansion happens here; if a group lists a course, that exact
code has to be in the taken set.
"""


def missing_prerequisite_groups(course, taken) -> list:
    """Return the OR-groups of ``course`` with no member in ``taken``."""
    return [group for group in course.prereq_groups if not any(code in taken for code in group)]


def prerequisites_satisfied(course, taken) -> bool:
    """
    True if every prerequisite group has at least one taken course.

    Courses with no prerequisite groups are always satisfied.
    """
    if not course.prereq_groups:
        return True
    for group in course.prereq_groups:
        if not any(code in taken for code in group):
            return False
    return True
