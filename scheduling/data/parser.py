"""
Catalog record parsing.

This module turns the raw dictionaries of the pre-ingested catalog into
Course objects.
"""

import json

from ..config import CATALOG_REQUIRED_FIELDS
from ..engines.time_model import parse_meeting_blocks
from ..exceptions import CourseRecordError
from ..models import Course


class CourseRecordParser:
    """
    Converts one catalog record into a Course.

    KEY RESPONSIBILITY: Validate that the record carries every field the
    planner depends on, and normalize the pre-computed fields.

    RECORD SHAPE (one entry of the catalog's "results" array):
        {
            "code": "CSCI 0320",
            "title": "Introduction to Software Engineering",
            "meets": "TTh 1-2:20p",
            "meetingTimes": "[{\"meet_day\":\"1\",\"start_time\":\"1300\",...}]",
            "writ": false,
            "prereqGroups": [["CSCI 0150", "CSCI 0170"], ["CSCI 0160"]],
            "srcdb": "202420"
        }

    LENIENCY:
    Meeting-time entries that cannot be read are dropped (see
    time_model.parse_meeting_blocks). Missing *fields* are not tolerated:
    they raise CourseRecordError so the loader can decide what to do.
    """

    def parse(self, record: dict) -> Course:
        if not isinstance(record, dict):
            raise CourseRecordError(None, reason=f"expected an object, got {type(record).__name__}")

        missing = [f for f in CATALOG_REQUIRED_FIELDS if f not in record]
        if missing:
            raise CourseRecordError(record.get("code"), missing)

        code = record["code"]
        if not isinstance(code, str) or not code.strip():
            raise CourseRecordError(None, reason="empty course code")
        code = code.strip()

        for name in ("title", "meets"):
            if record[name] is not None and not isinstance(record[name], str):
                raise CourseRecordError(code, reason=f"{name} must be a string, got {type(record[name]).__name__}")

        return Course(
            code=code,
            title=record["title"] or "",
            meets=(record["meets"] or "").strip(),
            meeting_times=tuple(parse_meeting_blocks(record["meetingTimes"])),
            is_writ=record["writ"] is True,
            prereq_groups=self._parse_prereq_groups(code, record["prereqGroups"]),
            term=str(record["srcdb"]),
        )

    def _parse_prereq_groups(self, code: str, raw) -> tuple:
        """
        Normalize prerequisite groups to a tuple of frozensets.

        Accepts a list of lists, or the same structure JSON-encoded. Empty
        OR-groups are dropped: they cannot be satisfied by anything and would
        otherwise block the course forever.
        """
        if raw is None:
            return ()
        if isinstance(raw, str):
            try:
                raw = json.loads(raw) if raw.strip() else []
            except json.JSONDecodeError:
                raise CourseRecordError(code, reason="prereqGroups is not valid JSON")
        if not isinstance(raw, list):
            raise CourseRecordError(code, reason="prereqGroups must be a list of lists")

        groups = []
        for group in raw:
            if isinstance(group, str):
                group = [group]
            if not isinstance(group, list):
                raise CourseRecordError(code, reason="prereqGroups must be a list of lists")
            codes = frozenset(c.strip() for c in group if isinstance(c, str) and c.strip())
            if codes:
                groups.append(codes)
        return tuple(groups)
