"""
Meeting-time parsing and conflict detection.

Courses describe their meetings twice in the catalog:

    meets         "MWF 10-10:50a"      (human descriptor, used for day and
                                        time-block preferences)
    meetingTimes  '[{"meet_day": "0", "start_time": "1000",
                     "end_time": "1050"}, ...]'
                                       (structured, used for conflicts)

Parsing is lenient on purpose. A malformed meeting entry is dropped or read
as minute 0, so one bad row never removes a whole course from the catalog.
"""

import json

from ..config import TBA, THURSDAY_TOKEN
from ..logger import get_logger
from ..models import MeetingBlock, Weekday

log = get_logger("time")


def split_meets(meets: str) -> tuple:
    """
    Split a descriptor into (day token, time block).

    "MWF 10-10:50a" -> ("MWF", "10-10:50a"); a descriptor without a time
    part yields "TBA" for the block.
    """
    if not meets or not meets.strip():
        return "", TBA
    parts = meets.strip().split(" ", 1)
    if len(parts) == 1:
        return parts[0], TBA
    return parts[0], parts[1].strip()


def parse_meeting_days(meets: str) -> set:
    """
    Parse the day tokens out of a meeting descriptor.

    "Th" is a single day distinct from "T". It is stripped out before the
    remaining letters are scanned, so "TTh" gives {"T", "Th"} and "Th" alone
    gives {"Th"}. TBA and empty descriptors meet on no days.
    """
    days = set()
    if not meets or meets.strip() == TBA:
        return days

    day_part, _ = split_meets(meets)
    if THURSDAY_TOKEN in day_part:
        days.add(THURSDAY_TOKEN)
        day_part = day_part.replace(THURSDAY_TOKEN, "")

    for letter in day_part:
        if letter in ("M", "T", "W", "F"):
            days.add(letter)
    return days


def parse_time_to_minutes(value) -> int:
    """
    Convert a zero-padded 24-hour clock string to minutes since midnight.

    "900" -> 540, "1430" -> 870. Any length other than 3 or 4 reads as 0.
    Non-numeric strings of the right length raise ValueError.
    """
    if value is None:
        return 0
    text = str(value).strip()
    if len(text) not in (3, 4):
        return 0
    text = text.zfill(4)
    return int(text[:2]) * 60 + int(text[2:])


def parse_meeting_blocks(raw) -> list:
    """
    Build MeetingBlocks from the catalog's ``meetingTimes`` value.

    Accepts the JSON-encoded string the catalog stores, or an already
    decoded list of {meet_day, start_time, end_time} dicts. Blank or
    undecodable input returns an empty list; individual malformed entries
    are skipped.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        if not raw.strip():
            return []
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            log.debug("Unreadable meetingTimes %r: %s", raw, e)
            return []

    if not isinstance(raw, list):
        return []

    blocks = []
    for entry in raw:
        try:
            day = Weekday(int(entry["meet_day"]))
            start = parse_time_to_minutes(entry.get("start_time"))
            end = parse_time_to_minutes(entry.get("end_time"))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            log.debug("Skipping malformed meeting entry %r: %s", entry, e)
            continue
        blocks.append(MeetingBlock(day, start, end))
    return blocks


def blocks_conflict(first: MeetingBlock, second: MeetingBlock) -> bool:
    return first.overlaps(second)


def courses_conflict(first, second) -> bool:
    """
    True if any meeting of one course overlaps any meeting of the other.

    Symmetric. Courses without structured meeting times never conflict.
    """
    for a in first.meeting_times:
        for b in second.meeting_times:
            if a.overlaps(b):
                return True
    return False


def is_allowed_time(time_block, allowed) -> bool:
    """
    Check a descriptor's time block against the student's allowed blocks.

    An empty allowed set means "any time". TBA and missing blocks are always
    allowed since they cannot clash with anything.
    """
    if not allowed or time_block is None:
        return True
    if time_block == TBA:
        return True
    return time_block.strip() in allowed
