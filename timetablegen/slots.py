"""
Time token parsing.

A time token names one class period of a section, e.g. "월요일1교시"
(Monday, 1st period). Each token becomes exactly ONE TimeSlot.

Token rules:
- must contain the period marker "교시"
- the text before the marker is <full weekday name><period digit>
- the weekday is stored in its 1-character form ("월요일" -> "월")
- the period is a single ASCII digit 1-9
"""

from __future__ import annotations

import string
from typing import Dict, List

from timetablegen.model import FormatError, TimeSlot


PERIOD_MARKER = "교시"

# Full weekday name -> short name, in calendar order (Mon..Sun)
WEEKDAYS: Dict[str, str] = {
    "월요일": "월",
    "화요일": "화",
    "수요일": "수",
    "목요일": "목",
    "금요일": "금",
    "토요일": "토",
    "일요일": "일",
}

DAY_ORDER: List[str] = list(WEEKDAYS.values())


def parse_time_slot(token: str, course_name: str) -> TimeSlot:
    """
    Parse one time token into a TimeSlot carrying course_name as its label.

    Raises FormatError if the token does not follow the rules above.
    """
    raw = token.strip()

    if PERIOD_MARKER not in raw:
        raise FormatError(f"Invalid time token (missing {PERIOD_MARKER!r}): {token!r}", token)

    # empty pieces are skipped, so a stray leading marker does not hide the slot
    pieces = [p for p in raw.split(PERIOD_MARKER) if p]
    head = pieces[0] if pieces else ""
    if len(head) < 2:
        raise FormatError(f"Incomplete time token: {token!r}", token)

    full_day = head[:-1]
    period = head[-1]

    day = WEEKDAYS.get(full_day)
    if day is None:
        raise FormatError(f"Invalid weekday: {full_day!r} in {token!r}", token)

    if period not in string.digits:
        raise FormatError(f"Invalid period: {period!r} in {token!r}", token)
    if period == "0":
        raise FormatError(f"Period must be positive: {token!r}", token)

    return TimeSlot(day=day, period=period, course_name=course_name)
