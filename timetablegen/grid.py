"""
Weekly grid of one schedule (periods x weekdays).

Layout rules:
- rows: periods 1..max(8, highest period used)
- columns: Mon-Fri always, Sat if the schedule uses Sat or Sun, Sun only if it uses Sun
- cell: "Name(section)" for labels built by course_label(), else the raw label
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from timetablegen.model import InvariantViolation, Schedule, TimeSlot
from timetablegen.slots import DAY_ORDER, PERIOD_MARKER


MIN_PERIODS = 8
WEEKDAY_COLUMNS = DAY_ORDER[:5]
SATURDAY = DAY_ORDER[5]
SUNDAY = DAY_ORDER[6]
TIME_HEADER = "시간"

# "자료구조 (1001-02)" -> name="자료구조", section="02"
_LABEL_RE = re.compile(r"^(?P<name>.*?)\s*\((?P<course_id>\d+)-(?P<section>[^)]*)\)$")


@dataclass
class Grid:
    days: List[str]
    periods: List[int]
    cells: Dict[Tuple[int, str], str] = field(default_factory=dict)

    def cell(self, period: int, day: str) -> str:
        return self.cells.get((period, day), "")

    def header(self) -> List[str]:
        return [TIME_HEADER, *self.days]

    def rows(self) -> List[List[str]]:
        return [[f"{p}{PERIOD_MARKER}"] + [self.cell(p, d) for d in self.days] for p in self.periods]

    def as_table(self) -> List[List[str]]:
        """Header row followed by one row per period."""
        return [self.header()] + self.rows()


def compact_label(course_name: str) -> str:
    m = _LABEL_RE.match(course_name)
    if not m:
        return course_name
    return f"{m.group('name').strip()}({m.group('section').strip()})"


def days_to_show(schedule: Sequence[TimeSlot]) -> List[str]:
    used = {slot.day for slot in schedule}
    days = list(WEEKDAY_COLUMNS)
    # Sunday drags Saturday in with it, not the other way round
    if SUNDAY in used:
        days += [SATURDAY, SUNDAY]
    elif SATURDAY in used:
        days.append(SATURDAY)
    return days


def to_grid(schedule: Schedule) -> Grid:
    """
    Lay out one schedule as a Grid.

    Raises InvariantViolation if a slot falls on a day without a column or on
    a period without a row. The parser never produces such slots.
    """
    highest = max((slot.period_number for slot in schedule), default=MIN_PERIODS)
    grid = Grid(days=days_to_show(schedule), periods=list(range(1, max(MIN_PERIODS, highest) + 1)))

    for slot in schedule:
        if slot.day not in grid.days:
            raise InvariantViolation(f"Day {slot.day!r} is not a column of the grid {grid.days}")
        if slot.period_number not in grid.periods:
            raise InvariantViolation(f"Period {slot.period!r} is not a row of the grid")
        grid.cells[(slot.period_number, slot.day)] = compact_label(slot.course_name)

    return grid


def grid_for(schedules: Sequence[Schedule], index: int) -> Grid:
    """
    Grid of the schedule at index (0-based). Raises IndexError when out of range.
    """
    if not 0 <= index < len(schedules):
        raise IndexError(f"Schedule index {index} out of range (0..{len(schedules) - 1})")
    return to_grid(schedules[index])
