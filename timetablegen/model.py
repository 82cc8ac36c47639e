"""
Central data model definitions used across the project.

This module defines the canonical structure of Course and TimeSlot objects so that:
- the loader, the generator and the grid formatter share the same field names
- a schedule is always a plain list of TimeSlot objects
- every error the library can raise derives from TimetableError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Course:
    """
    Represents one line of the input CSV: one section of a course.

    Several Course objects may share the same course_id. Each of them is an
    alternative section of the same logical course.
    """

    course_id: int
    section: str
    name: str
    time_slots: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any iterable of tokens, store an immutable tuple
        object.__setattr__(self, "time_slots", tuple(self.time_slots))


@dataclass(frozen=True)
class TimeSlot:
    """
    Represents one class period of a section (e.g. day="월", period="1").
    """

    day: str
    period: str
    course_name: str

    @property
    def period_number(self) -> int:
        return int(self.period)

    @property
    def key(self) -> str:
        """Clash key: two slots with the same key cannot be taken together."""
        return self.day + self.period


# One TimeSlot per class period of every chosen section.
Schedule = List[TimeSlot]


def course_label(course: Course) -> str:
    """
    Build the label stored in every TimeSlot of a course, e.g. "자료구조 (1001-02)".

    The grid formatter relies on this exact shape to print "자료구조(02)".
    """
    return f"{course.name} ({course.course_id}-{course.section})"


@dataclass
class Issue:
    """
    A non-fatal problem found while loading or generating (bad row, bad token...).
    """

    kind: str
    message: str
    course_id: Optional[int] = None
    section: Optional[str] = None
    line_no: Optional[int] = None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TimetableError(Exception):
    """Base class of all errors raised by timetablegen."""


class FormatError(TimetableError, ValueError):
    """A time token such as '월요일1교시' could not be parsed."""

    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token


class DataRowError(TimetableError, ValueError):
    """A line of the input CSV is malformed."""

    def __init__(self, message: str, line_no: int, line: str) -> None:
        super().__init__(message)
        self.line_no = line_no
        self.line = line


class InvariantViolation(TimetableError, RuntimeError):
    """The grid formatter met a day that is not among its columns."""


class NoValidSchedulesError(TimetableError):
    """Generation finished without a single clash-free schedule."""
