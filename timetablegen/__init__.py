"""
timetablegen – builds every clash-free weekly timetable from a list of course sections.
"""

from pathlib import Path

from timetablegen.generator import generate_schedules, generate_valid_schedules, is_valid_schedule
from timetablegen.grid import Grid, grid_for, to_grid
from timetablegen.model import Course, FormatError, TimeSlot
from timetablegen.slots import parse_time_slot

__version__ = (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()

__all__ = [
    "Course",
    "FormatError",
    "Grid",
    "TimeSlot",
    "generate_schedules",
    "generate_valid_schedules",
    "grid_for",
    "is_valid_schedule",
    "parse_time_slot",
    "to_grid",
]
