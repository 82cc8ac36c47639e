"""
Schedule generation.

Given the sections of all courses, build every combination that takes exactly
one section per course and keep the combinations without a clash.

Clash rule:
    two TimeSlots clash if they have the same day AND the same period
    (exact match on "day+period", no interval logic: "월1" and "월2" never clash)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from timetablegen.model import Course, FormatError, Issue, Schedule, TimeSlot, course_label
from timetablegen.slots import parse_time_slot

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    schedules: List[Schedule] = field(default_factory=list)
    issues: List[Issue] = field(default_factory=list)
    dropped_course_ids: List[int] = field(default_factory=list)
    candidates: int = 0


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


def group_courses(courses: Iterable[Course]) -> Dict[int, List[Course]]:
    """
    Group sections by course_id, keeping the order of first appearance.
    """
    groups: Dict[int, List[Course]] = {}
    for course in courses:
        groups.setdefault(course.course_id, []).append(course)
    return groups


def build_slot_sets(group: List[Course]) -> Tuple[List[List[TimeSlot]], List[Issue]]:
    """
    Parse every section of one course group into its slot-set.

    A section with a broken token is left out entirely (and reported),
    so it can never appear in an accepted schedule.
    """
    slot_sets: List[List[TimeSlot]] = []
    issues: List[Issue] = []

    for course in group:
        label = course_label(course)
        try:
            slot_sets.append([parse_time_slot(token, label) for token in course.time_slots])
        except FormatError as exc:
            logger.warning("Skipping section %s of course %s: %s", course.section, course.course_id, exc)
            issues.append(
                Issue(
                    kind="format",
                    message=str(exc),
                    course_id=course.course_id,
                    section=course.section,
                )
            )

    return slot_sets, issues


# ---------------------------------------------------------------------------
# Validity
# ---------------------------------------------------------------------------


def is_valid_schedule(schedule: Iterable[TimeSlot]) -> bool:
    """
    Return False as soon as a "day+period" key repeats, True otherwise.
    """
    seen: set[str] = set()
    for slot in schedule:
        if slot.key in seen:
            return False
        seen.add(slot.key)
    return True


def find_clashes(schedule: Iterable[TimeSlot]) -> List[Tuple[TimeSlot, TimeSlot]]:
    """
    Find clashing slot pairs (A,B), each pair appears once, A before B in the schedule.
    """
    slots = list(schedule)
    clashes: List[Tuple[TimeSlot, TimeSlot]] = []
    for i in range(len(slots)):
        for j in range(i + 1, len(slots)):
            if slots[i].key == slots[j].key:
                clashes.append((slots[i], slots[j]))
    return clashes


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_schedules(courses: Iterable[Course]) -> GenerationResult:
    """
    Build the full cartesian product over course groups and keep the valid ones.

    No pruning: every combination is built, then filtered. This is fine for
    the expected size (tens of courses with a handful of sections each).
    """
    result = GenerationResult()
    combinations: List[Schedule] = []
    started = False

    for course_id, group in group_courses(courses).items():
        slot_sets, issues = build_slot_sets(group)
        result.issues.extend(issues)

        if not slot_sets:
            # Dropping the course keeps the other courses schedulable
            logger.warning("Course %s has no usable section and is left out", course_id)
            result.dropped_course_ids.append(course_id)
            result.issues.append(
                Issue(kind="dropped", message=f"No usable section for course {course_id}", course_id=course_id)
            )
            continue

        if not started:
            combinations = [list(slot_set) for slot_set in slot_sets]
            started = True
        else:
            combinations = [existing + slot_set for existing in combinations for slot_set in slot_sets]

    result.candidates = len(combinations)
    for combo in combinations:
        if is_valid_schedule(combo):
            result.schedules.append(combo)
        elif logger.isEnabledFor(logging.DEBUG):
            a, b = find_clashes(combo)[0]
            logger.debug("Rejected: %s clashes with %s on %s", a.course_name, b.course_name, a.key)

    logger.info("Tested %d combinations, %d valid", result.candidates, len(result.schedules))
    return result


def generate_valid_schedules(courses: Iterable[Course]) -> List[Schedule]:
    """
    Return only the clash-free schedules (see generate_schedules for the details).
    """
    return generate_schedules(courses).schedules
