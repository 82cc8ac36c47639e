"""
Loading course data (CSV -> Course objects).

Input format (first line is a header and is skipped):

    id,section,name,token1/token2/.../tokenN
    1001,01,자료구조,월요일1교시/수요일2교시

Important rules:
- 1 line = 1 section = 1 Course
- a malformed line is reported and skipped, loading continues
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from timetablegen.model import Course, DataRowError, Issue

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    courses: List[Course] = field(default_factory=list)
    issues: List[Issue] = field(default_factory=list)


def parse_course_line(line: str, line_no: int) -> Course:
    """
    Parse exactly one CSV line into one Course.

    Raises DataRowError if the line has fewer than 4 fields, a non-numeric id
    or no time token at all.
    """
    parts = line.split(",")
    if len(parts) < 4:
        raise DataRowError(f"Line {line_no}: expected 4 fields, got {len(parts)}: {line!r}", line_no, line)

    try:
        course_id = int(parts[0].strip())
    except ValueError:
        raise DataRowError(f"Line {line_no}: invalid course id {parts[0]!r}", line_no, line) from None

    tokens = [t.strip() for t in parts[3].split("/") if t.strip()]
    if not tokens:
        raise DataRowError(f"Line {line_no}: no time slots given", line_no, line)

    return Course(
        course_id=course_id,
        section=parts[1].strip(),
        name=parts[2].strip(),
        time_slots=tokens,
    )


def load_courses(path: str | Path) -> LoadResult:
    """
    Load all courses of a CSV file. The first line is treated as header.

    Raises OSError if the file cannot be read; bad lines only produce issues.
    """
    csv_path = Path(path)
    # utf-8-sig: files saved by Excel start with a BOM
    lines = csv_path.read_text(encoding="utf-8-sig").splitlines()

    result = LoadResult()
    for line_no, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            result.courses.append(parse_course_line(line, line_no))
        except DataRowError as exc:
            logger.warning("Skipping %s: %s", csv_path.name, exc)
            result.issues.append(Issue(kind="row", message=str(exc), line_no=line_no))

    logger.debug("Loaded %d sections from %s", len(result.courses), csv_path)
    return result


def list_input_files(input_dir: str | Path) -> List[Path]:
    """
    Return the CSV files of an input directory, sorted by name.
    """
    d = Path(input_dir)
    if not d.is_dir():
        return []
    return sorted(p for p in d.glob("*.csv") if p.is_file())
