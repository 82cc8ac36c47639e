"""
CSV export of schedule grids.

Every accepted schedule becomes one CSV file that opens directly in a
spreadsheet:

    output/<input name>/<input name>_시간표1.csv
    output/<input name>/<input name>_시간표2.csv
    ...
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Sequence

from timetablegen.grid import Grid, to_grid
from timetablegen.model import Schedule


def schedule_filename(stem: str, number: int) -> str:
    return f"{stem}_시간표{number}.csv"


def export_grid_csv(grid: Grid, out_path: str | Path) -> Path:
    """
    Write one grid (header row + one row per period) to a CSV file.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    # utf-8-sig so that Excel shows Hangul correctly
    with out.open("w", encoding="utf-8-sig", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(grid.as_table())

    return out


def export_schedules(schedules: Sequence[Schedule], out_dir: str | Path, stem: str) -> List[Path]:
    """
    Export all schedules into out_dir/stem/. Returns the written paths (in order).
    """
    target = Path(out_dir) / stem
    target.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for i, schedule in enumerate(schedules, start=1):
        written.append(export_grid_csv(to_grid(schedule), target / schedule_filename(stem, i)))
    return written
