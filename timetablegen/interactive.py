from __future__ import annotations

from typing import Callable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from timetablegen.grid import Grid, grid_for
from timetablegen.model import Schedule


def render_grid(grid: Grid, title: Optional[str] = None) -> Table:
    table = Table(title=title, box=box.SIMPLE_HEAVY, show_lines=True)
    header = grid.header()
    table.add_column(header[0], justify="right", style="bold")
    for day in header[1:]:
        table.add_column(day, justify="center", min_width=10)
    for row in grid.rows():
        table.add_row(*row)
    return table


def schedule_summary(schedule: Schedule) -> str:
    """
    One-line summary of a schedule: its distinct courses in order of appearance.
    """
    names: list[str] = []
    for slot in schedule:
        if slot.course_name not in names:
            names.append(slot.course_name)
    return ", ".join(names)


def _print_list(console: Console, schedules: Sequence[Schedule]) -> None:
    table = Table(title=f"Valid schedules ({len(schedules)})", box=box.SIMPLE)
    table.add_column("#", justify="right")
    table.add_column("Schedule")
    table.add_column("Courses")
    for i, schedule in enumerate(schedules, start=1):
        table.add_row(str(i), f"[bold cyan]시간표 {i}[/]", schedule_summary(schedule))
    console.print(table)


def run_interactive(
    schedules: Sequence[Schedule],
    console: Optional[Console] = None,
    prompt_fn: Optional[Callable[[str], str]] = None,
) -> None:
    """
    Browse the schedules: list them, pick a number, show its grid. Blank or 0 exits.
    """
    console = console or Console()
    prompt = prompt_fn or console.input

    if not schedules:
        console.print("No valid schedules.")
        return

    _print_list(console, schedules)

    while True:
        pick = prompt(f"Schedule number [1-{len(schedules)}, blank = exit]: ").strip()
        if not pick or pick == "0":
            console.print("Bye.")
            return
        if not pick.isdigit():
            console.print("Not a number.")
            continue

        i = int(pick)
        if not (1 <= i <= len(schedules)):
            console.print("Out of range.")
            continue

        console.print(render_grid(grid_for(schedules, i - 1), title=f"시간표 {i}"))
