import io
import unittest

from rich.console import Console
from rich.table import Table

from timetablegen.grid import to_grid
from timetablegen.interactive import render_grid, run_interactive, schedule_summary
from timetablegen.model import TimeSlot


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=160, force_terminal=False, color_system=None), buf


class TestInteractive(unittest.TestCase):
    def test_render_grid_columns(self) -> None:
        table = render_grid(to_grid([TimeSlot("일", "1", "A")]))
        self.assertIsInstance(table, Table)
        self.assertEqual(len(table.columns), 1 + 7)
        self.assertEqual(table.row_count, 8)

    def test_summary_lists_distinct_courses(self) -> None:
        schedule = [TimeSlot("월", "1", "A"), TimeSlot("수", "1", "A"), TimeSlot("화", "1", "B")]
        self.assertEqual(schedule_summary(schedule), "A, B")

    def test_run_interactive_shows_picked_grid(self) -> None:
        console, buf = _console()
        answers = iter(["x", "5", "2", ""])
        schedules = [[TimeSlot("월", "1", "A (1-01)")], [TimeSlot("화", "2", "B (2-03)")]]

        run_interactive(schedules, console=console, prompt_fn=lambda _msg: next(answers))

        out = buf.getvalue()
        self.assertIn("Not a number.", out)
        self.assertIn("Out of range.", out)
        self.assertIn("B(03)", out)
        self.assertIn("Bye.", out)

    def test_run_interactive_without_schedules(self) -> None:
        console, buf = _console()
        run_interactive([], console=console, prompt_fn=lambda _msg: "")
        self.assertIn("No valid schedules.", buf.getvalue())


if __name__ == "__main__":
    unittest.main()
