"""
Tests for CLI entry points.

These tests focus on:
- exit codes (missing file, no valid schedule, out-of-range number)
- the export command writing into a temporary directory
  (to avoid touching a real output folder during tests)
"""

import tempfile
import unittest
from pathlib import Path

from timetablegen.cli import build_parser, main


CSV_TEXT = (
    "id,section,name,times\n"
    "1001,01,자료구조,월요일1교시/수요일2교시\n"
    "1001,02,자료구조,화요일3교시\n"
    "2001,01,선형대수,월요일1교시\n"
    "2001,02,선형대수,금요일4교시\n"
)

CLASH_TEXT = "id,section,name,times\n1,01,A,월요일1교시\n2,01,B,월요일1교시\n"


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.csv = self.root / "courses.csv"
        self.csv.write_text(CSV_TEXT, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _exit_code(self, argv: list) -> int:
        with self.assertRaises(SystemExit) as ctx:
            main(argv)
        return ctx.exception.code

    def test_generate_ok(self) -> None:
        self.assertEqual(self._exit_code(["generate", str(self.csv)]), 0)

    def test_missing_file(self) -> None:
        self.assertEqual(self._exit_code(["generate", str(self.root / "missing.csv")]), 1)

    def test_no_valid_schedule(self) -> None:
        p = self.root / "clash.csv"
        p.write_text(CLASH_TEXT, encoding="utf-8")
        self.assertEqual(self._exit_code(["generate", str(p)]), 1)

    def test_show_in_and_out_of_range(self) -> None:
        self.assertEqual(self._exit_code(["show", str(self.csv), "1"]), 0)
        self.assertEqual(self._exit_code(["show", str(self.csv), "99"]), 1)

    def test_export_writes_files(self) -> None:
        out_dir = self.root / "out"
        self.assertEqual(self._exit_code(["export", str(self.csv), "--out-dir", str(out_dir)]), 0)
        files = sorted(p.name for p in (out_dir / "courses").glob("*.csv"))
        # 4 combinations, 자료구조 01 + 선형대수 01 clash on 월1
        self.assertEqual(files, ["courses_시간표1.csv", "courses_시간표2.csv", "courses_시간표3.csv"])

    def test_input_dir_is_created_when_missing(self) -> None:
        input_dir = self.root / "input"
        self.assertEqual(self._exit_code(["--input-dir", str(input_dir), "generate"]), 1)
        self.assertTrue(input_dir.is_dir())

    def test_single_file_in_input_dir_is_used(self) -> None:
        input_dir = self.root / "input"
        input_dir.mkdir()
        (input_dir / "only.csv").write_text(CSV_TEXT, encoding="utf-8")
        self.assertEqual(self._exit_code(["--input-dir", str(input_dir), "generate"]), 0)

    def test_parser_requires_command(self) -> None:
        with self.assertRaises(SystemExit):
            build_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
