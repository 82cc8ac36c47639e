"""
CLI (Command Line Interface).

This module provides the terminal commands of the timetable generator, e.g.:

    timetablegen generate courses.csv
    timetablegen show courses.csv 3
    timetablegen export courses.csv --out-dir output
    timetablegen interactive courses.csv

When no CSV path is given, the single .csv file in ./input is used
(the directory is created on first run).

Note:
- Library modules only log; this module decides what is fatal
- Bad lines and bad time tokens are warnings, "no valid schedule" is an error
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from timetablegen import __version__
from timetablegen.export import export_schedules
from timetablegen.generator import GenerationResult, generate_schedules
from timetablegen.grid import grid_for
from timetablegen.interactive import render_grid, run_interactive, schedule_summary
from timetablegen.loader import list_input_files, load_courses
from timetablegen.model import NoValidSchedulesError, TimetableError


DEFAULT_INPUT_DIR = Path("input")
DEFAULT_OUTPUT_DIR = Path("output")

console = Console()
logger = logging.getLogger("timetablegen")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_input(csv_arg: Optional[str], input_dir: Path) -> Optional[Path]:
    """
    Return the CSV file to use, or None (after printing why) if there is none.
    """
    if csv_arg:
        path = Path(csv_arg)
        if not path.is_file():
            console.print(f"Input file not found: {path}")
            return None
        return path

    if not input_dir.exists():
        input_dir.mkdir(parents=True, exist_ok=True)
        console.print(f"Created input directory {input_dir}. Put a CSV file there and run again.")
        return None

    files = list_input_files(input_dir)
    if not files:
        console.print(f"No CSV file in {input_dir}.")
        return None
    if len(files) > 1:
        console.print(f"Several CSV files in {input_dir}, please name one:")
        for f in files:
            console.print(f"  - {f.name}")
        return None
    return files[0]


def _generate(path: Path) -> GenerationResult:
    """
    Load + generate. Raises NoValidSchedulesError when nothing is left.
    """
    loaded = load_courses(path)
    if not loaded.courses:
        raise NoValidSchedulesError(f"No valid course line in {path}")

    result = generate_schedules(loaded.courses)
    result.issues[:0] = loaded.issues
    if not result.schedules:
        raise NoValidSchedulesError(f"No valid schedule for {path} ({result.candidates} combinations tested)")
    return result


def _cmd_generate(args: argparse.Namespace, path: Path) -> int:
    result = _generate(path)

    console.print(
        f"Valid schedules: [bold]{len(result.schedules)}[/] "
        f"(of {result.candidates} combinations, {len(result.issues)} issues)"
    )
    for i, schedule in enumerate(result.schedules, start=1):
        console.print(f"{i:>3}) {schedule_summary(schedule)}")
    return 0


def _cmd_show(args: argparse.Namespace, path: Path) -> int:
    result = _generate(path)

    try:
        grid = grid_for(result.schedules, args.number - 1)
    except IndexError:
        console.print(f"Out of range: choose 1..{len(result.schedules)}")
        return 1

    console.print(render_grid(grid, title=f"시간표 {args.number}"))
    return 0


def _cmd_export(args: argparse.Namespace, path: Path) -> int:
    result = _generate(path)

    out_dir = Path(args.out_dir)
    written = export_schedules(result.schedules, out_dir, path.stem)
    console.print(f"Exported {len(written)} schedules to: {(out_dir / path.stem).resolve()}")
    return 0


def _cmd_interactive(args: argparse.Namespace, path: Path) -> int:
    result = _generate(path)
    run_interactive(result.schedules, console=console)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="timetablegen", description="Conflict-free timetable generator")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=DEFAULT_INPUT_DIR,
        help="Directory searched when no CSV path is given (default: ./input)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_generate = sub.add_parser("generate", help="List all valid schedules")
    p_generate.add_argument("csv", nargs="?", help="Course CSV file")

    p_show = sub.add_parser("show", help="Show one schedule as a weekly grid")
    p_show.add_argument("csv", nargs="?", help="Course CSV file")
    p_show.add_argument("number", type=int, help="Schedule number (starting at 1)")

    p_export = sub.add_parser("export", help="Export every schedule grid to CSV")
    p_export.add_argument("csv", nargs="?", help="Course CSV file")
    p_export.add_argument("--out-dir", default=str(DEFAULT_OUTPUT_DIR), help="Output directory (default: ./output)")

    p_interactive = sub.add_parser("interactive", help="Browse schedules interactively")
    p_interactive.add_argument("csv", nargs="?", help="Course CSV file")

    return parser


COMMANDS = {
    "generate": _cmd_generate,
    "show": _cmd_show,
    "export": _cmd_export,
    "interactive": _cmd_interactive,
}


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    path = _resolve_input(args.csv, args.input_dir)
    if path is None:
        raise SystemExit(1)

    handler = COMMANDS.get(args.command)
    if handler is None:
        raise SystemExit(2)

    try:
        raise SystemExit(handler(args, path))
    except NoValidSchedulesError as exc:
        console.print(f"[bold red]{exc}[/]")
        raise SystemExit(1)
    except (TimetableError, OSError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1)
