"""
Package entry point.

Allows running the application via:

    python -m timetablegen

This simply forwards execution to timetablegen.cli.main().
"""

from timetablegen.cli import main

if __name__ == "__main__":
    main()
