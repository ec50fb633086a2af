#!/usr/bin/env python3
"""
run_tests.py
------------
Watch-mode test runner for Viral Dash.
Re-runs pytest whenever a Python, JSON or YAML file under src/ or tests/
changes.

Usage:
    python run_tests.py                      # Watch and re-run on changes
    python run_tests.py --run-once           # Run the suite once and exit
    python run_tests.py --only collision     # Run tests whose path contains "collision"
    python run_tests.py --coverage           # Add a coverage report
"""

import sys
import os
import time
import subprocess
import argparse
from pathlib import Path
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler


WATCHED_SUFFIXES = (".py", ".json", ".yaml", ".yml")
WATCHED_DIRS = ("src", "tests")


class TestRunner(FileSystemEventHandler):
    """Runs pytest when a watched file is modified."""

    def __init__(self, args):
        self.args = args
        self.last_run = 0
        self.debounce_time = 1.0
        self.project_root = Path(__file__).parent

    def on_modified(self, event):
        if event.is_directory:
            return

        path = Path(event.src_path)
        posix = path.as_posix()
        if path.suffix not in WATCHED_SUFFIXES:
            return
        if not any(f"{d}/" in posix for d in WATCHED_DIRS):
            return

        now = time.time()
        if now - self.last_run < self.debounce_time:
            return

        self.last_run = now
        self.run_tests()

    def build_command(self):
        cmd = [sys.executable, "-m", "pytest", "-v"]

        if self.args.only:
            targets = sorted(
                str(p.relative_to(self.project_root))
                for p in (self.project_root / "tests").rglob("test_*.py")
                if self.args.only in p.as_posix()
            )
            if not targets:
                print(f"No test files match '{self.args.only}', running everything")
            cmd.extend(targets)

        if self.args.coverage:
            cmd.extend([
                "--cov=viral_dash",
                "--cov-report=term-missing",
                "--cov-report=html",
            ])
        return cmd

    def run_tests(self):
        """Run the suite and report the outcome. Returns True on success."""
        print("\n" + "=" * 60)
        print("Running tests...")
        print("=" * 60)

        try:
            result = subprocess.run(self.build_command(), cwd=self.project_root)
        except KeyboardInterrupt:
            print("\nTest execution interrupted")
            return False
        except OSError as e:
            print(f"Error running tests: {e}")
            return False

        if result.returncode == 0:
            print("All tests passed!")
            return True
        print("Some tests failed!")
        return False


def main():
    parser = argparse.ArgumentParser(description="Watch-mode test runner for Viral Dash")
    parser.add_argument("--run-once", action="store_true",
                        help="Run tests once and exit")
    parser.add_argument("--only", metavar="TEXT",
                        help="Only run test files whose path contains TEXT")
    parser.add_argument("--coverage", action="store_true",
                        help="Generate coverage report (needs pytest-cov)")
    args = parser.parse_args()

    runner = TestRunner(args)

    if args.run_once:
        return 0 if runner.run_tests() else 1

    print("Watching src/ and tests/ (Ctrl+C to stop)")
    runner.run_tests()

    observer = Observer()
    for directory in WATCHED_DIRS:
        if os.path.exists(directory):
            observer.schedule(runner, directory, recursive=True)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
        print("\nFile watcher stopped")

    observer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
