"""Interactive command line for creating routines and logging workouts."""

from __future__ import annotations

import argparse
import json
import sys
from collections import deque
from pathlib import Path

from trainlytics.dates import current_date
from trainlytics.models import Exercise, LoggedExercise, Routine, WorkoutLog
from trainlytics.storage import data_root, load_routine, save_log, save_routine

BANNER = r"""
  _____ ___    _   ___ _  _ _ __   _______ ___ ___ ___
 |_   _| _ \  /_\ |_ _| \| | |\ \ / /_   _|_ _/ __/ __|
   | | |   / / _ \ | || .` | |_\ V /  | |  | | (__\__ \
   |_| |_|_\/_/ \_\___|_|\_|____|_|   |_| |___\___|___/

  1. Create new routine
  2. Log a workout
  3. Exit
"""


class _Console:
    """Reads whitespace-separated values and whole lines from standard input."""

    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    @staticmethod
    def say(text: str) -> None:
        sys.stdout.write(text)
        sys.stdout.flush()

    @staticmethod
    def _readline() -> str:
        line = sys.stdin.readline()
        if line == "":
            raise EOFError("unexpected end of input")
        return line

    def token(self, prompt: str) -> str:
        self.say(prompt)
        while not self._pending:
            self._pending.extend(self._readline().split())
        return self._pending.popleft()

    def integer(self, prompt: str) -> int:
        text = self.token(prompt)
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"expected a whole number, got {text!r}") from None

    def number(self, prompt: str) -> float:
        text = self.token(prompt)
        try:
            return float(text)
        except ValueError:
            raise ValueError(f"expected a number, got {text!r}") from None

    def skip_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pending.clear()

    def line(self, prompt: str) -> str:
        self.say(prompt)
        if self._pending:
            text = " ".join(self._pending)
            self._pending.clear()
            return text
        return self._readline().rstrip("\r\n")


def _routine_files(directory: str | Path) -> list[Path]:
    return sorted(
        (entry for entry in Path(directory).iterdir() if entry.suffix == ".json"),
        key=lambda entry: entry.name,
    )


def _routines_dir(root: Path | None) -> Path:
    directory = (Path(root) if root is not None else data_root()) / "routines"
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def list_routines(directory: str | Path) -> list[str]:
    """Print the saved routines in a directory, numbered; return their names."""
    names = [entry.stem for entry in _routine_files(directory)]
    print("\nAvailable Routines:")
    for number, name in enumerate(names, start=1):
        print(f" [{number}] {name}")
    return names


def select_routine(directory: str | Path) -> str | None:
    """Ask the user to pick a routine file; return its file name, or None if there are none."""
    files = [entry.name for entry in _routine_files(directory)]
    if not files:
        print("No routines found.")
        return None

    console = _Console()
    while True:
        try:
            choice = console.integer(f"\nSelect a routine (1-{len(files)}): ")
        except ValueError:
            choice = -1
        console.skip_line()
        if 1 <= choice <= len(files):
            return files[choice - 1]


def log_routine(routine: Routine, root: Path | None = None) -> WorkoutLog:
    """Ask for reps, weight and notes for every planned set, then save the log."""
    console = _Console()
    log = WorkoutLog(routine_name=routine.name, date=current_date())

    print(f"\nLogging for routine: {routine.name}")
    for entry in routine.exercises:
        print(f"\n{entry.exercise.name} ({entry.planned_sets} sets):")
        reps: list[int] = []
        weights: list[float] = []
        for set_number in range(1, entry.planned_sets + 1):
            reps.append(console.integer(f" Set {set_number} - Reps: "))
            weights.append(console.number(f" Set {set_number} - Weight (lbs): "))
        console.skip_line()
        notes = console.line("Notes: ")
        log.exercises.append(LoggedExercise(entry.exercise, reps, weights, notes))

    save_log(log, root)
    print(f"\n Workout saved for {log.date}")
    return log


def create_routine(root: Path | None = None) -> Path:
    """Ask for a routine and its exercises, save it and return the file written."""
    console = _Console()
    name = console.line("\nEnter a name for the new routine: ")
    routine = Routine(name)

    adding = True
    while adding:
        exercise_name = console.line("\nExercise name: ")
        muscle_group = console.line("Muscle group: ")
        equipment = console.line("Equipment: ")
        sets = console.integer("Planned sets: ")
        reps = console.integer("Planned reps per set: ")
        console.skip_line()
        routine.add_exercise(Exercise(exercise_name, muscle_group, equipment), sets, reps)
        answer = console.line("\nAdd another exercise? (y/n): ")
        adding = answer in ("y", "Y")

    filename = name.replace(" ", "_") + ".json"
    path = save_routine(routine, filename, root)
    print(f"\n Routine '{name}' saved as {filename}")
    return path


def run(root: Path | None = None) -> None:
    """Show the main menu and carry out the chosen action."""
    routine_dir = _routines_dir(root)
    print(BANNER)

    console = _Console()
    try:
        choice: int | None = console.integer("\nSelect an option: ")
    except ValueError:
        choice = None
    console.skip_line()

    if choice == 1:
        create_routine(root)
    elif choice == 2:
        list_routines(routine_dir)
        filename = select_routine(routine_dir)
        if filename is not None:
            log_routine(load_routine(filename, root), root)
    elif choice == 3:
        print("Goodbye!")
    else:
        print("Invalid option.")


def main(argv: list[str] | None = None) -> int:
    """Start the menu, or with --log FILE log a workout for a saved routine."""
    parser = argparse.ArgumentParser(prog="trainlytics", description=__doc__)
    parser.add_argument("--log", metavar="FILE", help="routine file to log a workout for")
    args = parser.parse_args(argv)

    if args.log is None:
        try:
            run()
        except EOFError:
            return 1
        return 0

    try:
        routine = load_routine(args.log)
        log_routine(routine)
    except (OSError, ValueError, KeyError, TypeError, EOFError, json.JSONDecodeError) as error:
        print(f"Failed to load routine: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())