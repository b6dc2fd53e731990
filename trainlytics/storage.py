"""Reading and writing routines and workout logs as JSON files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from trainlytics.models import Routine, WorkoutLog

DATA_ENV_VAR = "TRAINLYTICS_DATA"


def data_root() -> Path:
    """Return the data directory: $TRAINLYTICS_DATA, or ./data by default."""
    configured = os.environ.get(DATA_ENV_VAR)
    if configured:
        return Path(configured)
    return Path.cwd() / "data"


def _data_path(filename: str | os.PathLike[str], subdir: str, root: Path | None) -> Path:
    directory = (Path(root) if root is not None else data_root()) / subdir
    directory.mkdir(parents=True, exist_ok=True)
    return directory / filename


def routine_path(filename: str | os.PathLike[str], root: Path | None = None) -> Path:
    """Return the path of a routine file, creating the routines directory if needed."""
    return _data_path(filename, "routines", root)


def log_path(filename: str | os.PathLike[str], root: Path | None = None) -> Path:
    """Return the path of a log file, creating the logs directory if needed."""
    return _data_path(filename, "logs", root)


def _write_json(path: Path, data: dict[str, Any]) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=4, sort_keys=True, ensure_ascii=False)


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def save_routine(
    routine: Routine, file_path: str | os.PathLike[str], root: Path | None = None
) -> Path:
    """Write a routine as JSON into the routines directory and return the file path."""
    path = routine_path(file_path, root)
    _write_json(path, routine.to_dict())
    return path


def load_routine(file_path: str | os.PathLike[str], root: Path | None = None) -> Routine:
    """Read a routine from the routines directory."""
    return Routine.from_dict(_read_json(routine_path(file_path, root)))


def save_log(log: WorkoutLog, root: Path | None = None) -> Path:
    """Write a workout log as <routine>_<date>.json into the logs directory."""
    path = log_path(f"{log.routine_name}_{log.date}.json", root)
    _write_json(path, log.to_dict())
    return path


def load_log(filename: str | os.PathLike[str], root: Path | None = None) -> WorkoutLog:
    """Read a workout log from the logs directory."""
    return WorkoutLog.from_dict(_read_json(log_path(filename, root)))