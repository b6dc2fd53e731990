import json

import pytest

from trainlytics.models import Exercise, LoggedExercise, Routine, WorkoutLog
from trainlytics.storage import (
    data_root,
    load_log,
    load_routine,
    log_path,
    routine_path,
    save_log,
    save_routine,
)


def _cli_test_routine():
    routine = Routine("CLI Test Routine")
    routine.add_exercise(Exercise("Test Exercise", "Test Muscle", "Bodyweight"), 2, 10)
    return routine


def test_create_test_routine_for_cli_logging(tmp_path):
    path = save_routine(_cli_test_routine(), "CLI_Test_Routine.json", tmp_path)
    assert path == tmp_path / "routines" / "CLI_Test_Routine.json"
    assert (tmp_path / "routines" / "CLI_Test_Routine.json").exists()


def test_routine_round_trip(tmp_path):
    routine = _cli_test_routine()
    save_routine(routine, "CLI_Test_Routine.json", tmp_path)
    assert load_routine("CLI_Test_Routine.json", tmp_path) == routine


def test_routine_file_contents(tmp_path):
    path = save_routine(_cli_test_routine(), "r.json", tmp_path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["name"] == "CLI Test Routine"
    assert data["exercises"][0]["plannedSets"] == 2
    assert data["exercises"][0]["exercise"]["muscleGroup"] == "Test Muscle"


def test_routine_file_is_indented(tmp_path):
    path = save_routine(_cli_test_routine(), "r.json", tmp_path)
    assert '\n    "exercises": [' in path.read_text(encoding="utf-8")


def test_load_missing_routine_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_routine("missing.json", tmp_path)


def test_log_file_name_and_round_trip(tmp_path):
    log = WorkoutLog(
        "CLI Test Routine",
        "2025-04-18",
        [
            LoggedExercise(
                Exercise("Test Exercise", "Test Muscle", "Bodyweight"),
                [10, 8],
                [100.0, 95.0],
                "CLI test notes",
            )
        ],
    )
    path = save_log(log, tmp_path)
    assert path == tmp_path / "logs" / "CLI Test Routine_2025-04-18.json"
    assert path.name.startswith("CLI Test Routine")
    assert load_log(path.name, tmp_path) == log


def test_load_missing_log_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_log("nothing.json", tmp_path)


def test_paths_create_directories(tmp_path):
    routine_file = routine_path("a.json", tmp_path)
    log_file = log_path("b.json", tmp_path)
    assert routine_file.parent.is_dir()
    assert log_file.parent.is_dir()
    assert routine_file.parent.name == "routines"
    assert log_file.parent.name == "logs"


def test_data_root_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("TRAINLYTICS_DATA", str(tmp_path))
    assert data_root() == tmp_path
    save_routine(_cli_test_routine(), "env.json")
    assert (tmp_path / "routines" / "env.json").exists()


def test_data_root_default(tmp_path, monkeypatch):
    monkeypatch.delenv("TRAINLYTICS_DATA", raising=False)
    monkeypatch.chdir(tmp_path)
    assert data_root() == tmp_path / "data"


def test_load_invalid_json_raises(tmp_path):
    path = routine_path("bad.json", tmp_path)
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_routine("bad.json", tmp_path)


def test_saved_log_name_pattern(tmp_path):
    path = save_log(WorkoutLog("Push Day", "2025-04-18"), tmp_path)
    assert path.name == "Push Day_2025-04-18.json"
    assert path.parent == tmp_path / "logs"