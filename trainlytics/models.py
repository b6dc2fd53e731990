"""Exercises, routines and workout logs, with their JSON dictionary forms."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _number(value: Any, key: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {key!r} must be a number, got {type(value).__name__}")
    return value


def _integer(data: Mapping[str, Any], key: str) -> int:
    return int(_number(data[key], key))


def _items(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data[key]
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be a list, got {type(value).__name__}")
    return value


@dataclass
class Exercise:
    """A single exercise: what it is called, what it works and what it needs."""

    name: str = ""
    muscle_group: str = ""
    equipment: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "muscleGroup": self.muscle_group,
            "equipment": self.equipment,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Exercise:
        return cls(
            name=_text(data, "name"),
            muscle_group=_text(data, "muscleGroup"),
            equipment=_text(data, "equipment"),
        )


@dataclass
class ExerciseEntry:
    """An exercise in a routine with its planned sets and reps per set."""

    exercise: Exercise = field(default_factory=Exercise)
    planned_sets: int = 0
    planned_reps: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "exercise": self.exercise.to_dict(),
            "plannedSets": self.planned_sets,
            "plannedReps": self.planned_reps,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ExerciseEntry:
        return cls(
            exercise=Exercise.from_dict(data["exercise"]),
            planned_sets=_integer(data, "plannedSets"),
            planned_reps=_integer(data, "plannedReps"),
        )


@dataclass
class Routine:
    """A named workout routine made of planned exercises."""

    name: str = ""
    exercises: list[ExerciseEntry] = field(default_factory=list)

    def add_exercise(self, exercise: Exercise, sets: int, reps: int) -> ExerciseEntry:
        """Append an exercise with its planned sets and reps; return the new entry."""
        entry = ExerciseEntry(exercise, sets, reps)
        self.exercises.append(entry)
        return entry

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "exercises": [entry.to_dict() for entry in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Routine:
        return cls(
            name=_text(data, "name"),
            exercises=[ExerciseEntry.from_dict(item) for item in _items(data, "exercises")],
        )


@dataclass
class LoggedExercise:
    """What was actually done for one exercise: reps and weight per set, plus notes."""

    exercise: Exercise = field(default_factory=Exercise)
    reps_per_set: list[int] = field(default_factory=list)
    weight_per_set: list[float] = field(default_factory=list)
    notes: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "exercise": self.exercise.to_dict(),
            "repsPerSet": list(self.reps_per_set),
            "weightPerSet": list(self.weight_per_set),
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LoggedExercise:
        return cls(
            exercise=Exercise.from_dict(data["exercise"]),
            reps_per_set=[int(_number(v, "repsPerSet")) for v in _items(data, "repsPerSet")],
            weight_per_set=[
                float(_number(v, "weightPerSet")) for v in _items(data, "weightPerSet")
            ],
            notes=_text(data, "notes"),
        )


@dataclass
class WorkoutLog:
    """A dated record of a performed routine."""

    routine_name: str = ""
    date: str = ""
    exercises: list[LoggedExercise] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "routineName": self.routine_name,
            "date": self.date,
            "exercises": [item.to_dict() for item in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WorkoutLog:
        return cls(
            routine_name=_text(data, "routineName"),
            date=_text(data, "date"),
            exercises=[LoggedExercise.from_dict(item) for item in _items(data, "exercises")],
        )