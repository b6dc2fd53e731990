# trainlytics

A small command-line tool for planning workout routines and logging what you
actually lifted. Routines and workout logs are stored as plain JSON files.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
trainlytics
```

The menu lets you:

1. **Create a new routine.** You give it a name, then add exercises one at a
   time. For each one you enter its name, muscle group, equipment, planned sets
   and planned reps per set, and answer `y` or `Y` to add another. The routine
   is saved as `<name>.json`, with spaces in the name replaced by underscores,
   under `routines` in the data directory.
2. **Log a workout.** It lists the saved routines (sorted by file name) and
   asks you to pick one by number, asking again until the number is in range.
   Then, for every exercise, it asks for the reps and the weight (lbs) of each
   planned set, followed by free-form notes. The log is saved as
   `<routine name>_<YYYY-MM-DD>.json` under `logs` in the data directory, using
   today's local date.
3. **Exit.**

Any other choice prints `Invalid option.` If input ends before the menu has
everything it needs, the command exits with status 1.

To log a workout for a routine file directly, without the menu:

```
trainlytics --log Push_Day.json
```

The file name is looked up in the `routines` directory. If the routine cannot
be loaded or the input is not valid, the command prints
`Failed to load routine: ...` to standard error and exits with status 1.

## Data directory

By default the data directory is `./data`, relative to where you run the
command. Set the `TRAINLYTICS_DATA` environment variable to use another one.
The `routines` and `logs` subdirectories are created when needed.

```
data/
  routines/   one JSON file per routine
  logs/       one JSON file per logged workout
```

Files are written with four-space indentation and sorted keys. A routine file
looks like this:

```json
{
    "exercises": [
        {
            "exercise": {
                "equipment": "Barbell",
                "muscleGroup": "Chest",
                "name": "Bench Press"
            },
            "plannedReps": 10,
            "plannedSets": 4
        }
    ],
    "name": "Push Day"
}
```

A workout log records `routineName`, `date`, and `exercises`; each logged
exercise has `exercise`, `repsPerSet`, `weightPerSet` and `notes`.

## Using it as a library

```python
from trainlytics.models import Exercise, Routine
from trainlytics.storage import load_routine, save_routine

routine = Routine("Push Day")
routine.add_exercise(Exercise("Bench Press", "Chest", "Barbell"), 4, 10)
path = save_routine(routine, "Push_Day.json")

loaded = load_routine("Push_Day.json")
assert loaded == routine
```

- `trainlytics.models` holds the dataclasses `Exercise`, `ExerciseEntry`,
  `Routine`, `LoggedExercise` and `WorkoutLog`, each with `to_dict()` and
  `from_dict()` for its JSON form. `from_dict()` raises `KeyError` for a
  missing field and `TypeError` for a field of the wrong type.
- `trainlytics.storage` has `save_routine`, `load_routine`, `save_log` and
  `load_log`, plus `routine_path`, `log_path` and `data_root()`. Every function
  except `data_root()` takes an optional `root` argument to use another data
  directory. `save_routine` and `save_log` return the path they wrote.
- `trainlytics.dates.current_date()` returns today's local date as
  `YYYY-MM-DD`.
- `trainlytics.cli` has the interactive pieces: `run`, `create_routine`,
  `log_routine`, `list_routines`, `select_routine` and `main`.

## What it does not do

The menu only creates routines and records workouts. It does not edit or
delete routines, and it does not show or summarise past logs; read them with
`trainlytics.storage.load_log` or open the JSON files directly.

## Running the tests

```
pip install .[test]
pytest
```