import datetime
import pytest
from pydantic import ValidationError
from client.form_model import (
    WorkoutInput,
    WorkoutRecord,
    WorkoutValidationError,
    format_workout_date,
    validate_workout,
)

VALID = {"exercise": "Running", "duration": 30, "intensity": "medium", "date": datetime.date(2024, 1, 1)}


@pytest.mark.parametrize("intensity", ["low", "medium", "high"])
def test_valid_input_is_accepted(intensity):
    workout = validate_workout({**VALID, "intensity": intensity})
    assert workout == WorkoutInput(exercise="Running", duration=30, intensity=intensity, date=datetime.date(2024, 1, 1))


def test_form_strings_are_coerced():
    workout = validate_workout({"exercise": " Swimming ", "duration": "45", "intensity": "high", "date": "2024-03-15"})
    assert workout.exercise == "Swimming"
    assert workout.duration == 45
    assert workout.date == datetime.date(2024, 3, 15)


def test_missing_date_defaults_to_today():
    raw = {k: v for k, v in VALID.items() if k != "date"}
    assert validate_workout(raw).date == datetime.date.today()


@pytest.mark.parametrize("field,value,message", [
    ("exercise", "", "Exercise is required"),
    ("exercise", "   ", "Exercise is required"),
    ("duration", 0, "Duration must be at least 1 minute"),
    ("duration", -5, "Duration must be at least 1 minute"),
    ("duration", None, "Duration must be at least 1 minute"),
    ("duration", True, "Duration must be at least 1 minute"),
    ("duration", False, "Duration must be at least 1 minute"),
    ("duration", 12.5, "Duration must be a whole number of minutes"),
    ("intensity", "extreme", "Intensity must be one of: low, medium, high"),
    ("intensity", "Medium", "Intensity must be one of: low, medium, high"),
    ("date", "2024-02-30", "Date must be a valid calendar date"),
    ("date", "yesterday", "Date must be a valid calendar date"),
    ("date", None, "Date must be a valid calendar date"),
])
def test_invalid_field_is_identified(field, value, message):
    with pytest.raises(WorkoutValidationError) as exc:
        validate_workout({**VALID, field: value})
    assert exc.value.field == field
    assert exc.value.errors == {field: message}


def test_every_bad_field_is_reported():
    with pytest.raises(WorkoutValidationError) as exc:
        validate_workout({"exercise": "", "duration": 0, "intensity": "x", "date": "nope"})
    assert set(exc.value.errors) == {"exercise", "duration", "intensity", "date"}
    assert exc.value.field == "exercise"


def test_workout_is_immutable():
    workout = validate_workout(VALID)
    with pytest.raises(ValidationError):
        workout.duration = 60


def test_record_rejects_negative_calories():
    with pytest.raises(ValidationError):
        WorkoutRecord(**VALID, calories=-1)


def test_format_workout_date():
    assert format_workout_date(datetime.date(2024, 1, 1)) == "January 1, 2024"
    assert format_workout_date(datetime.date(2023, 11, 25)) == "November 25, 2023"
