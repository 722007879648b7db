import datetime
from typing import Any, Dict, Literal, Mapping
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

INTENSITIES = ("low", "medium", "high")

FIELD_MESSAGES = {
    "exercise": "Exercise is required",
    "duration": "Duration must be at least 1 minute",
    "intensity": "Intensity must be one of: low, medium, high",
    "date": "Date must be a valid calendar date",
}
DURATION_NOT_WHOLE = "Duration must be a whole number of minutes"


class WorkoutInput(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    exercise: str = Field(..., min_length=1)
    duration: int = Field(..., ge=1, description="Minutes")
    intensity: Literal["low", "medium", "high"]
    date: datetime.date

    @field_validator("duration", mode="before")
    @classmethod
    def reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("duration must be a number")
        return value


class WorkoutRecord(WorkoutInput):
    calories: int = Field(..., ge=0)


class WorkoutValidationError(ValueError):
    """Raised when one or more form fields are invalid.

    ``errors`` maps each offending field to a message that can be shown
    next to it; ``field`` is the first of them.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        self.field = next(iter(self.errors))
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


def _message_for(field: str, error_type: str) -> str:
    if field == "duration" and error_type == "int_from_float":
        return DURATION_NOT_WHOLE
    return FIELD_MESSAGES.get(field, "Invalid value")


def validate_workout(raw: Mapping[str, Any]) -> WorkoutInput:
    data = dict(raw)
    if "date" not in data:
        data["date"] = datetime.date.today()
    try:
        return WorkoutInput.model_validate(data)
    except ValidationError as e:
        errors = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            errors.setdefault(field, _message_for(field, err["type"]))
        raise WorkoutValidationError(errors) from None


def format_workout_date(value: datetime.date) -> str:
    return f"{value:%B} {value.day}, {value.year}"
