from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal

Intensity = Literal["low", "medium", "high"]


class CaloriesRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    exercise: str = Field(..., min_length=1, description="Name of the exercise")
    duration: float = Field(..., ge=1, allow_inf_nan=False, description="Duration in minutes")
    intensity: Intensity = Field(..., description="low, medium or high")

    @field_validator("duration", mode="before")
    @classmethod
    def reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("duration must be a number")
        return value


class CaloriesResponse(BaseModel):
    calories: int = Field(..., ge=0, description="Estimated calories burned")


class ErrorResponse(BaseModel):
    error: str
