import os
import logging
from typing import Any, List, Mapping, Optional, Tuple
import requests
from dotenv import load_dotenv
from client.form_model import WorkoutInput, WorkoutRecord, validate_workout
load_dotenv()

logger = logging.getLogger(__name__)

API_URL = os.getenv("CALORIE_API_URL", "http://localhost:8000")
API_TIMEOUT = float(os.getenv("CALORIE_API_TIMEOUT", "60"))
CALCULATE_PATH = "/api/calculate-calories"


class SubmissionError(RuntimeError):
    pass


class WorkoutFormController:
    """Validates workouts, sends them for estimation and keeps the session history.

    At most one submission is in flight at a time: ``busy`` is True while a
    request is pending and any other submit is refused. Records are only ever
    appended, in the order their estimates came back.
    """

    def __init__(self, api_url: str = API_URL, session=None, timeout: float = API_TIMEOUT):
        self.api_url = api_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.busy = False
        self.calories: Optional[int] = None
        self.last_workout: Optional[WorkoutInput] = None
        self._history: List[WorkoutRecord] = []

    @property
    def endpoint(self) -> str:
        return self.api_url + CALCULATE_PATH

    @property
    def history(self) -> Tuple[WorkoutRecord, ...]:
        return tuple(self._history)

    @property
    def total_workouts(self) -> int:
        return len(self._history)

    @property
    def total_calories(self) -> int:
        return sum(r.calories for r in self._history)

    def validate(self, raw: Mapping[str, Any]) -> WorkoutInput:
        return validate_workout(raw)

    def submit(self, workout: WorkoutInput) -> WorkoutRecord:
        if self.busy:
            raise SubmissionError("A submission is already in progress")
        self.busy = True
        try:
            calories = self._request_calories(workout)
        except SubmissionError as e:
            logger.error("❌ Error calculating calories: %s", e)
            raise
        finally:
            self.busy = False

        record = WorkoutRecord(**workout.model_dump(), calories=calories)
        self._history.append(record)
        self.calories = calories
        self.last_workout = workout
        return record

    def submit_form(self, raw: Mapping[str, Any]) -> WorkoutRecord:
        return self.submit(self.validate(raw))

    def _request_calories(self, workout: WorkoutInput) -> int:
        payload = {
            "exercise": workout.exercise,
            "duration": workout.duration,
            "intensity": workout.intensity,
        }
        try:
            response = self.session.post(self.endpoint, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise SubmissionError(f"Could not reach calorie service: {e}") from e

        if not 200 <= response.status_code < 300:
            raise SubmissionError(f"Calorie service returned {response.status_code}: {response.text}")
        try:
            body = response.json()
        except ValueError as e:
            raise SubmissionError(f"Calorie service returned invalid JSON: {e}") from e

        calories = body.get("calories") if isinstance(body, dict) else None
        if isinstance(calories, bool) or not isinstance(calories, int) or calories < 0:
            raise SubmissionError(f"Calorie service returned no usable calories: {body!r}")
        return calories
