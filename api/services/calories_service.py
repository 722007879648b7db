import logging
from typing import Callable
from tracker.calorie_estimator import build_prompt, complete_with_openai, extract_calories

logger = logging.getLogger(__name__)

CompleteFn = Callable[[str], str]


class EstimationError(RuntimeError):
    pass


def format_duration(duration) -> str:
    if isinstance(duration, float) and duration.is_integer():
        return str(int(duration))
    return str(duration)


def estimate(exercise: str, duration, intensity: str, complete: CompleteFn = complete_with_openai) -> int:
    """Estimate calories burned for one workout.

    Every call is a fresh, billable completion request; nothing is cached
    and nothing is retried here. Any failure comes out as EstimationError.
    """
    prompt = build_prompt(exercise, format_duration(duration), intensity)
    try:
        reply = complete(prompt)
    except Exception as e:
        raise EstimationError(f"Completion call failed: {e}") from e
    try:
        calories = extract_calories(reply)
    except ValueError as e:
        raise EstimationError(str(e)) from e
    logger.info("Estimated %s kcal for %s (%s min, %s)", calories, exercise, duration, intensity)
    return calories
