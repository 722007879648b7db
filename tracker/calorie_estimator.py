import os
import re
import logging
from typing import Optional
from llm_connection import client_openai, MODEL_NAME

logger = logging.getLogger(__name__)

REFERENCE_WEIGHT_KG = 70
TEMPERATURE = 0.3
MAX_TOKENS = 50

# "digits" keeps every digit in the reply, "strict" wants the reply to be the number alone
PARSE_MODES = ("digits", "strict")
DEFAULT_PARSE_MODE = "digits"


def resolve_parse_mode(value: Optional[str]) -> str:
    mode = (value or DEFAULT_PARSE_MODE).strip().lower()
    if mode not in PARSE_MODES:
        logger.error(
            "❌ Unknown CALORIE_PARSE_MODE %r (expected one of %s), using %r",
            value, ", ".join(PARSE_MODES), DEFAULT_PARSE_MODE,
        )
        return DEFAULT_PARSE_MODE
    return mode


PARSE_MODE = resolve_parse_mode(os.getenv("CALORIE_PARSE_MODE"))

CALORIE_PROMPT = """Calculate the estimated calories burned for the following workout:
Exercise: {exercise}
Duration: {duration} minutes
Intensity: {intensity}

Please provide only the number of calories burned as a single number, based on average values for a person weighing {weight}kg."""

NON_DIGITS = re.compile(r"[^0-9]")
STRICT_ANSWER = re.compile(
    r"^\s*(\d{1,3}(?:,\d{3})+|\d+)\s*(?:kcal|cal|calories)?\.?\s*$",
    re.IGNORECASE,
)


def build_prompt(exercise: str, duration: int, intensity: str) -> str:
    return CALORIE_PROMPT.format(
        exercise=exercise,
        duration=duration,
        intensity=intensity,
        weight=REFERENCE_WEIGHT_KG,
    )


def complete_with_openai(prompt: str) -> str:
    """Send one user-role prompt to the chat-completions API and return the reply text."""
    if client_openai is None:
        raise RuntimeError("OpenAI client is not configured (set OPENAI_API_KEY)")
    response = client_openai.chat.completions.create(
        model=MODEL_NAME,
        messages=[{"role": "user", "content": prompt}],
        temperature=TEMPERATURE,
        max_tokens=MAX_TOKENS,
    )
    if not response.choices:
        return ""
    return response.choices[0].message.content or ""


def extract_calories(text: str, mode: Optional[str] = None) -> int:
    """Pull the calorie figure out of a model reply.

    In ``digits`` mode every non-digit character is dropped and the rest is
    read as one integer, so "Approximately 245 calories" gives 245 but
    "between 200 and 300" gives 200300. ``strict`` mode only accepts a reply
    that is a single number, optionally followed by a calorie unit.
    Raises ValueError when nothing usable is left.
    """
    mode = (mode or PARSE_MODE).lower()
    text = text or ""
    if mode == "strict":
        match = STRICT_ANSWER.match(text)
        if not match:
            raise ValueError(f"Reply is not a single number: {text!r}")
        return int(match.group(1).replace(",", ""))
    if mode != "digits":
        raise ValueError(f"Unknown parse mode: {mode}")
    digits = NON_DIGITS.sub("", text)
    if not digits:
        raise ValueError(f"No digits in reply: {text!r}")
    return int(digits)


if __name__ == "__main__":
    prompt = build_prompt("Running", 30, "medium")
    print(prompt)
    reply = complete_with_openai(prompt)
    print("the reply is ", reply)
    print(extract_calories(reply))
