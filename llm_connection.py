import os
import logging
from openai import OpenAI
from dotenv import load_dotenv
load_dotenv()

logger = logging.getLogger(__name__)

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL") or None
MODEL_NAME = os.getenv("CALORIE_MODEL", "gpt-3.5-turbo")
OPENAI_TIMEOUT = float(os.getenv("OPENAI_TIMEOUT", "30"))
OPENAI_MAX_RETRIES = int(os.getenv("OPENAI_MAX_RETRIES", "2"))

try:
    client_openai = OpenAI(
        api_key=OPENAI_API_KEY,
        base_url=OPENAI_BASE_URL,
        timeout=OPENAI_TIMEOUT,
        max_retries=OPENAI_MAX_RETRIES,
    )
    logger.info("OpenAI client ready (model=%s)", MODEL_NAME)
except Exception as e:
    logger.error("❌ Error initializing OpenAI client: %s", e)
    client_openai = None
