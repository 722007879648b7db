import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from api.models.calories_model import CaloriesRequest, CaloriesResponse, ErrorResponse
from api.services.calories_service import estimate, EstimationError, CompleteFn
from tracker.calorie_estimator import complete_with_openai

logger = logging.getLogger(__name__)

ESTIMATION_FAILED = "Failed to calculate calories"

router = APIRouter(prefix="/api", tags=["calories"])


def get_completion() -> CompleteFn:
    return complete_with_openai


def estimation_failed() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": ESTIMATION_FAILED})


@router.post(
    "/calculate-calories",
    response_model=CaloriesResponse,
    responses={500: {"model": ErrorResponse}},
)
def calculate_calories(payload: CaloriesRequest, complete: CompleteFn = Depends(get_completion)):
    try:
        calories = estimate(payload.exercise, payload.duration, payload.intensity, complete=complete)
        return {"calories": calories}
    except EstimationError as e:
        logger.error("❌ Error calculating calories: %s", e)
        return estimation_failed()
    except Exception as e:
        logger.exception("❌ Unexpected error calculating calories: %s", e)
        return estimation_failed()
