"""Daily scoring API routes."""
from fastapi import APIRouter, HTTPException
import logging

from health_scoring.errors import TemporalParseError
from health_scoring.evaluator import evaluate_daily

from ..config import get_settings
from ..models.scoring import DailyScoreRequest, DailyScoreResponse

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/health", tags=["Scoring"])


@router.post("/score/daily", response_model=DailyScoreResponse, response_model_by_alias=True)
async def score_daily(request: DailyScoreRequest):
    """
    Score one day from its raw logs.

    Returns the sleep/nutrition/exercise checks, the 0-3 score, its color
    and the display chips. The calorie goal falls back to the configured
    default when the request doesn't carry one.
    """
    targets = get_settings().default_targets(request.kcal_goal)

    try:
        result = evaluate_daily(request.to_inputs(targets))
    except TemporalParseError as e:
        log.info(f"[API] Rejected daily score for {request.day}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return DailyScoreResponse.from_result(result)
