"""Metric calculator API routes used by goal-setting and training flows."""
from fastapi import APIRouter, Query
from typing import Optional

from health_scoring import metrics

from ..models.metrics import (
    DeficitPlanResponse,
    EnergyTargetsRequest,
    EnergyTargetsResponse,
    OneRepMaxResponse,
    PlateauResponse,
    ProgressionResponse,
    TrendWeightResponse,
)

router = APIRouter(prefix="/api/health/metrics", tags=["Metrics"])


@router.post("/energy", response_model=EnergyTargetsResponse, response_model_by_alias=True)
async def get_energy_targets(request: EnergyTargetsRequest):
    """
    Compute BMR and TDEE, plus a calorie plan when a goal weight and
    timeframe are given.
    """
    person = metrics.PersonMetrics(
        weight_kg=request.person.weight_kg,
        height_cm=request.person.height_cm,
        age=request.person.age,
        sex=request.person.sex,
    )
    bmr = metrics.calculate_bmr(person)
    tdee = metrics.calculate_tdee(bmr, request.activity_factor)

    plan = None
    if request.goal_weight_kg is not None and request.weeks_to_goal is not None:
        deficit = metrics.plan_deficit(
            person.weight_kg, request.goal_weight_kg, request.weeks_to_goal, tdee
        )
        plan = DeficitPlanResponse(**deficit.to_dict())

    return EnergyTargetsResponse(bmr=bmr, tdee=tdee, plan=plan)


@router.get("/one-rep-max", response_model=OneRepMaxResponse, response_model_by_alias=True)
async def get_one_rep_max(
    weight: float = Query(gt=0, description="Weight lifted"),
    reps: int = Query(ge=1, le=30, description="Reps completed"),
):
    """Estimate a one-rep max (Epley)."""
    return OneRepMaxResponse(one_rep_max=metrics.one_rep_max(weight, reps))


@router.get("/progression", response_model=ProgressionResponse)
async def get_progression(
    weight: float = Query(gt=0, description="Current working weight (kg)"),
    rir: float = Query(ge=0, allow_inf_nan=False, description="Reps in reserve on the last set"),
):
    """Suggest the next working weight."""
    suggestion = metrics.suggest_progression(weight, rir)
    return ProgressionResponse(**suggestion.to_dict())


@router.get("/plateau", response_model=PlateauResponse)
async def get_plateau(
    weight_change: float = Query(alias="weightChange", allow_inf_nan=False, description="Trend weight change (kg)"),
    body_weight: float = Query(alias="bodyWeight", allow_inf_nan=False, description="Current body weight (kg)"),
    days: int = Query(ge=0, description="Days observed"),
    adherence: float = Query(ge=0, le=1, description="Fraction of days on plan"),
):
    """Check for a weight-loss plateau."""
    return PlateauResponse(
        plateau=metrics.detect_plateau(weight_change, body_weight, days, adherence)
    )


@router.get("/trend-weight", response_model=TrendWeightResponse, response_model_by_alias=True)
async def get_trend_weight(
    new_weight: float = Query(alias="newWeight", gt=0, description="Today's scale weight (kg)"),
    previous_trend: Optional[float] = Query(default=None, alias="previousTrend", allow_inf_nan=False, description="Stored trend weight"),
    lam: float = Query(default=metrics.DEFAULT_TREND_LAMBDA, gt=0, le=1, description="Smoothing factor"),
):
    """Advance the trend weight by one reading; the caller stores the result."""
    return TrendWeightResponse(
        trend_weight=metrics.next_trend_weight(previous_trend, new_weight, lam=lam)
    )
