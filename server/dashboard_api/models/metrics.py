"""Metric calculator request/response models."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Literal, Optional


class PersonEntry(BaseModel):
    """A user's physical baseline."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    weight_kg: float = Field(gt=0, alias="weightKg")
    height_cm: float = Field(gt=0, alias="heightCm")
    age: int = Field(ge=0)
    sex: Literal["male", "female"]


class EnergyTargetsRequest(BaseModel):
    """Inputs for BMR/TDEE and an optional weight-goal plan."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    person: PersonEntry
    activity_factor: float = Field(default=1.2, gt=0, alias="activityFactor")
    goal_weight_kg: Optional[float] = Field(default=None, gt=0, alias="goalWeightKg")
    weeks_to_goal: Optional[float] = Field(default=None, alias="weeksToGoal")


class DeficitPlanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    daily_deficit: Optional[int] = Field(serialization_alias="dailyDeficit")
    target_kcal: Optional[int] = Field(serialization_alias="targetKcal")
    is_defined: bool = Field(serialization_alias="isDefined")
    reason: Optional[str] = None


class EnergyTargetsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    bmr: float
    tdee: int
    plan: Optional[DeficitPlanResponse] = None


class ProgressionResponse(BaseModel):
    weight: float
    action: str


class PlateauResponse(BaseModel):
    plateau: bool


class OneRepMaxResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    one_rep_max: float = Field(serialization_alias="oneRepMax")


class TrendWeightResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trend_weight: float = Field(serialization_alias="trendWeight")
