"""Daily scoring request/response models."""
from datetime import date as Date
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

from health_scoring.models import DailyInputs, DailyResult, Meal, SleepSession, Workout


class MealEntry(BaseModel):
    """A logged meal."""

    model_config = ConfigDict(allow_inf_nan=False)

    calories: Optional[float] = None


class SleepEntry(BaseModel):
    """A sleep session; timestamps are ISO 8601 strings."""

    model_config = ConfigDict(populate_by_name=True)

    start_at: str = Field(alias="startAt")
    end_at: str = Field(alias="endAt")


class WorkoutEntry(BaseModel):
    """A workout with start/end timestamps or an explicit duration."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    start_at: Optional[str] = Field(default=None, alias="startAt")
    end_at: Optional[str] = Field(default=None, alias="endAt")
    duration_min: Optional[float] = Field(default=None, alias="durationMin")


class DailyScoreRequest(BaseModel):
    """One day's raw logs to score."""

    model_config = ConfigDict(populate_by_name=True)

    tz: str = "UTC"
    day: Date = Field(alias="date")
    kcal_goal: Optional[int] = Field(default=None, alias="kcalGoal")
    meals: list[MealEntry] = []
    sleep_sessions: list[SleepEntry] = Field(default=[], alias="sleepSessions")
    workouts: list[WorkoutEntry] = []

    def to_inputs(self, targets) -> DailyInputs:
        """Convert to engine inputs with the resolved targets."""
        return DailyInputs(
            tz=self.tz,
            day=self.day,
            targets=targets,
            meals=[Meal(calories=m.calories) for m in self.meals],
            sleep_sessions=[SleepSession(start_at=s.start_at, end_at=s.end_at) for s in self.sleep_sessions],
            workouts=[
                Workout(start_at=w.start_at, end_at=w.end_at, duration_min=w.duration_min)
                for w in self.workouts
            ],
        )


class DailyScoreResponse(BaseModel):
    """Scored day as shown on the dashboard."""

    model_config = ConfigDict(populate_by_name=True)

    day: str = Field(serialization_alias="date")
    sleep_min: int = Field(serialization_alias="sleepMin")
    sleep_ok: bool = Field(serialization_alias="sleepOk")
    kcal_intake: int = Field(serialization_alias="kcalIntake")
    kcal_goal: int = Field(serialization_alias="kcalGoal")
    kcal_delta: int = Field(serialization_alias="kcalDelta")
    kcal_status: str = Field(serialization_alias="kcalStatus")
    kcal_ok: bool = Field(serialization_alias="kcalOk")
    gym_ok: bool = Field(serialization_alias="gymOk")
    gym_duration_min: int = Field(serialization_alias="gymDurationMin")
    gym_start_at: Optional[str] = Field(default=None, serialization_alias="gymStartAt")
    gym_end_at: Optional[str] = Field(default=None, serialization_alias="gymEndAt")
    score: int = Field(serialization_alias="scoreSmall")
    color: str
    calories_chip: str = Field(serialization_alias="caloriesChip")
    sleep_chip: str = Field(serialization_alias="sleepChip")
    gym_chip: str = Field(serialization_alias="gymChip")

    @classmethod
    def from_result(cls, result: DailyResult) -> "DailyScoreResponse":
        data = result.to_dict()
        data["day"] = data.pop("date")
        return cls(**data)
