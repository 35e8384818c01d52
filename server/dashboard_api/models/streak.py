"""Streak response models."""
from pydantic import BaseModel, Field, ConfigDict


class StreakSummary(BaseModel):
    """Current streak for the dashboard badge."""

    model_config = ConfigDict(populate_by_name=True)

    count: int
    color: str
    green_only: int = Field(serialization_alias="greenOnly")
    non_red: int = Field(serialization_alias="nonRed")
    message: str
    policy: str
    days_considered: int = Field(serialization_alias="daysConsidered")


class SummaryDay(BaseModel):
    """A stored day after the no-data override."""

    model_config = ConfigDict(populate_by_name=True)

    date: str
    effective_color: str = Field(serialization_alias="effectiveColor")
    has_data: bool = Field(serialization_alias="hasData")
