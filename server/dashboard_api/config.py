"""Application configuration loaded from environment variables."""
import os
from functools import lru_cache
from pydantic_settings import BaseSettings

from health_scoring.models import Targets
from health_scoring.streaks import StreakPolicy


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database paths
    data_path: str = os.getenv("DATA_PATH", os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

    @property
    def summary_db_path(self) -> str:
        return os.path.join(self.data_path, "summary.db")

    # Scoring targets used when a request doesn't carry its own
    default_calorie_goal: int = 2000
    sleep_goal_minutes: int = 360
    # Zone that decides which calendar day is "today" for streaks
    default_tz: str = "UTC"

    # Streaks
    streak_lookback_days: int = 120
    streak_policy: StreakPolicy = StreakPolicy.LITERAL

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8082

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    class Config:
        env_prefix = "DASHBOARD_"

    def default_targets(self, calorie_goal: int | None = None) -> Targets:
        """Build scoring targets, optionally overriding the calorie goal."""
        return Targets(
            calorie_goal=self.default_calorie_goal if calorie_goal is None else calorie_goal,
            sleep_goal_minutes=self.sleep_goal_minutes,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
