"""
Pytest fixtures for Health Scoring tests.
"""
import csv
import sqlite3
import sys
import pytest
from pathlib import Path
from dotenv import load_dotenv

# Ensure src/ and the project root are on sys.path so tests can import
# health_scoring, the dashboard server and the scripts.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()

from health_scoring.models import DailySummaryRecord  # noqa: E402


SUMMARY_COLUMNS = [
    "summary_date",
    "calories_total",
    "calorie_target",
    "sleep_hours",
    "did_workout",
    "streak_color",
]


# ============================================================================
# Summary Record Fixtures
# ============================================================================

def make_record(
    summary_date: str,
    calories_total=None,
    calorie_target=None,
    sleep_hours=None,
    did_workout=None,
    streak_color=None,
) -> DailySummaryRecord:
    """Build a stored summary row; every field but the date defaults to missing."""
    return DailySummaryRecord(
        summary_date=summary_date,
        calories_total=calories_total,
        calorie_target=calorie_target,
        sleep_hours=sleep_hours,
        did_workout=did_workout,
        streak_color=streak_color,
    )


def tracked_day(summary_date: str, color: str) -> DailySummaryRecord:
    """A day with full data and the given stored color."""
    return make_record(summary_date, 2000, 2200, 7, True, color)


@pytest.fixture
def record_factory():
    """Return the summary record builder."""
    return make_record


@pytest.fixture
def tracked_day_factory():
    """Return the builder for fully tracked days."""
    return tracked_day


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def data_path():
    """Return the path to the CSV data directory."""
    return ROOT / "CSV_Data"


@pytest.fixture
def create_summary_database(tmp_path):
    """
    Factory fixture to write a summary.db into a temporary directory.

    Returns a function that accepts rows (tuples in SUMMARY_COLUMNS order)
    and returns the directory holding summary.db.
    """
    def _create_database(rows: list[tuple]) -> Path:
        db_path = tmp_path / "summary.db"
        conn = sqlite3.connect(db_path)
        try:
            cursor = conn.cursor()
            cursor.execute(
                f"CREATE TABLE daily_summary ({', '.join(f'{col} TEXT' for col in SUMMARY_COLUMNS)})"
            )
            placeholders = ", ".join("?" * len(SUMMARY_COLUMNS))
            cursor.executemany(f"INSERT INTO daily_summary VALUES ({placeholders})", rows)
            conn.commit()
        finally:
            conn.close()
        return tmp_path

    return _create_database


@pytest.fixture
def api_data_path(monkeypatch, tmp_path):
    """
    Point the dashboard API at a temporary data directory.

    Clears the cached settings so routes pick up the override, and swaps
    the database manager's settings for the duration of the test.
    """
    from server.dashboard_api.config import get_settings
    from server.dashboard_api.database import db_manager

    monkeypatch.setenv("DASHBOARD_DATA_PATH", str(tmp_path))
    get_settings.cache_clear()
    monkeypatch.setattr(db_manager, "settings", get_settings())

    yield tmp_path

    get_settings.cache_clear()


def load_csv_data(csv_path: Path) -> tuple:
    """
    Load CSV file and return (columns, rows).

    Args:
        csv_path: Path to the CSV file

    Returns:
        Tuple of (column_names, list_of_row_dicts)
    """
    with open(csv_path, 'r', newline='', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        columns = reader.fieldnames
        rows = list(reader)
    return columns, rows
