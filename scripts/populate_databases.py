#!/usr/bin/env python3
"""
Populate the daily summary SQLite database from CSV.

Creates the read-only store the dashboard API computes streaks from.
Columns are stored as TEXT, the way the logging subsystem writes them.

Usage:
    python scripts/populate_databases.py
    DATA_PATH=/tmp/demo python scripts/populate_databases.py
"""
import csv
import sqlite3
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent

# CSV to Database mappings
DATABASE_CONFIGS = [
    {
        "csv_file": "CSV_Data/daily_summary.csv",
        "db_file": "summary.db",
        "table_name": "daily_summary",
    },
]


def sanitize_column_name(name: str) -> str:
    """Sanitize column name for SQL compatibility."""
    # Replace non-alphanumeric characters with underscores
    sanitized = "".join(c if c.isalnum() else "_" for c in name)
    # Ensure it doesn't start with a number
    if sanitized and sanitized[0].isdigit():
        sanitized = "_" + sanitized
    return sanitized.lower()


def create_table(conn: sqlite3.Connection, table_name: str, headers: list[str], rows: list) -> int:
    """
    Create a TEXT-column table and insert rows.

    Returns:
        Number of rows in the table
    """
    cursor = conn.cursor()

    columns = ["id INTEGER PRIMARY KEY AUTOINCREMENT"] if "id" not in headers else []
    columns.extend(f"{header} TEXT" for header in headers)
    cursor.execute(f"CREATE TABLE {table_name} ({', '.join(columns)})")

    placeholders = ", ".join(["?"] * len(headers))
    insert_sql = f"INSERT INTO {table_name} ({', '.join(headers)}) VALUES ({placeholders})"
    cursor.executemany(insert_sql, rows)
    conn.commit()

    cursor.execute(f"SELECT COUNT(*) FROM {table_name}")
    return cursor.fetchone()[0]


def populate_database(config: dict, output_dir: Path) -> int:
    """
    Create and populate a SQLite database from a CSV file.

    Args:
        config: Dictionary with csv_file, db_file, and table_name
        output_dir: Directory the database file is written to

    Returns:
        Number of rows inserted
    """
    csv_path = BASE_DIR / config["csv_file"]
    db_path = output_dir / config["db_file"]

    # Check CSV exists
    if not csv_path.exists():
        print(f"  ERROR: CSV file not found: {csv_path}")
        return 0

    # Remove existing database file
    if db_path.exists():
        os.remove(db_path)
        print(f"  Removed existing: {db_path.name}")

    # Read CSV headers and data
    with open(csv_path, "r", newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        headers = [sanitize_column_name(h) for h in next(reader)]
        rows = list(reader)

    conn = sqlite3.connect(db_path)
    try:
        return create_table(conn, config["table_name"], headers, rows)
    finally:
        conn.close()


def main():
    """Populate the daily summary database."""
    output_dir = Path(os.getenv("DATA_PATH", str(BASE_DIR)))
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("Health Scoring Database Population Script")
    print("=" * 60)
    print(f"\nOutput directory: {output_dir}\n")

    for config in DATABASE_CONFIGS:
        print(f"Processing: {config['csv_file']} -> {config['db_file']}")

        row_count = populate_database(config, output_dir)

        print(f"  Created table: {config['table_name']}")
        print(f"  Rows inserted: {row_count}")
        print()

    print("Database files created:")
    for config in DATABASE_CONFIGS:
        db_path = output_dir / config["db_file"]
        if db_path.exists():
            size_kb = db_path.stat().st_size / 1024
            print(f"  {db_path} ({size_kb:.1f} KB)")


if __name__ == "__main__":
    main()
