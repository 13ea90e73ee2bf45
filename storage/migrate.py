"""SQLite schema migrations."""
from __future__ import annotations

import os
import sqlite3
from typing import Iterable

# Each row keeps the full camelCase record in ``document``; the other
# columns mirror the fields that are filtered, sorted or kept unique.
SCHEMA: Iterable[str] = [
    """
CREATE TABLE IF NOT EXISTS candidates (
  id TEXT PRIMARY KEY,
  email TEXT NOT NULL UNIQUE,
  status TEXT NOT NULL,
  final_score REAL NOT NULL DEFAULT 0,
  created_at TEXT NOT NULL,
  document TEXT NOT NULL
);
""",
    """
CREATE INDEX IF NOT EXISTS idx_candidates_created_at ON candidates (created_at);
""",
    """
CREATE TABLE IF NOT EXISTS interview_sessions (
  id TEXT PRIMARY KEY,
  candidate_id TEXT NOT NULL UNIQUE,
  is_active INTEGER NOT NULL,
  last_activity_at TEXT NOT NULL,
  document TEXT NOT NULL
);
""",
    """
CREATE INDEX IF NOT EXISTS idx_sessions_activity ON interview_sessions (is_active, last_activity_at);
""",
]


def apply_schema(conn: sqlite3.Connection) -> None:
    cur = conn.cursor()
    for stmt in SCHEMA:
        cur.execute(stmt)
    conn.commit()


def migrate(db_path: str = "data/interviews.db") -> None:
    """Apply schema migrations to the SQLite database."""

    directory = os.path.dirname(db_path) or "."
    os.makedirs(directory, exist_ok=True)
    conn = sqlite3.connect(db_path)
    try:
        apply_schema(conn)
    finally:
        conn.close()


if __name__ == "__main__":
    from config.settings import settings

    migrate(settings.DB_PATH)
