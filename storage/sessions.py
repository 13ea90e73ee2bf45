"""Interview session persistence."""
from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import List, Optional

from interviews.models import InterviewSession

from .candidates import scoped
from .sqlite import InterviewDatabase


def _row_to_session(row: sqlite3.Row) -> InterviewSession:
    return InterviewSession.model_validate_json(row["document"])


class SessionStore:  # SQLite-backed session documents keyed by candidate
    def __init__(self, db: InterviewDatabase) -> None:
        self._db = db

    @staticmethod
    def _params(session: InterviewSession) -> tuple:
        return (
            session.candidate_id,
            1 if session.is_active else 0,
            session.last_activity_at.isoformat(),
            session.model_dump_json(by_alias=True),
            session.id,
        )

    def insert(self, session: InterviewSession, conn: Optional[sqlite3.Connection] = None) -> InterviewSession:
        with scoped(self._db, conn) as c:
            c.execute(
                """
                INSERT INTO interview_sessions (candidate_id, is_active, last_activity_at, document, id)
                VALUES (?, ?, ?, ?, ?)
                """,
                self._params(session),
            )
        return session

    def update(self, session: InterviewSession, conn: Optional[sqlite3.Connection] = None) -> InterviewSession:
        with scoped(self._db, conn) as c:
            c.execute(
                """
                UPDATE interview_sessions
                SET candidate_id = ?, is_active = ?, last_activity_at = ?, document = ?
                WHERE id = ?
                """,
                self._params(session),
            )
        return session

    def get_by_candidate(
        self, candidate_id: str, conn: Optional[sqlite3.Connection] = None
    ) -> Optional[InterviewSession]:
        with scoped(self._db, conn) as c:
            row = c.execute(
                "SELECT document FROM interview_sessions WHERE candidate_id = ?", (candidate_id,)
            ).fetchone()
        return _row_to_session(row) if row else None

    def list_active(self, conn: Optional[sqlite3.Connection] = None) -> List[InterviewSession]:
        with scoped(self._db, conn) as c:
            rows = c.execute(
                "SELECT document FROM interview_sessions WHERE is_active = 1 ORDER BY last_activity_at DESC"
            ).fetchall()
        return [_row_to_session(row) for row in rows]

    def purge_stale(self, older_than: datetime, conn: Optional[sqlite3.Connection] = None) -> int:
        """Delete inactive sessions last touched before ``older_than``."""

        with scoped(self._db, conn) as c:
            cur = c.execute(
                "DELETE FROM interview_sessions WHERE is_active = 0 AND datetime(last_activity_at) < datetime(?)",
                (older_than.isoformat(),),
            )
            return cur.rowcount


__all__ = ["SessionStore"]
