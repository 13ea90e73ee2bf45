"""Candidate document persistence."""
from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from interviews.errors import ConflictError
from interviews.models import Candidate

from .sqlite import InterviewDatabase

# created_at holds fixed-width UTC ISO strings, so text order is time order
SORT_COLUMNS = {
    "createdAt": "created_at DESC, id DESC",
    "finalScore": "final_score DESC, created_at DESC",
}


@contextmanager
def scoped(db: InterviewDatabase, conn: Optional[sqlite3.Connection]) -> Iterator[sqlite3.Connection]:
    """Reuse a caller's transaction or open a fresh one."""

    if conn is not None:
        yield conn
        return
    with db.transaction() as own:
        yield own


def _row_to_candidate(row: sqlite3.Row) -> Candidate:
    return Candidate.model_validate_json(row["document"])


class CandidateStore:  # SQLite-backed candidate documents
    def __init__(self, db: InterviewDatabase) -> None:
        self._db = db

    @staticmethod
    def _params(candidate: Candidate) -> tuple:
        return (
            candidate.email,
            candidate.status,
            candidate.final_score,
            candidate.created_at.isoformat(timespec="microseconds"),
            candidate.model_dump_json(by_alias=True),
            candidate.id,
        )

    def insert(self, candidate: Candidate, conn: Optional[sqlite3.Connection] = None) -> Candidate:
        with scoped(self._db, conn) as c:
            try:
                c.execute(
                    """
                    INSERT INTO candidates (email, status, final_score, created_at, document, id)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    self._params(candidate),
                )
            except sqlite3.IntegrityError as exc:
                existing = self.get_by_email(candidate.email, conn=c)
                raise ConflictError(
                    "Candidate with this email already exists",
                    candidate_id=existing.id if existing else None,
                ) from exc
        return candidate

    def update(self, candidate: Candidate, conn: Optional[sqlite3.Connection] = None) -> Candidate:
        with scoped(self._db, conn) as c:
            c.execute(
                """
                UPDATE candidates
                SET email = ?, status = ?, final_score = ?, created_at = ?, document = ?
                WHERE id = ?
                """,
                self._params(candidate),
            )
        return candidate

    def get(self, candidate_id: str, conn: Optional[sqlite3.Connection] = None) -> Optional[Candidate]:
        with scoped(self._db, conn) as c:
            row = c.execute("SELECT document FROM candidates WHERE id = ?", (candidate_id,)).fetchone()
        return _row_to_candidate(row) if row else None

    def get_by_email(self, email: str, conn: Optional[sqlite3.Connection] = None) -> Optional[Candidate]:
        with scoped(self._db, conn) as c:
            row = c.execute("SELECT document FROM candidates WHERE email = ?", (email,)).fetchone()
        return _row_to_candidate(row) if row else None

    def list(
        self,
        *,
        status: Optional[str] = None,
        search: Optional[str] = None,
        sort: str = "createdAt",
        conn: Optional[sqlite3.Connection] = None,
    ) -> List[Candidate]:  # Newest first unless sorted by score
        order_by = SORT_COLUMNS.get(sort, SORT_COLUMNS["createdAt"])
        clauses: List[str] = []
        params: List[str] = []
        if status:
            clauses.append("status = ?")
            params.append(status)
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with scoped(self._db, conn) as c:
            rows = c.execute(f"SELECT document FROM candidates {where} ORDER BY {order_by}", params).fetchall()
        candidates = [_row_to_candidate(row) for row in rows]
        if search:
            needle = search.strip().lower()
            candidates = [
                cand
                for cand in candidates
                if needle in cand.name.lower() or needle in cand.email.lower() or needle in cand.job_role.lower()
            ]
        return candidates


__all__ = ["CandidateStore", "scoped"]
